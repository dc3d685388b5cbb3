from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from record_browser.core.filter_engine import FilterResult
from record_browser.ui.helpers import render_records, status_text
from record_browser.ui.ids import IDs


def build_records_panel(initial: FilterResult) -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader(
                html.Div(
                    [
                        html.Strong("Records"),
                        html.Small(
                            status_text(initial),
                            id=IDs.Control.STATUS_BAR,
                            className="text-muted ms-auto",
                        ),
                    ],
                    className="d-flex align-items-center",
                ),
                className="p-2",
            ),
            dbc.CardBody(
                html.Div(
                    render_records(initial),
                    id=IDs.Control.RECORDS_CONTAINER,
                ),
                className="rb-main-body",
            ),
        ],
        className="rb-maincard",
    )
