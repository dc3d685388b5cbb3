from __future__ import annotations

from typing import Sequence

import dash_bootstrap_components as dbc
from dash import html

from record_browser.core.filter_state import FilterState
from record_browser.ui.helpers import category_buttons
from record_browser.ui.ids import IDs


def build_filter_panel(categories: Sequence[str], state: FilterState) -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader("Filters", className="fw-semibold"),
            dbc.CardBody(
                [
                    html.Div(
                        id="search-filter-container",
                        children=[
                            html.Label("Search", className="form-label"),
                            dbc.Input(
                                id=IDs.Control.SEARCH_INPUT,
                                type="search",
                                value=state.search_text,
                                placeholder="Name, type or id",
                                debounce=False,
                                className="mb-3",
                            ),
                        ],
                    ),
                    html.Div(
                        id="category-filter-container",
                        children=[
                            html.Label("Category", className="form-label"),
                            html.Div(
                                category_buttons(categories, state.selected_category),
                                id=IDs.Control.CATEGORY_BUTTONS,
                                className="d-flex flex-wrap",
                            ),
                        ],
                    ),
                ]
            ),
        ],
        className="rb-sidebar",
    )
