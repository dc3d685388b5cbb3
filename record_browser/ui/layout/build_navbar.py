from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from record_browser.config.model import GlobalConfig


def build_navbar(global_config: GlobalConfig) -> dbc.Navbar:
    source = global_config.data_url or "no data source configured"

    return dbc.Navbar(
        dbc.Container(
            fluid=True,
            children=[
                html.Div(
                    [
                        html.H2(global_config.ui_title, className="mb-0"),
                        html.Small(
                            global_config.subtitle,
                            className="text-muted",
                            id="navbar-subtitle",
                        ),
                    ],
                    className="d-flex flex-column justify-content-center",
                ),
                html.Div(
                    [
                        html.Div("Data source", className="navbar-source-title"),
                        html.Code(source, className="navbar-source-url"),
                    ],
                    className="ms-auto text-end",
                    style={"maxWidth": "420px", "marginRight": "24px"},
                ),
            ],
        ),
        dark=False,
        className="shadow-sm rb-navbar",
    )
