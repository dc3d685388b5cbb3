from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dcc

from record_browser.core.filter_state import FilterState
from record_browser.ui.callbacks.callbacks_utils import load_marker
from record_browser.ui.ids import IDs
from record_browser.ui.layout.build_filter_panel import build_filter_panel
from record_browser.ui.layout.build_navbar import build_navbar
from record_browser.ui.layout.build_records_panel import build_records_panel

if TYPE_CHECKING:
    from record_browser.ui.context import AppContext


def build_layout(ctx: AppContext):
    initial_state = FilterState()
    initial = ctx.engine.result(initial_state)

    navbar = build_navbar(ctx.global_config)
    filter_panel = build_filter_panel(initial.categories, initial_state)
    records_panel = build_records_panel(initial)

    return dbc.Container(
        fluid=True,
        className="rb-root",
        children=[
            navbar,

            # App-level stores (in-memory only: filters are not persisted)
            dcc.Store(id=IDs.Store.FILTER_STATE, storage_type="memory", data=initial_state.to_dict()),
            dcc.Store(id=IDs.Store.LOAD_MARKER, storage_type="memory", data=load_marker(ctx.store)),

            # Polls the store until the one-shot load settles, then switches itself off
            dcc.Interval(
                id=IDs.Control.LOAD_POLL,
                interval=ctx.global_config.poll_interval_ms,
                disabled=ctx.store.is_settled,
            ),

            dbc.Row(
                [
                    dbc.Col(filter_panel, md=3, className="mt-3"),
                    dbc.Col(records_panel, md=9, className="mt-3"),
                ],
                className="gx-3",
            ),
        ],
    )
