from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import dash
from dash import ALL, Input, Output, State, exceptions

from record_browser.ui.callbacks.callbacks_utils import next_filter_state, safe_filter_state
from record_browser.ui.ids import IDs

if TYPE_CHECKING:
    from record_browser.ui.context import AppContext

logger = logging.getLogger(__name__)


def register_filter_callbacks(app: dash.Dash, ctx: AppContext) -> None:
    # ---------------------------------------------------------
    # UI controls -> FilterState store
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.FILTER_STATE, "data"),
        Input(IDs.Control.SEARCH_INPUT, "value"),
        Input({"type": IDs.Pattern.CATEGORY_BUTTON, "index": ALL}, "n_clicks"),
        State(IDs.Store.FILTER_STATE, "data"),
        prevent_initial_call=True,
    )
    def sync_filter_state(search_value: str | None, _clicks: list[Any], fs_data: dict | None):
        triggered = dash.ctx.triggered
        triggered_value = triggered[0].get("value") if triggered else None

        current = safe_filter_state(fs_data)
        new_state = next_filter_state(
            current,
            dash.ctx.triggered_id,
            search_value,
            triggered_value,
        )
        if new_state is None:
            raise exceptions.PreventUpdate

        logger.debug(
            "filter_state_changed",
            extra={
                "selected_category": new_state.selected_category,
                "search_text": new_state.search_text,
            },
        )
        return new_state.to_dict()
