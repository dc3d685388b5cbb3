from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import dash
import dash_bootstrap_components as dbc
from dash import Input, Output, State

from record_browser.ui.callbacks.callbacks_utils import load_marker, safe_filter_state
from record_browser.ui.helpers import category_buttons, render_records, status_text
from record_browser.ui.ids import IDs

if TYPE_CHECKING:
    from record_browser.ui.context import AppContext

logger = logging.getLogger(__name__)


def register_render_callbacks(app: dash.Dash, ctx: AppContext) -> None:
    # ---------------------------------------------------------
    # Load lifecycle: poll store until the load settles
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.LOAD_MARKER, "data"),
        Output(IDs.Control.LOAD_POLL, "disabled"),
        Input(IDs.Control.LOAD_POLL, "n_intervals"),
        State(IDs.Store.LOAD_MARKER, "data"),
    )
    def poll_store(_n_intervals: int | None, seen: dict | None):
        marker = load_marker(ctx.store)
        settled = ctx.store.is_settled
        if marker == seen:
            return dash.no_update, settled
        return marker, settled

    # ---------------------------------------------------------
    # (load marker, FilterState) -> buttons, table, status
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.CATEGORY_BUTTONS, "children"),
        Output(IDs.Control.RECORDS_CONTAINER, "children"),
        Output(IDs.Control.STATUS_BAR, "children"),
        Input(IDs.Store.LOAD_MARKER, "data"),
        Input(IDs.Store.FILTER_STATE, "data"),
    )
    def render_view(_marker: dict | None, fs_data: dict[str, Any] | None):
        state = safe_filter_state(fs_data)
        try:
            result = ctx.engine.result(state)
        except Exception:
            logger.exception(
                "Error in render_view",
                extra={"filter_state": fs_data},
            )
            alert = dbc.Alert(
                "Something went wrong while filtering records. "
                "If this keeps happening, grab the logs and open an issue.",
                color="danger",
            )
            return dash.no_update, alert, "Error"

        logger.debug(
            "render_view",
            extra={
                "selected_category": state.selected_category,
                "n_visible": len(result.records),
                "n_total": result.total,
                "status": result.status.value,
            },
        )
        return (
            category_buttons(result.categories, state.selected_category),
            render_records(result),
            status_text(result),
        )
