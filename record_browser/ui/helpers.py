from __future__ import annotations

from typing import List, Sequence

import dash_bootstrap_components as dbc
from dash import dash_table, html

from record_browser.core.filter_engine import FilterResult
from record_browser.core.record import Record
from record_browser.services.data_store import LoadStatus
from record_browser.ui.ids import IDs, category_button_id

NO_DATA_MESSAGE = "No data found"
LOADING_MESSAGE = "Loading records…"

TABLE_COLUMNS = [
    {"name": "ID", "id": "id"},
    {"name": "Name", "id": "name"},
    {"name": "Type", "id": "type"},
]

_FONT = 'system-ui, -apple-system, BlinkMacSystemFont, "SF Pro Text", "Segoe UI", sans-serif'


def category_buttons(categories: Sequence[str], selected: str) -> List[dbc.Button]:
    """One button per category; the selected one is rendered solid."""
    return [
        dbc.Button(
            category,
            id=category_button_id(category),
            n_clicks=0,
            color="primary",
            outline=category != selected,
            size="sm",
            className="me-2 mb-2",
        )
        for category in categories
    ]


def records_table(records: Sequence[Record]) -> dash_table.DataTable:
    """
    Build a styled Dash DataTable for the filtered view.
    Row order is the view order; sorting and paging stay off.
    """
    return dash_table.DataTable(
        id=IDs.Control.RECORDS_TABLE,
        data=[r.to_dict() for r in records],
        columns=TABLE_COLUMNS,

        style_table={
            "overflowX": "auto",
        },
        style_as_list_view=True,
        style_cell={
            "fontFamily": _FONT,
            "fontSize": "13px",
            "padding": "6px 8px",
            "border": "none",
            "textAlign": "left",
            "minWidth": "80px",
            "maxWidth": "360px",
            "whiteSpace": "nowrap",
            "textOverflow": "ellipsis",
        },
        style_header={
            "fontFamily": _FONT,
            "fontSize": "13px",
            "fontWeight": "600",
            "backgroundColor": "#f3f4f6",
            "borderBottom": "1px solid #e5e7eb",
        },
        style_data={
            "borderBottom": "1px solid #e5e7eb",
        },
        sort_action="none",
        filter_action="none",
        page_action="none",
    )


def empty_state(result: FilterResult) -> html.Div:
    """
    Placeholder shown instead of an empty table.

    While the load is still running the user sees a loading indicator;
    once it settles, an empty view is always an explicit "No data found".
    """
    if result.status in (LoadStatus.NOT_LOADED, LoadStatus.LOADING):
        return html.Div(
            [dbc.Spinner(size="sm", spinnerClassName="me-2"), LOADING_MESSAGE],
            className="text-muted d-flex align-items-center",
        )

    if result.status is LoadStatus.FAILED:
        detail = "Records could not be loaded."
        if result.error:
            detail = f"Records could not be loaded: {result.error}"
    elif result.total == 0:
        detail = "The data source returned no records."
    else:
        detail = "No records match the current category and search."

    return dbc.Alert(
        [html.Strong(NO_DATA_MESSAGE), html.Div(detail, className="small")],
        color="warning" if result.status is LoadStatus.FAILED else "secondary",
        className="mb-0",
    )


def render_records(result: FilterResult):
    if result.is_empty:
        return empty_state(result)
    return records_table(result.records)


def status_text(result: FilterResult) -> str:
    if result.status is LoadStatus.LOADING:
        return "Loading…"
    if result.status is LoadStatus.NOT_LOADED:
        return "Not loaded"
    if result.status is LoadStatus.FAILED:
        return f"Load failed · showing {len(result.records)} of {result.total} records"
    return f"Showing {len(result.records)} of {result.total} records"
