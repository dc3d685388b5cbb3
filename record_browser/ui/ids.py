from __future__ import annotations

__all__ = ["IDs", "category_button_id"]


class IDs:
    class Store:
        FILTER_STATE = "filter-state"
        LOAD_MARKER = "load-marker"

    class Control:
        # Filters
        SEARCH_INPUT = "search-input"
        CATEGORY_BUTTONS = "category-buttons"

        # Load lifecycle
        LOAD_POLL = "load-poll"

        # Records
        RECORDS_CONTAINER = "records-container"
        RECORDS_TABLE = "records-table"

        # Status bar
        STATUS_BAR = "status-bar"

    class Pattern:
        # pattern-matching "type" strings
        CATEGORY_BUTTON = "category-button"


def category_button_id(category: str) -> dict:
    return {"type": IDs.Pattern.CATEGORY_BUTTON, "index": category}
