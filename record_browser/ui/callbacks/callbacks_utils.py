from __future__ import annotations
import logging
from typing import TYPE_CHECKING, Any, Dict, Optional

from record_browser.core.filter_state import FilterState
from record_browser.ui.ids import IDs

if TYPE_CHECKING:
    from record_browser.services.data_store import DataStore

logger = logging.getLogger(__name__)


def load_marker(store: DataStore) -> Dict[str, Any]:
    """
    JSON-safe fingerprint of the store's load progress. Changes when the
    collection is replaced or when the load settles without new data.
    """
    version, _, status = store.snapshot()
    return {"version": version, "status": status.value}


def safe_filter_state(data: object) -> FilterState:
    """Parse the filter-state store, falling back to the unfiltered state."""
    if not isinstance(data, dict):
        return FilterState()
    try:
        return FilterState.from_dict(data)
    except Exception:
        logger.exception("Invalid filter-state: %r", data)
        return FilterState()


def next_filter_state(
    current: FilterState,
    triggered_id: Any,
    search_value: Optional[str],
    triggered_value: Any = None,
) -> Optional[FilterState]:
    """
    Pure helper: apply one UI event to the current FilterState.

    Returns None when the event should not change anything (e.g. category
    buttons being re-rendered, which fires with n_clicks == 0).
    """
    if triggered_id == IDs.Control.SEARCH_INPUT:
        new_state = current.with_search_text(search_value)
    elif isinstance(triggered_id, dict) and triggered_id.get("type") == IDs.Pattern.CATEGORY_BUTTON:
        if not triggered_value:
            return None
        new_state = current.with_category(triggered_id.get("index"))
    else:
        return None

    if new_state == current:
        return None
    return new_state
