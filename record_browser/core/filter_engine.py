from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, Iterable, Optional, Tuple

from record_browser.core.filter_state import ALL_CATEGORY, FilterState
from record_browser.core.record import Record

if TYPE_CHECKING:
    from record_browser.services.data_store import DataStore, LoadStatus

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Pure derivations
# -----------------------------------------------------------------------------
def derive_categories(collection: Iterable[Record]) -> Tuple[str, ...]:
    """
    Distinct record types in first-seen order, with "All" prepended.
    Records without a type contribute nothing.
    """
    seen: Dict[str, None] = {}
    for record in collection:
        if record.type is not None and record.type != ALL_CATEGORY:
            seen.setdefault(record.type, None)
    return (ALL_CATEGORY, *seen)


def _contains_casefold(value: Optional[str], needle: str) -> bool:
    if not isinstance(value, str):
        return False
    return needle.casefold() in value.casefold()


def matches(record: Record, state: FilterState) -> bool:
    category = state.selected_category
    if category != ALL_CATEGORY and record.type != category:
        return False

    text = state.search_text
    if not text or not text.strip():
        return True

    return (
        _contains_casefold(record.name, text)
        or _contains_casefold(record.type, text)
        or text in str(record.id)
    )


def filter_records(collection: Iterable[Record], state: FilterState) -> Tuple[Record, ...]:
    return tuple(r for r in collection if matches(r, state))


# -----------------------------------------------------------------------------
# Cached engine over a DataStore
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class FilterResult:
    """
    Everything the presentation layer needs for one render.

    `status` and `total` let the UI tell "still loading" and "load failed"
    apart from "loaded but empty" and "filters removed everything". `error`
    carries the store's last load failure message, if any.
    """
    state: FilterState
    categories: Tuple[str, ...]
    records: Tuple[Record, ...]
    status: "LoadStatus"
    total: int
    error: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not self.records


class FilterEngine:
    """
    Derives the category set and filtered view from a DataStore snapshot.

    Categories are cached on the store version; views on (version, FilterState).
    A new collection bumps the version, which invalidates both.
    """

    MAX_VIEW_CACHE = 128

    def __init__(self, store: DataStore, state: Optional[FilterState] = None) -> None:
        self.store = store
        self._state = state or FilterState()
        self._lock = threading.Lock()

        self._categories_key: Optional[int] = None
        self._categories: Tuple[str, ...] = (ALL_CATEGORY,)
        self._view_cache: Dict[Tuple[int, FilterState], Tuple[Record, ...]] = {}

    # -------------------------------------------------------------------------
    # Inputs
    # -------------------------------------------------------------------------
    @property
    def state(self) -> FilterState:
        return self._state

    def set_selected_category(self, value: Optional[str]) -> None:
        self._state = self._state.with_category(value)

    def set_search_text(self, value: Optional[str]) -> None:
        self._state = self._state.with_search_text(value)

    # -------------------------------------------------------------------------
    # Outputs
    # -------------------------------------------------------------------------
    @property
    def categories(self) -> Tuple[str, ...]:
        version, collection, _ = self.store.snapshot()
        with self._lock:
            return self._categories_for(version, collection)

    @property
    def filtered_view(self) -> Tuple[Record, ...]:
        return self.derive(self._state)

    def derive(self, state: FilterState) -> Tuple[Record, ...]:
        """Filtered view for an explicit FilterState, sharing the engine cache."""
        version, collection, _ = self.store.snapshot()
        with self._lock:
            return self._view_for(version, collection, state)

    def result(self, state: Optional[FilterState] = None) -> FilterResult:
        state = state if state is not None else self._state
        # One snapshot for both derivations so they never disagree.
        version, collection, status = self.store.snapshot()
        with self._lock:
            categories = self._categories_for(version, collection)
            records = self._view_for(version, collection, state)

        return FilterResult(
            state=state,
            categories=categories,
            records=records,
            status=status,
            total=len(collection),
            error=self.store.last_error,
        )

    # -------------------------------------------------------------------------
    # Cache internals (caller holds the lock)
    # -------------------------------------------------------------------------
    def _categories_for(self, version: int, collection: Tuple[Record, ...]) -> Tuple[str, ...]:
        if self._categories_key != version:
            self._categories = derive_categories(collection)
            self._categories_key = version
            logger.debug(
                "Categories recomputed",
                extra={"version": version, "n_categories": len(self._categories)},
            )
        return self._categories

    def _view_for(
        self,
        version: int,
        collection: Tuple[Record, ...],
        state: FilterState,
    ) -> Tuple[Record, ...]:
        key = (version, state)
        cached = self._view_cache.get(key)
        if cached is not None:
            return cached

        view = filter_records(collection, state)
        self._view_cache[key] = view

        # Prevent unbounded growth
        if len(self._view_cache) > self.MAX_VIEW_CACHE:
            self._view_cache.clear()
            self._view_cache[key] = view

        return view
