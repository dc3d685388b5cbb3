from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

ALL_CATEGORY = "All"


@dataclass(frozen=True)
class FilterState:
    """
    Represents the current user selection/filters.

    Fields:

    - selected_category: A record type, or "All" for no category restriction.
    - search_text: Free-text search over name, type and id. Blank matches everything.

    Frozen so it can key the view cache directly.
    """

    selected_category: str = ALL_CATEGORY
    search_text: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> FilterState:
        data = data or {}
        category = data.get("selected_category")
        search = data.get("search_text")
        return cls(
            selected_category=str(category) if category is not None else ALL_CATEGORY,
            search_text=str(search) if search is not None else "",
        )

    def with_category(self, value: Optional[str]) -> FilterState:
        return FilterState(
            selected_category=value if value is not None else ALL_CATEGORY,
            search_text=self.search_text,
        )

    def with_search_text(self, value: Optional[str]) -> FilterState:
        return FilterState(
            selected_category=self.selected_category,
            search_text=value if value is not None else "",
        )
