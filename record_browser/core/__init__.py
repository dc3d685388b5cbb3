"""
Core domain layer: records, filter state and the filter engine
"""

from .filter_engine import FilterEngine, FilterResult, derive_categories, filter_records, matches
from .filter_state import ALL_CATEGORY, FilterState
from .record import Record, parse_record, parse_records

__all__ = [
    "ALL_CATEGORY",
    "FilterEngine",
    "FilterResult",
    "FilterState",
    "Record",
    "derive_categories",
    "filter_records",
    "matches",
    "parse_record",
    "parse_records",
]
