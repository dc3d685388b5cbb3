from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional, Tuple

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Record:
    """
    A single row of the collection.

    Fields:

    - id: Unique integer identity within the collection.
    - name: Display label. None when the payload entry had no usable name.
    - type: Category. None when the payload entry had no usable type.
    """

    id: int
    name: Optional[str]
    type: Optional[str]

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "type": self.type}


def _optional_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def _record_id(value: Any) -> Optional[int]:
    # bool is an int subclass; floats only when they carry no fraction
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def parse_record(raw: Any) -> Optional[Record]:
    """
    Build a Record from one decoded JSON entry.

    Entries without an integral JSON number as id are dropped (None). Strings,
    booleans and fractional numbers are not coerced. Missing or non-string
    name/type are kept as None so matching degrades instead of failing.
    """
    if not isinstance(raw, dict):
        return None

    record_id = _record_id(raw.get("id"))
    if record_id is None:
        return None

    return Record(
        id=record_id,
        name=_optional_str(raw.get("name")),
        type=_optional_str(raw.get("type")),
    )


def parse_records(payload: Iterable[Any]) -> Tuple[Record, ...]:
    records = []
    skipped = 0
    for entry in payload:
        record = parse_record(entry)
        if record is None:
            skipped += 1
            continue
        records.append(record)

    if skipped:
        logger.warning(
            "Skipped malformed record entries",
            extra={"n_skipped": skipped, "n_kept": len(records)},
        )
    return tuple(records)
