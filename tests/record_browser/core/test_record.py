from __future__ import annotations

import pytest

from record_browser.core.record import Record, parse_record, parse_records


def test_parse_record_reads_well_formed_entry():
    assert parse_record({"id": 7, "name": "Alpha", "type": "A"}) == Record(7, "Alpha", "A")


def test_parse_record_accepts_integral_float_id():
    assert parse_record({"id": 2.0, "name": "x", "type": "y"}) == Record(2, "x", "y")


@pytest.mark.parametrize("raw_id", [1.9, "12", "007", True, False, None, float("nan")])
def test_parse_record_does_not_coerce_lossy_ids(raw_id):
    assert parse_record({"id": raw_id, "name": "x", "type": "y"}) is None


def test_parse_records_keeps_fractional_id_from_colliding(caplog):
    payload = [
        {"id": 1, "name": "Alpha", "type": "A"},
        {"id": 1.9, "name": "Impostor", "type": "A"},
    ]

    with caplog.at_level("WARNING"):
        records = parse_records(payload)

    assert records == (Record(1, "Alpha", "A"),)
    assert "Skipped malformed record entries" in caplog.text


def test_parse_record_keeps_missing_fields_as_none():
    assert parse_record({"id": 3}) == Record(3, None, None)
    assert parse_record({"id": 4, "name": 5, "type": ["A"]}) == Record(4, None, None)


def test_parse_record_drops_entries_without_usable_id():
    assert parse_record({"name": "x", "type": "y"}) is None
    assert parse_record({"id": "abc"}) is None
    assert parse_record({"id": True}) is None
    assert parse_record(["not", "a", "dict"]) is None


def test_parse_records_preserves_order_and_skips_bad_entries(caplog):
    payload = [
        {"id": 2, "name": "Beta", "type": "B"},
        "junk",
        {"id": 1, "name": "Alpha", "type": "A"},
    ]

    with caplog.at_level("WARNING"):
        records = parse_records(payload)

    assert records == (Record(2, "Beta", "B"), Record(1, "Alpha", "A"))
    assert "Skipped malformed record entries" in caplog.text


def test_record_to_dict():
    assert Record(1, "Alpha", None).to_dict() == {"id": 1, "name": "Alpha", "type": None}
