from __future__ import annotations

from record_browser.core.filter_state import FilterState
from record_browser.ui.callbacks.callbacks_utils import load_marker, next_filter_state, safe_filter_state
from record_browser.ui.ids import IDs, category_button_id


def test_safe_filter_state_falls_back_to_unfiltered():
    assert safe_filter_state(None) == FilterState()
    assert safe_filter_state("garbage") == FilterState()
    assert safe_filter_state({"selected_category": "A"}) == FilterState(selected_category="A")


def test_search_input_updates_search_text():
    new = next_filter_state(FilterState(selected_category="A"), IDs.Control.SEARCH_INPUT, "be")
    assert new == FilterState(selected_category="A", search_text="be")


def test_cleared_search_input_becomes_empty_string():
    new = next_filter_state(FilterState(search_text="x"), IDs.Control.SEARCH_INPUT, None)
    assert new == FilterState()


def test_category_click_selects_category():
    new = next_filter_state(FilterState(search_text="x"), category_button_id("B"), "x", 1)
    assert new == FilterState(selected_category="B", search_text="x")


def test_rerendered_buttons_do_not_change_state():
    assert next_filter_state(FilterState(), category_button_id("B"), "", 0) is None
    assert next_filter_state(FilterState(), category_button_id("B"), "", None) is None


def test_unchanged_or_unknown_trigger_returns_none():
    assert next_filter_state(FilterState(), IDs.Control.SEARCH_INPUT, "") is None
    assert next_filter_state(FilterState(), category_button_id("All"), "", 2) is None
    assert next_filter_state(FilterState(), "something-else", "x") is None


def test_load_marker_changes_when_load_fails_without_new_data():
    from record_browser.services.data_store import DataStore

    store = DataStore(None)
    before = load_marker(store)

    store.load()
    after = load_marker(store)

    assert before == {"version": 0, "status": "not_loaded"}
    assert after == {"version": 0, "status": "failed"}
    assert before != after
