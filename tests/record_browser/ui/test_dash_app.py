from __future__ import annotations

import json

from dash import Dash, dcc

from record_browser.config.model import GlobalConfig
from record_browser.core.record import Record
from record_browser.services.data_store import DataStore
from record_browser.ui.dash_app import create_dash_app
from record_browser.ui.ids import IDs


def _find(component, component_id):
    """Depth-first search of a Dash layout for a component id."""
    if getattr(component, "id", None) == component_id:
        return component
    children = getattr(component, "children", None)
    if children is None or isinstance(children, str):
        return None
    if not isinstance(children, (list, tuple)):
        children = [children]
    for child in children:
        found = _find(child, component_id)
        if found is not None:
            return found
    return None


def test_create_dash_app_with_injected_store():
    store = DataStore.from_records([Record(1, "Alpha", "A"), Record(2, "Beta", "B")])
    cfg = GlobalConfig(ui_title="Test Browser", data_url=None)

    app = create_dash_app("unused", global_config=cfg, store=store, start_load=False)

    assert isinstance(app, Dash)
    assert app.title == "Test Browser"

    layout = app.layout()
    buttons = _find(layout, IDs.Control.CATEGORY_BUTTONS)
    assert [b.children for b in buttons.children] == ["All", "A", "B"]

    table = _find(layout, IDs.Control.RECORDS_TABLE)
    assert [row["id"] for row in table.data] == [1, 2]

    poll = _find(layout, IDs.Control.LOAD_POLL)
    assert isinstance(poll, dcc.Interval)
    assert poll.disabled is True


def test_create_dash_app_from_config_dir_starts_load(tmp_path, monkeypatch):
    monkeypatch.delenv("RECORD_BROWSER_DATA_URL", raising=False)
    monkeypatch.delenv("RECORD_BROWSER_REQUEST_TIMEOUT", raising=False)
    (tmp_path / "global.json").write_text(json.dumps({"ui_title": "From File"}))

    app = create_dash_app(tmp_path)

    assert app.title == "From File"
    layout = app.layout()
    # No data_url: the load fails quietly and the table area is still rendered
    assert _find(layout, IDs.Control.RECORDS_CONTAINER) is not None
