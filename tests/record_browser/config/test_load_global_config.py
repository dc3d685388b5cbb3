import json
from pathlib import Path

import pytest

from record_browser.config.config_loader import load_global_config
from record_browser.config.model import DEFAULT_REQUEST_TIMEOUT, DEFAULT_UI_TITLE
from record_browser.core.exceptions import ConfigError


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch):
    monkeypatch.delenv("RECORD_BROWSER_DATA_URL", raising=False)
    monkeypatch.delenv("RECORD_BROWSER_REQUEST_TIMEOUT", raising=False)


def _write_global(root: Path, raw) -> Path:
    root.mkdir(parents=True, exist_ok=True)
    (root / "global.json").write_text(json.dumps(raw))
    return root


def test_load_global_config_reads_file(tmp_path):
    root = _write_global(
        tmp_path / "config",
        {
            "ui_title": "Test Browser",
            "subtitle": "sub",
            "data_url": "http://example.test/records.json",
            "request_timeout": 2.5,
            "poll_interval_ms": 250,
        },
    )

    cfg = load_global_config(root)

    assert cfg.ui_title == "Test Browser"
    assert cfg.subtitle == "sub"
    assert cfg.data_url == "http://example.test/records.json"
    assert cfg.request_timeout == 2.5
    assert cfg.poll_interval_ms == 250


def test_missing_file_uses_defaults(tmp_path):
    cfg = load_global_config(tmp_path / "nowhere")

    assert cfg.ui_title == DEFAULT_UI_TITLE
    assert cfg.data_url is None
    assert cfg.request_timeout == DEFAULT_REQUEST_TIMEOUT


def test_env_overrides_win_over_file(tmp_path, monkeypatch):
    root = _write_global(tmp_path, {"data_url": "http://file.test", "request_timeout": 5})
    monkeypatch.setenv("RECORD_BROWSER_DATA_URL", "http://env.test")
    monkeypatch.setenv("RECORD_BROWSER_REQUEST_TIMEOUT", "1.5")

    cfg = load_global_config(root)

    assert cfg.data_url == "http://env.test"
    assert cfg.request_timeout == 1.5


@pytest.mark.parametrize(
    "raw",
    [
        {"request_timeout": "soon"},
        {"request_timeout": 0},
        {"poll_interval_ms": -1},
        {"poll_interval_ms": True},
    ],
)
def test_invalid_values_raise_config_error(tmp_path, raw):
    root = _write_global(tmp_path, raw)
    with pytest.raises(ConfigError):
        load_global_config(root)


def test_malformed_json_raises_config_error(tmp_path):
    (tmp_path / "global.json").write_text("{not json")
    with pytest.raises(ConfigError):
        load_global_config(tmp_path)


def test_non_object_json_raises_config_error(tmp_path):
    root = _write_global(tmp_path, ["a", "b"])
    with pytest.raises(ConfigError):
        load_global_config(root)
