from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict

from record_browser.config.model import (
    DEFAULT_POLL_INTERVAL_MS,
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_SUBTITLE,
    DEFAULT_UI_TITLE,
    GlobalConfig,
)
from record_browser.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

DATA_URL_ENV = "RECORD_BROWSER_DATA_URL"
REQUEST_TIMEOUT_ENV = "RECORD_BROWSER_REQUEST_TIMEOUT"


def _positive_float(value: Any, field_name: str) -> float:
    try:
        result = float(value)
    except (TypeError, ValueError):
        raise ConfigError(f"{field_name} must be a number, got {value!r}")
    if result <= 0:
        raise ConfigError(f"{field_name} must be positive, got {result}")
    return result


def _positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigError(f"{field_name} must be an integer, got {value!r}")
    try:
        result = int(value)
    except (TypeError, ValueError):
        raise ConfigError(f"{field_name} must be an integer, got {value!r}")
    if result <= 0:
        raise ConfigError(f"{field_name} must be positive, got {result}")
    return result


def _read_global_json(path: Path) -> Dict[str, Any]:
    if not path.is_file():
        logger.warning(f"No global.json found at {path}; using defaults")
        return {}

    try:
        with path.open() as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"{path} must contain a JSON object")
    return raw


def load_global_config(root: Path | str) -> GlobalConfig:
    """
    Load config/global.json and apply environment overrides.

    Env vars RECORD_BROWSER_DATA_URL and RECORD_BROWSER_REQUEST_TIMEOUT
    take precedence over the file.
    """
    root = Path(root)
    logger.info(
        "Loading global config",
        extra={"config_root": str(root)},
    )

    raw = _read_global_json(root / "global.json")

    data_url = os.getenv(DATA_URL_ENV) or raw.get("data_url")
    timeout_raw = os.getenv(REQUEST_TIMEOUT_ENV) or raw.get("request_timeout", DEFAULT_REQUEST_TIMEOUT)

    config = GlobalConfig(
        ui_title=str(raw.get("ui_title", DEFAULT_UI_TITLE)),
        subtitle=str(raw.get("subtitle", DEFAULT_SUBTITLE)),
        data_url=str(data_url) if data_url else None,
        request_timeout=_positive_float(timeout_raw, "request_timeout"),
        poll_interval_ms=_positive_int(
            raw.get("poll_interval_ms", DEFAULT_POLL_INTERVAL_MS), "poll_interval_ms"
        ),
    )

    if config.data_url is None:
        logger.warning(
            "No data_url configured; the record collection will stay empty",
            extra={"config_root": str(root)},
        )

    return config
