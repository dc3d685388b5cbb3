from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

DEFAULT_UI_TITLE = "Record Browser"
DEFAULT_SUBTITLE = "Filter records by category or search"
DEFAULT_REQUEST_TIMEOUT = 10.0
DEFAULT_POLL_INTERVAL_MS = 500


@dataclass
class GlobalConfig:
    """
    App-wide settings read from global.json (plus env overrides).

    data_url is the single endpoint the DataStore fetches records from.
    """
    ui_title: str = DEFAULT_UI_TITLE
    subtitle: str = DEFAULT_SUBTITLE
    data_url: Optional[str] = None
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    poll_interval_ms: int = DEFAULT_POLL_INTERVAL_MS
