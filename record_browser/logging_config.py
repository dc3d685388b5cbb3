from __future__ import annotations

import logging
import os
from typing import Optional, Union

from pythonjsonlogger import jsonlogger

LOG_FORMAT_ENV = "RECORD_BROWSER_LOG_FORMAT"
LOG_LEVEL_ENV = "RECORD_BROWSER_LOG_LEVEL"

APP_NAME = "record-browser"

PLAIN_FORMAT = "%(asctime)s [%(levelname)s] %(name)s (%(threadName)s): %(message)s"
JSON_FORMAT = "%(asctime)s %(levelname)s %(name)s %(threadName)s %(message)s"

# Chatty third-party loggers: urllib3 logs every connection the record fetch
# opens, werkzeug every poll request from dcc.Interval.
QUIET_LOGGERS = ("urllib3", "werkzeug")


def _resolve_level(level: Union[int, str, None]) -> int:
    if level is None:
        level = os.getenv(LOG_LEVEL_ENV, "INFO")
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(
        level: Union[int, str, None] = None,
        force_format: Optional[str] = None,
) -> logging.Handler:
    """
    Configure root logger for the record browser.

    Modes:
    - JSON (default), one object per line with a static "app" field
    - plain text (dev mode)

    Selection Order:
        1) force_format argument ("json" or "plain") if provided
        2) env var RECORD_BROWSER_LOG_FORMAT
        3) default = "json"

    Level falls back to RECORD_BROWSER_LOG_LEVEL, then INFO. The thread name is
    part of every line so background record loads can be told apart from
    callback threads. Returns the installed handler.
    """
    format_mode = (force_format or os.getenv(LOG_FORMAT_ENV, "json")).lower()
    level = _resolve_level(level)

    root = logging.getLogger()
    root.setLevel(level)

    handler = logging.StreamHandler()
    if format_mode == "plain":
        handler.setFormatter(logging.Formatter(PLAIN_FORMAT))
    else:
        handler.setFormatter(
            jsonlogger.JsonFormatter(JSON_FORMAT, static_fields={"app": APP_NAME})
        )

    # Replace any existing handlers to avoid duplicate logs
    root.handlers.clear()
    root.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    return handler
