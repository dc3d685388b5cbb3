from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from record_browser.config.model import GlobalConfig
from record_browser.core.filter_engine import FilterEngine
from record_browser.services.data_store import DataStore


@dataclass
class AppContext:
    """
    Holds shared state for the Dash app: config, the record store and the
    filter engine built on it. This is passed into layout + callback
    registration functions instead of using module-level globals.
    """
    config_root: Path
    global_config: GlobalConfig
    store: DataStore
    engine: FilterEngine
