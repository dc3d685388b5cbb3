from __future__ import annotations

import logging
from functools import partial
from pathlib import Path
from typing import Optional

import dash_bootstrap_components as dbc
from dash import Dash

from record_browser.config.config_loader import load_global_config
from record_browser.config.model import GlobalConfig
from record_browser.core.filter_engine import FilterEngine
from record_browser.services.data_store import DataStore
from record_browser.ui.callbacks.callbacks_filters import register_filter_callbacks
from record_browser.ui.callbacks.callbacks_render import register_render_callbacks
from record_browser.ui.context import AppContext
from record_browser.ui.layout.build_layout import build_layout

logger = logging.getLogger(__name__)


def create_dash_app(
    config_root: Path | str = Path("config"),
    *,
    global_config: Optional[GlobalConfig] = None,
    store: Optional[DataStore] = None,
    start_load: bool = True,
) -> Dash:
    config_root = Path(config_root)

    # 1) Load Config
    if global_config is None:
        global_config = load_global_config(config_root)

    # 2) Record store (single shared instance) + filter engine on top of it
    if store is None:
        store = DataStore(global_config.data_url, timeout=global_config.request_timeout)
    engine = FilterEngine(store)

    # 3) App Context
    ctx = AppContext(
        config_root=config_root,
        global_config=global_config,
        store=store,
        engine=engine,
    )

    # 4) One-shot load; the UI renders the empty collection until it lands
    if start_load:
        store.start_load()

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
    )
    app.title = global_config.ui_title

    # Built per page load so a refresh picks up the latest collection
    app.layout = partial(build_layout, ctx)

    # Register callbacks
    register_filter_callbacks(app, ctx)
    register_render_callbacks(app, ctx)

    logger.info(
        "Dash app created",
        extra={"config_root": str(config_root), "data_url": global_config.data_url},
    )
    return app
