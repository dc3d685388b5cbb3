"""
WSGI entry point for the record browser (`gunicorn app:server`).

`python app.py` behaves like the `record-browser` command.
"""
import os

from record_browser.cli import CONFIG_ROOT_ENV, main
from record_browser.logging_config import configure_logging
from record_browser.ui.dash_app import create_dash_app

if __name__ == "__main__":
    raise SystemExit(main())

configure_logging()

app = create_dash_app(os.getenv(CONFIG_ROOT_ENV, "config"))
server = app.server
