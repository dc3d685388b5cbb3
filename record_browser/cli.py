"""
Command-line launcher for the record browser.

USAGE:
  record-browser                                  # config/, port 8051 or the next free one
  record-browser --port 9000 --debug
  record-browser --config-root ./my-config --log-format plain
"""
from __future__ import annotations

import argparse
import logging
import os
import socket
from typing import Optional, Sequence

from record_browser.logging_config import configure_logging

logger = logging.getLogger(__name__)

CONFIG_ROOT_ENV = "RECORD_BROWSER_CONFIG_ROOT"
DEFAULT_PORT = 8051
PORT_SEARCH_SPAN = 100


def find_free_port(start_port: int, host: str = "localhost") -> int:
    """First port in [start_port, start_port + PORT_SEARCH_SPAN) nobody listens on."""
    for port in range(start_port, start_port + PORT_SEARCH_SPAN):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            if s.connect_ex((host, port)) != 0:
                return port
    return start_port


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="record-browser",
        description="Serve the record browser Dash app.",
    )
    parser.add_argument(
        "--config-root",
        default=os.getenv(CONFIG_ROOT_ENV, "config"),
        help="Directory holding global.json (default: $RECORD_BROWSER_CONFIG_ROOT or ./config)",
    )
    parser.add_argument(
        "--host", default="0.0.0.0", help="Interface to bind (default 0.0.0.0)"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=int(os.getenv("PORT", str(DEFAULT_PORT))),
        help=f"Preferred port; the next free one is used if taken (default {DEFAULT_PORT})",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=os.getenv("DEBUG", "0") == "1",
        help="Run Dash in debug mode",
    )
    parser.add_argument(
        "--log-format", choices=["json", "plain"], default=None, help="Override log format"
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(force_format=args.log_format)

    # Imported late so `--help` does not pay for Dash
    from record_browser.ui.dash_app import create_dash_app

    app = create_dash_app(args.config_root)

    port = find_free_port(args.port)
    if port != args.port:
        logger.warning(
            "Preferred port taken; using next free port",
            extra={"preferred_port": args.port, "port": port},
        )

    logger.info(
        "Starting record browser",
        extra={"host": args.host, "port": port, "debug": args.debug, "config_root": args.config_root},
    )
    app.run(host=args.host, port=port, debug=args.debug)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
