from __future__ import annotations

import socket

import record_browser.ui.dash_app as dash_app
from record_browser import cli


def test_parser_defaults_follow_env(monkeypatch):
    monkeypatch.setenv("PORT", "9100")
    monkeypatch.setenv("DEBUG", "1")
    monkeypatch.setenv(cli.CONFIG_ROOT_ENV, "/srv/records")

    args = cli.build_parser().parse_args([])

    assert args.port == 9100
    assert args.debug is True
    assert args.config_root == "/srv/records"
    assert args.log_format is None


def test_parser_flags_override_defaults(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("DEBUG", raising=False)

    args = cli.build_parser().parse_args(["--port", "9000", "--config-root", "cfg", "--log-format", "plain"])

    assert args.port == 9000
    assert args.debug is False
    assert args.config_root == "cfg"
    assert args.log_format == "plain"


def test_find_free_port_skips_port_in_use():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as busy:
        busy.bind(("localhost", 0))
        busy.listen(1)
        taken = busy.getsockname()[1]

        assert cli.find_free_port(taken) != taken


def test_main_builds_app_and_runs_on_free_port(monkeypatch):
    runs = []
    roots = []

    class _FakeApp:
        def run(self, **kwargs):
            runs.append(kwargs)

    def fake_create(config_root):
        roots.append(config_root)
        return _FakeApp()

    monkeypatch.setattr(dash_app, "create_dash_app", fake_create)
    monkeypatch.setattr(cli, "configure_logging", lambda **kwargs: None)
    monkeypatch.setattr(cli, "find_free_port", lambda port: port + 1)

    assert cli.main(["--port", "9000", "--config-root", "cfg", "--debug"]) == 0

    assert roots == ["cfg"]
    assert runs == [{"host": "0.0.0.0", "port": 9001, "debug": True}]
