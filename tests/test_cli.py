"""
Tests for the orderdesk CLI
"""

from unittest.mock import patch

from click.testing import CliRunner

from orderdesk import __version__
from orderdesk.cli import cli


def test_version():
    result = CliRunner().invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_schema_prints_sdl():
    result = CliRunner().invoke(cli, ["schema"])

    assert result.exit_code == 0
    assert "type Query" in result.output
    assert "scalar Date" in result.output
    assert "removeOrder" in result.output


def test_serve_runs_uvicorn_factory(monkeypatch):
    # serve exports the level for the app factory; restore it afterwards
    monkeypatch.setenv("ORDERDESK_LOG_LEVEL", "INFO")
    monkeypatch.setenv("ORDERDESK_DEBUG", "false")

    with patch("orderdesk.cli.uvicorn.run") as mock_run:
        result = CliRunner().invoke(cli, ["serve", "--port", "9999", "--log-level", "warning"])

    assert result.exit_code == 0
    args, kwargs = mock_run.call_args
    assert args == ("orderdesk.api.app:build_default_app",)
    assert kwargs["factory"] is True
    assert kwargs["port"] == 9999
    assert kwargs["log_level"] == "warning"
