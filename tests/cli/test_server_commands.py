"""Tests for the sample-api server entry point."""

import pytest
from typer.testing import CliRunner

from sample_api import main
from sample_api.settings import Settings

runner = CliRunner()


@pytest.fixture
def quiet_logging(monkeypatch):
    # Keep loguru pointed at pytest's stderr rather than the runner's buffer
    monkeypatch.setattr("sample_api.main.setup_logging", lambda level: None)
    monkeypatch.setattr("sample_api.app.setup_logging", lambda log_level: None)


@pytest.fixture
def fresh_settings(monkeypatch) -> Settings:
    settings = Settings(_env_file=None)
    monkeypatch.setattr("sample_api.main.get_settings", lambda: settings)
    return settings


def test_check_command_succeeds(quiet_logging):
    result = runner.invoke(main.app, ["check"])
    assert result.exit_code == 0


def test_run_with_reload_uses_import_string(monkeypatch, quiet_logging, fresh_settings):
    calls = {}
    monkeypatch.setattr("sample_api.main.uvicorn.run", lambda target, **kwargs: calls.update(target=target, **kwargs))

    result = runner.invoke(main.app, ["run", "--port", "9999", "--reload", "--log-level", "debug"])

    assert result.exit_code == 0
    assert calls["target"] == "sample_api.app:app"
    assert calls["port"] == 9999
    assert calls["reload"] is True
    assert calls["log_level"] == "debug"
    assert fresh_settings.log_level == "DEBUG"


def test_run_without_reload_passes_app_object(monkeypatch, quiet_logging, fresh_settings):
    from sample_api.app import app as fastapi_app

    calls = {}
    monkeypatch.setattr("sample_api.main.uvicorn.run", lambda target, **kwargs: calls.update(target=target, **kwargs))

    result = runner.invoke(main.app, ["run", "--host", "127.0.0.1"])

    assert result.exit_code == 0
    assert calls["target"] is fastapi_app
    assert calls["host"] == "127.0.0.1"
    assert calls["port"] == 8080
