import pytest
from pydantic import ValidationError
from typer.testing import CliRunner

from users_api import __main__ as cli
from users_api.services.config import Settings


def test_defaults(monkeypatch):
    for key in ("USERS_API_HOST", "USERS_API_PORT", "USERS_API_URL_PREFIX", "USERS_API_DB_TYPE"):
        monkeypatch.delenv(key, raising=False)
    settings = Settings()
    assert settings.USERS_API_HOST == "localhost"
    assert settings.USERS_API_PORT == 8080
    assert settings.USERS_API_URL_PREFIX == "/users"
    assert settings.USERS_API_DB_TYPE == "mock"


def test_environment(monkeypatch):
    monkeypatch.setenv("USERS_API_PORT", "9000")
    monkeypatch.setenv("users_api_db_type", " MOCK ")
    monkeypatch.setenv("USERS_API_URL_PREFIX", "people/")
    monkeypatch.setenv("USERS_API_LOG_LEVEL", "debug")
    settings = Settings()
    assert settings.USERS_API_PORT == 9000
    assert settings.USERS_API_DB_TYPE == "mock"
    assert settings.USERS_API_URL_PREFIX == "/people"
    assert settings.USERS_API_LOG_LEVEL == "DEBUG"


@pytest.fixture
def served(monkeypatch):
    captured = {}

    def fake_run(app, **kwargs):
        captured["app"] = app
        captured.update(kwargs)

    monkeypatch.setattr(cli.uvicorn, "run", fake_run)
    return captured


def test_cli_serves_with_overrides(served):
    result = CliRunner().invoke(cli.app, ["--host", "0.0.0.0", "-p", "9001", "-t", "5"])
    assert result.exit_code == 0, result.output
    assert served["host"] == "0.0.0.0"
    assert served["port"] == 9001
    assert served["timeout_keep_alive"] == 5
    assert served["app"].state.settings.USERS_API_PORT == 9001


def test_cli_rejects_unknown_database(served):
    result = CliRunner().invoke(cli.app, ["--database-type", "postgres"])
    assert result.exit_code == 1
    assert "app" not in served


@pytest.mark.parametrize("prefix", ["", "/", " // "])
def test_empty_prefix_rejected(prefix):
    with pytest.raises(ValidationError, match="URL prefix must not be empty"):
        Settings(USERS_API_URL_PREFIX=prefix)


def test_unknown_log_level_rejected():
    with pytest.raises(ValidationError, match="unknown log level"):
        Settings(USERS_API_LOG_LEVEL="loud")


def test_cli_rejects_unknown_log_level(served):
    result = CliRunner().invoke(cli.app, ["--log-level", "foo"])
    assert result.exit_code == 1
    assert "app" not in served


def test_cli_rounds_timeout_up(served):
    result = CliRunner().invoke(cli.app, ["-t", "0.5"])
    assert result.exit_code == 0, result.output
    assert served["timeout_keep_alive"] == 1
