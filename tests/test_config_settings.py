"""Tests for environment-driven runtime settings."""

from __future__ import annotations

import pytest

from status_service.config import AppSettings, SettingsLoadError, config_load_settings

_SETTINGS_ENVIRONMENT_VARIABLES = (
    "PORT",
    "APPLICATION_PORT",
    "HOST",
    "APPLICATION_HOST",
    "NODE_ENV",
    "APP_ENV",
    "ENVIRONMENT_NAME",
    "SERVICE_NAME",
    "SERVICE_VERSION",
    "WELCOME_MESSAGE",
    "LOG_LEVEL",
    "LOG_JSON",
    "SHUTDOWN_GRACE_SECONDS",
    "SERVER_URL",
    "CLIENT_TIMEOUT_SECONDS",
)


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Clear settings variables and run from a directory without `.env`."""

    for variable_name in _SETTINGS_ENVIRONMENT_VARIABLES:
        monkeypatch.delenv(variable_name, raising=False)
    monkeypatch.chdir(tmp_path)


def test_config_defaults_match_documented_values() -> None:
    """Load documented defaults when no variables are set.

    Returns:
        None: Assertions validate default settings.

    Raises:
        AssertionError: Raised when a default changes.
    """

    settings = config_load_settings()

    assert settings.application_port == 3000
    assert settings.application_host == "0.0.0.0"
    assert settings.environment_name == "development"
    assert settings.service_name == "node-devops-server"
    assert settings.service_version == "1.0.0"
    assert settings.welcome_message == "Welcome to Node.js DevOps Server"
    assert settings.log_level == "INFO"
    assert settings.shutdown_grace_seconds == 10.0
    assert settings.server_url == "http://localhost:3000"


def test_config_reads_port_and_node_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Read conventional `PORT` and `NODE_ENV` variables.

    Args:
        monkeypatch: Pytest monkeypatch fixture.

    Returns:
        None: Assertions validate environment mapping.

    Raises:
        AssertionError: Raised when variables are ignored.
    """

    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("NODE_ENV", "production")

    settings = config_load_settings()

    assert settings.application_port == 8080
    assert settings.environment_name == "production"


def test_config_server_url_follows_port_when_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    """Point client commands at the configured local port without `SERVER_URL`.

    Args:
        monkeypatch: Pytest monkeypatch fixture.

    Returns:
        None: Assertions validate the derived client URL.

    Raises:
        AssertionError: Raised when the URL ignores the port.
    """

    monkeypatch.setenv("PORT", "8080")

    assert config_load_settings().server_url == "http://localhost:8080"


def test_config_explicit_server_url_wins_over_port(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep an explicit `SERVER_URL` regardless of the listening port.

    Args:
        monkeypatch: Pytest monkeypatch fixture.

    Returns:
        None: Assertions validate URL priority.

    Raises:
        AssertionError: Raised when the explicit URL is replaced.
    """

    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("SERVER_URL", "http://status.internal:9000/")

    assert config_load_settings().server_url == "http://status.internal:9000"


def test_config_field_name_variable_wins_over_short_alias(monkeypatch: pytest.MonkeyPatch) -> None:
    """Prefer `ENVIRONMENT_NAME` over `NODE_ENV` when both are set.

    Args:
        monkeypatch: Pytest monkeypatch fixture.

    Returns:
        None: Assertions validate alias priority.

    Raises:
        AssertionError: Raised when priority changes.
    """

    monkeypatch.setenv("NODE_ENV", "production")
    monkeypatch.setenv("ENVIRONMENT_NAME", "staging")

    assert config_load_settings().environment_name == "staging"


def test_config_reads_dotenv_file(tmp_path) -> None:
    """Read settings from `.env` in the working directory.

    Args:
        tmp_path: Pytest temporary directory, also the working directory.

    Returns:
        None: Assertions validate dotenv support.

    Raises:
        AssertionError: Raised when dotenv values are ignored.
    """

    (tmp_path / ".env").write_text("PORT=4000\nLOG_LEVEL=debug\n", encoding="utf-8")

    settings = config_load_settings()

    assert settings.application_port == 4000
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize(
    ("variable_name", "value"),
    [
        ("PORT", "0"),
        ("PORT", "70000"),
        ("PORT", "not-a-port"),
        ("NODE_ENV", "   "),
        ("LOG_LEVEL", "verbose"),
        ("SHUTDOWN_GRACE_SECONDS", "0"),
        ("SERVER_URL", "localhost:3000"),
        ("SERVER_URL", "   "),
    ],
)
def test_config_rejects_invalid_values(monkeypatch: pytest.MonkeyPatch, variable_name: str, value: str) -> None:
    """Raise SettingsLoadError for invalid configuration values.

    Args:
        monkeypatch: Pytest monkeypatch fixture.
        variable_name: Variable to set.
        value: Invalid value.

    Returns:
        None: Assertions validate startup validation.

    Raises:
        AssertionError: Raised when invalid values are accepted.
    """

    monkeypatch.setenv(variable_name, value)

    with pytest.raises(SettingsLoadError, match="Startup configuration validation failed"):
        config_load_settings()


def test_config_accepts_field_names_as_keyword_arguments() -> None:
    """Construct settings directly by field name.

    Returns:
        None: Assertions validate direct construction.

    Raises:
        AssertionError: Raised when keyword construction fails.
    """

    settings = AppSettings(application_port=9000, environment_name="test", server_url="http://svc:9000/")

    assert settings.application_port == 9000
    assert settings.environment_name == "test"
    assert settings.server_url == "http://svc:9000"
