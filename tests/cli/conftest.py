"""Shared fixtures for CLI tests."""

import pytest

from appsettings.cli.app import create_cli_app
from appsettings.config.settings import Environment, LogLevel, Settings
from appsettings.config.sources import DEFAULT_ENV_PREFIX


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep the real process environment out of CLI resolution."""
    monkeypatch.delenv(f"{DEFAULT_ENV_PREFIX}ENVIRONMENT", raising=False)
    monkeypatch.delenv("environment", raising=False)


@pytest.fixture
def test_settings():
    """Provide test Settings with known values."""
    return Settings(
        environment=Environment.STAGING,
        log_level=LogLevel.CRITICAL,
        wait_for_key=False,
    )


@pytest.fixture
def test_app(test_settings):
    """Provide CLI app with test settings injected."""
    return create_cli_app(settings=test_settings)


@pytest.fixture
def default_app():
    """Provide CLI app with default settings."""
    return create_cli_app()


@pytest.fixture
def reader_app(reader):
    """Provide CLI app resolving through the mapping-backed reader."""
    return create_cli_app(reader=reader)


@pytest.fixture
def failing_app(failing_reader):
    """Provide CLI app whose configuration source is unavailable."""
    return create_cli_app(reader=failing_reader)


@pytest.fixture
def mock_wait(mocker):
    """Replace the keypress wait so tests never block."""
    return mocker.patch("appsettings.cli.commands.greeting.wait_for_keypress")
