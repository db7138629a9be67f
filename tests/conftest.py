"""Pytest configuration and fixtures for appsettings tests."""

import loguru
import pytest
from typer.testing import CliRunner

from appsettings.app import create_app
from appsettings.config.reader import ConfigReader
from appsettings.config.settings import Environment, LogLevel, Settings
from appsettings.config.sources import BaseConfigSource, MappingSource
from appsettings.domain.exceptions import ConfigSourceError
from appsettings.infrastructure.logging import reset_logging


class FailingSource(BaseConfigSource):
    """Source whose lookups always fail, simulating an unreachable backend."""

    def __init__(self, error: Exception | None = None) -> None:
        self.error = error or ConfigSourceError("configuration backend is down")
        self.calls = 0

    def get(self, key: str) -> str | None:
        self.calls += 1
        raise self.error


@pytest.fixture
def test_settings():
    """Provide test-specific settings."""
    return Settings(
        environment=Environment.TESTING,
        log_level=LogLevel.CRITICAL,  # Minimal logging during tests
        wait_for_key=False,
    )


@pytest.fixture
def test_app(test_settings):
    """Provide a test app with clean logging state."""
    reset_logging()
    app = create_app(settings=test_settings)
    yield app
    reset_logging()


@pytest.fixture
def mock_logger(mocker):
    """Provide a mock logger for testing that captures log calls."""
    logger = mocker.Mock(spec=loguru.logger)
    return logger


@pytest.fixture
def config_values():
    """Mutable mapping backing the mapping_source fixture."""
    return {}


@pytest.fixture
def mapping_source(config_values):
    """Provide a MappingSource over config_values."""
    return MappingSource(config_values)


@pytest.fixture
def failing_source():
    """Provide a source that raises on every lookup."""
    return FailingSource()


@pytest.fixture
def reader(mapping_source, mock_logger):
    """Provide a ConfigReader over mapping_source with a mocked logger."""
    return ConfigReader(mapping_source, logger=mock_logger)


@pytest.fixture
def failing_reader(failing_source, mock_logger):
    """Provide a ConfigReader whose source is unavailable."""
    return ConfigReader(failing_source, logger=mock_logger)


@pytest.fixture(autouse=True)
def clean_logging_state():
    """Automatically reset logging before each test for isolation."""
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def cli_runner():
    """Provide Typer CLI test runner."""
    return CliRunner()
