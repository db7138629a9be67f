"""appsettings - deployment environment resolution from app configuration."""

from .app import App, create_app
from .config.reader import ENVIRONMENT_KEY, ConfigReader
from .config.settings import Environment, LogLevel, Settings, build_settings
from .config.sources import (
    AppConfigFileSource,
    BaseConfigSource,
    ChainedSource,
    EnvironSource,
    MappingSource,
    NullSource,
    create_source,
)
from .domain.exceptions import (
    AppSettingsError,
    ConfigSourceError,
    SourceUnavailableError,
)

__all__ = [
    # App
    "App",
    "create_app",
    # Reader
    "ConfigReader",
    "ENVIRONMENT_KEY",
    # Settings
    "Environment",
    "LogLevel",
    "Settings",
    "build_settings",
    # Sources
    "BaseConfigSource",
    "NullSource",
    "MappingSource",
    "EnvironSource",
    "AppConfigFileSource",
    "ChainedSource",
    "create_source",
    # Errors
    "AppSettingsError",
    "ConfigSourceError",
    "SourceUnavailableError",
]
