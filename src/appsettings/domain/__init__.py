"""Domain types - exceptions shared across the package."""

from .exceptions import AppSettingsError, ConfigSourceError, SourceUnavailableError

__all__ = [
    "AppSettingsError",
    "ConfigSourceError",
    "SourceUnavailableError",
]
