"""Application settings and the deployment environment enum."""

import typing as t
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict

if t.TYPE_CHECKING:
    from .reader import ConfigReader


class Environment(Enum):
    """Deployment environment the application is running in.

    NOTSET is the sentinel used when the configured value is missing or
    does not name one of the other members.
    """

    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"
    NOTSET = "notset"

    @classmethod
    def parse(cls, raw: object) -> "Environment | None":
        """Match a raw configuration value against member names.

        Matching ignores case and surrounding whitespace.

        Args:
            raw: Value read from a configuration source

        Returns:
            The matching member, or None if the value names no member
        """
        if not isinstance(raw, str):
            return None
        return cls.__members__.get(raw.strip().upper())

    def __str__(self) -> str:
        return self.name


class LogLevel(str, Enum):
    """Log levels understood by loguru."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    SUCCESS = "SUCCESS"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class Settings(BaseModel):
    """Resolved settings the app and CLI layers run with.

    The environment is normally resolved through a ConfigReader by
    build_settings; constructing Settings directly is meant for tests.
    """

    model_config = ConfigDict(frozen=True)

    environment: Environment = Environment.NOTSET
    log_level: LogLevel = LogLevel.INFO
    wait_for_key: bool = True
    config_file: Path | None = None


def build_settings(
    reader: "ConfigReader | None" = None, **overrides: t.Any
) -> Settings:
    """Build Settings, resolving the environment through a reader.

    None overrides are ignored so CLI flags that were not given fall back
    to the defaults. An explicit ``environment`` override skips the reader.

    Args:
        reader: Reader used to resolve the environment when not overridden
        **overrides: Settings fields to set

    Returns:
        Settings instance

    Raises:
        SourceUnavailableError: If the reader's source cannot be consulted
    """
    values = {key: value for key, value in overrides.items() if value is not None}
    if "environment" not in values and reader is not None:
        values["environment"] = reader.get_environment()
    return Settings(**values)
