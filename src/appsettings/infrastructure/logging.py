"""Logging setup built on loguru.

Logs are written to stderr so that stdout carries only command output.
"""

import sys
import typing as t

from loguru import logger

from ..config.settings import Environment, LogLevel, Settings

if t.TYPE_CHECKING:
    import loguru

TEXT_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)

_configured = False


def configure_logger(
    level: LogLevel | str = LogLevel.INFO,
    environment: Environment = Environment.DEVELOPMENT,
) -> None:
    """Replace all loguru handlers with one stderr handler.

    Production gets JSON-serialised records, every other environment the
    human readable text format.

    Args:
        level: Minimum level to emit
        environment: Environment deciding the output format
    """
    global _configured

    level_name = LogLevel(level).value
    logger.remove()
    if environment == Environment.PRODUCTION:
        logger.add(sys.stderr, level=level_name, serialize=True)
    else:
        logger.add(sys.stderr, level=level_name, format=TEXT_FORMAT)
    _configured = True


def setup_logging(settings: Settings) -> None:
    """Configure logging from resolved settings."""
    configure_logger(level=settings.log_level, environment=settings.environment)


def get_logger(name: str) -> "loguru.Logger":
    """Return a logger bound to a component name.

    Configures logging with defaults if nothing has configured it yet.
    """
    if not _configured:
        configure_logger()
    return logger.bind(component=name)


def is_configured() -> bool:
    return _configured


def reset_logging() -> None:
    """Remove all handlers and mark logging as unconfigured."""
    global _configured

    logger.remove()
    _configured = False
