"""Application bootstrap - settings resolution and logging setup."""

from dataclasses import dataclass

from .config.reader import ConfigReader
from .config.settings import Settings, build_settings
from .config.sources import create_source
from .infrastructure.logging import setup_logging


@dataclass
class App:
    """Bootstrapped application: resolved settings and the reader behind them."""

    settings: Settings
    reader: ConfigReader | None = None


def create_app(
    settings: Settings | None = None, reader: ConfigReader | None = None
) -> App:
    """Create the application and configure logging.

    Args:
        settings: Pre-built settings; when given no configuration is read
        reader: Reader to resolve settings with; defaults to one over the
            process environment

    Returns:
        App with logging configured from its settings

    Raises:
        SourceUnavailableError: If settings must be resolved and the
            configuration source cannot be consulted
    """
    if settings is None:
        if reader is None:
            reader = ConfigReader(create_source())
        settings = build_settings(reader)

    setup_logging(settings)
    return App(settings=settings, reader=reader)
