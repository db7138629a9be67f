"""CLI state container."""

from ..config.settings import Settings


class CLIState:
    """Application state container for CLI commands.

    Holds the Settings resolved once by the global callback. Commands read
    the environment from here rather than consulting the source again.
    """

    def __init__(self, settings: Settings):
        self.settings = settings
