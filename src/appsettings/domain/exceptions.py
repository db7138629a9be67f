"""Custom exceptions for appsettings."""


class AppSettingsError(Exception):
    """Base exception for appsettings errors."""

    pass


class ConfigSourceError(AppSettingsError):
    """Raised by a configuration source that cannot be read.

    Examples are a missing or malformed App.config file. Sources raise this
    from their lookup method; the reader maps it to SourceUnavailableError.
    """

    pass


class SourceUnavailableError(AppSettingsError):
    """Raised when the configuration source cannot be consulted at all.

    This is the only fatal error of environment resolution. A missing or
    unparseable value is not an error and resolves to Environment.NOTSET.
    The underlying fault is available as ``__cause__``.
    """

    MESSAGE = "AppConfig:: Environment key required!"

    def __init__(self, *, key: str) -> None:
        self.key = key
        super().__init__(self.MESSAGE)
