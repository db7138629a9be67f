"""Resolution of typed values from a configuration source."""

import typing as t

from ..domain.exceptions import SourceUnavailableError
from ..infrastructure.logging import get_logger
from .settings import Environment
from .sources import BaseConfigSource

if t.TYPE_CHECKING:
    import loguru

ENVIRONMENT_KEY = "environment"


class ConfigReader:
    """Read-only facade resolving typed values from a configuration source.

    Nothing is cached: every call consults the source, so changes made to
    it between calls are observed.

    Two outcomes are kept apart. A missing or unrecognised value is data and
    resolves to Environment.NOTSET. A source that cannot be consulted is
    fatal and raises SourceUnavailableError.
    """

    def __init__(
        self,
        source: BaseConfigSource,
        logger: "loguru.Logger" = get_logger(__name__),
    ) -> None:
        """Initialize the reader.

        Args:
            source: Source to read configuration values from
            logger: Logger instance for recording resolution outcomes
        """
        self.source = source
        self._logger = logger

    @property
    def environment(self) -> Environment:
        """Resolved deployment environment, see get_environment."""
        return self.get_environment()

    def get_environment(self) -> Environment:
        """Resolve the ``environment`` key to an Environment member.

        Returns:
            The member named by the configured value, or Environment.NOTSET
            if the key is absent or its value names no member

        Raises:
            SourceUnavailableError: If looking up the key in the source fails
        """
        raw = self._lookup(ENVIRONMENT_KEY)

        if raw is None:
            self._logger.info(
                f"{ENVIRONMENT_KEY!r} is not configured, using {Environment.NOTSET}"
            )
            return Environment.NOTSET

        environment = Environment.parse(raw)
        if environment is None:
            self._logger.warning(
                f"Unrecognised {ENVIRONMENT_KEY!r} value {raw!r}, "
                f"falling back to {Environment.NOTSET}"
            )
            return Environment.NOTSET

        self._logger.debug(f"Resolved {ENVIRONMENT_KEY!r} to {environment}")
        return environment

    def _lookup(self, key: str) -> str | None:
        # Any fault raised by the source is fatal, never a fallback.
        try:
            return self.source.get(key)
        except Exception as e:
            self._logger.error(f"Configuration source failed for {key!r}: {e}")
            raise SourceUnavailableError(key=key) from e
