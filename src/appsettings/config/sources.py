"""Key/value configuration sources.

Sources are read-only views over configuration owned elsewhere: an
in-memory mapping, process environment variables, or an App.config file.
A source returns None for a key it does not hold and raises when it cannot
be read at all.
"""

import os
import typing as t
import xml.etree.ElementTree as ET
from abc import ABC, abstractmethod
from pathlib import Path

from ..domain.exceptions import ConfigSourceError

DEFAULT_ENV_PREFIX = "APPSETTINGS_"


class BaseConfigSource(ABC):
    """Abstract base class for configuration sources."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Look up the value bound to a key.

        Args:
            key: Configuration key

        Returns:
            The raw value, or None if the key is not present

        Raises:
            ConfigSourceError: If the source cannot be read
        """
        pass


class NullSource(BaseConfigSource):
    """Null object implementation of a source that holds no keys."""

    def get(self, key: str) -> str | None:
        """No-op: always returns None."""
        return None


class MappingSource(BaseConfigSource):
    """Source backed by a mapping supplied by the caller.

    The mapping is not copied, so later changes to it are visible.
    """

    def __init__(self, mapping: t.Mapping[str, str]) -> None:
        self._mapping = mapping

    def get(self, key: str) -> str | None:
        return self._mapping.get(key)


class EnvironSource(BaseConfigSource):
    """Source backed by process environment variables.

    A key is looked up as ``prefix + KEY`` first, then verbatim.
    """

    def __init__(
        self, environ: t.Mapping[str, str] | None = None, prefix: str = ""
    ) -> None:
        self._environ = environ if environ is not None else os.environ
        self._prefix = prefix

    def get(self, key: str) -> str | None:
        value = self._environ.get(f"{self._prefix}{key.upper()}")
        if value is None:
            value = self._environ.get(key)
        return value


class AppConfigFileSource(BaseConfigSource):
    """Source backed by the ``appSettings`` section of an App.config file.

    Expected layout::

        <configuration>
          <appSettings>
            <add key="environment" value="Production" />
          </appSettings>
        </configuration>

    ``add``, ``remove`` and ``clear`` elements are applied in document order
    and keys match case-insensitively. The file is parsed on every lookup.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def get(self, key: str) -> str | None:
        return self.load().get(key.lower())

    def load(self) -> dict[str, str]:
        """Parse the file into a mapping of lower-cased keys to values.

        Raises:
            ConfigSourceError: If the file is missing, unreadable or not
                well-formed XML
        """
        try:
            root = ET.parse(self.path).getroot()
        except OSError as e:
            raise ConfigSourceError(f"Cannot read {self.path}: {e}") from e
        except ET.ParseError as e:
            raise ConfigSourceError(f"Malformed config file {self.path}: {e}") from e

        if root.tag != "configuration":
            raise ConfigSourceError(
                f"Expected <configuration> root in {self.path}, got <{root.tag}>"
            )

        settings: dict[str, str] = {}
        section = root.find("appSettings")
        if section is None:
            return settings

        for element in section:
            if element.tag == "clear":
                settings.clear()
                continue
            name = element.get("key")
            if name is None:
                raise ConfigSourceError(
                    f"<{element.tag}> without a key attribute in {self.path}"
                )
            if element.tag == "add":
                settings[name.lower()] = element.get("value", "")
            elif element.tag == "remove":
                settings.pop(name.lower(), None)
        return settings


class ChainedSource(BaseConfigSource):
    """Source that consults several sources in order.

    The first non-None value wins. An error from any consulted source
    propagates; later sources are not tried.
    """

    def __init__(self, *sources: BaseConfigSource) -> None:
        self.sources = sources

    def get(self, key: str) -> str | None:
        for source in self.sources:
            value = source.get(key)
            if value is not None:
                return value
        return None


def create_source(
    config_file: Path | None = None, env_prefix: str = DEFAULT_ENV_PREFIX
) -> BaseConfigSource:
    """Create the source used by the CLI.

    Environment variables take precedence over the config file.

    Args:
        config_file: Optional App.config style file
        env_prefix: Prefix for environment variable lookups

    Returns:
        Configured source
    """
    environ = EnvironSource(prefix=env_prefix)
    if config_file is None:
        return environ
    return ChainedSource(environ, AppConfigFileSource(config_file))
