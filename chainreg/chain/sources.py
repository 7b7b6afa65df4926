"""Config and environment sources consulted during RPC URL resolution."""

from __future__ import annotations

import logging
import os
import re
import tomllib
from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import Path

from chainreg.errors import ConfigSourceError

logger = logging.getLogger(__name__)

_ENV_PLACEHOLDER = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")


class ConfigSource(ABC):
    @abstractmethod
    def lookup(self, key: str) -> str | None:
        """Return the value for key, None if absent.

        Raises ConfigSourceError when the value exists but cannot be read.
        """


class EnvSource(ABC):
    @abstractmethod
    def lookup(self, name: str) -> str | None:
        """Return the variable's value, or None if it is not set."""


class OsEnvSource(EnvSource):
    def lookup(self, name: str) -> str | None:
        return os.environ.get(name)


class MappingEnvSource(EnvSource):
    def __init__(self, values: Mapping[str, str] | None = None):
        self.values = dict(values or {})

    def lookup(self, name: str) -> str | None:
        return self.values.get(name)


class MappingConfigSource(ConfigSource):
    def __init__(self, values: Mapping[str, str] | None = None):
        self.values = dict(values or {})

    def lookup(self, key: str) -> str | None:
        return self.values.get(key)


class TomlConfigSource(ConfigSource):
    """Read RPC endpoints from the `[rpc_endpoints]` table of a TOML file.

    Values may reference environment variables as `${NAME}`; they are
    substituted through `env_source`. The file is parsed on first lookup.
    """

    TABLE = "rpc_endpoints"

    def __init__(self, path: Path | str, env_source: EnvSource | None = None):
        self.path = Path(path)
        self.env_source = env_source or OsEnvSource()
        self._endpoints: dict[str, object] | None = None

    def _load(self) -> dict[str, object]:
        if self._endpoints is not None:
            return self._endpoints

        if not self.path.exists():
            logger.warning(f"RPC config file {self.path} does not exist, treating it as empty")
            self._endpoints = {}
            return self._endpoints

        try:
            document = tomllib.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
            raise ConfigSourceError(f"Cannot read RPC config {self.path}: {e}") from e

        endpoints = document.get(self.TABLE, {})
        if not isinstance(endpoints, dict):
            raise ConfigSourceError(f"[{self.TABLE}] in {self.path} must be a table")

        self._endpoints = endpoints
        logger.debug(f"Loaded {len(endpoints)} RPC endpoints from {self.path}")
        return self._endpoints

    def _interpolate(self, key: str, value: str) -> str:
        def _substitute(match: re.Match[str]) -> str:
            name = match.group(1)
            resolved = self.env_source.lookup(name)
            if resolved is None:
                raise ConfigSourceError(
                    f"RPC endpoint '{key}' references unset environment variable {name}",
                    key=key,
                )
            return resolved

        return _ENV_PLACEHOLDER.sub(_substitute, value)

    def lookup(self, key: str) -> str | None:
        endpoints = self._load()
        if key not in endpoints:
            return None

        value = endpoints[key]
        if not isinstance(value, str):
            raise ConfigSourceError(
                f"RPC endpoint '{key}' in {self.path} must be a string, got {type(value).__name__}",
                key=key,
            )
        return self._interpolate(key, value)
