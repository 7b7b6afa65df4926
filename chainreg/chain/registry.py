"""Chain registry mapping aliases and chain IDs to chain records."""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping

from chainreg.chain.catalog import DEFAULT_CATALOG, CatalogEntry
from chainreg.chain.resolver import RpcResolver
from chainreg.chain.sources import ConfigSource, EnvSource, OsEnvSource, TomlConfigSource
from chainreg.config import Settings, get_settings
from chainreg.errors import ChainIdConflictError, ChainNotFoundError, InvalidArgumentError
from chainreg.models.schema import ChainData, ChainRecord

logger = logging.getLogger(__name__)


class ChainRegistry:
    """Alias <-> chain ID registry seeded lazily from the built-in catalog.

    Stored records keep an empty rpc_url unless one was registered
    explicitly; lookups return a copy with the URL resolved by RpcResolver.
    """

    def __init__(
        self,
        config_source: ConfigSource | None = None,
        env_source: EnvSource | None = None,
        use_catalog_fallback: bool = True,
        catalog: tuple[CatalogEntry, ...] = DEFAULT_CATALOG,
    ):
        self._by_alias: dict[str, ChainRecord] = {}
        self._alias_by_id: dict[int, str] = {}
        self._default_urls: dict[str, str] = {}
        self._catalog = catalog
        self._initialized = False
        self._init_lock = threading.Lock()
        self._resolver = RpcResolver(
            config_source=config_source,
            env_source=env_source,
            default_urls=self._default_urls,
            use_catalog_fallback=use_catalog_fallback,
        )

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> ChainRegistry:
        settings = settings or get_settings()
        env_source = OsEnvSource()
        config_source = None
        if settings.chains_config_path is not None:
            config_source = TomlConfigSource(settings.chains_config_path, env_source=env_source)
        return cls(
            config_source=config_source,
            env_source=env_source,
            use_catalog_fallback=settings.use_catalog_fallback,
        )

    @property
    def use_catalog_fallback(self) -> bool:
        return self._resolver.use_catalog_fallback

    def set_fallback_policy(self, use_catalog_fallback: bool) -> None:
        self._resolver.use_catalog_fallback = use_catalog_fallback

    def _ensure_initialized(self) -> None:
        if self._initialized:
            return
        with self._init_lock:
            if self._initialized:
                return
            try:
                for entry in self._catalog:
                    self._default_urls[entry.alias] = entry.default_rpc_url
                    self._register(entry.alias, ChainData(name=entry.name, chain_id=entry.chain_id))
            finally:
                # Set only once the maps are complete; a bad catalog entry still never reseeds.
                self._initialized = True
            logger.debug(f"Seeded registry with {len(self._catalog)} catalog chains")

    def _register(self, alias: str, data: ChainData) -> None:
        if not alias:
            raise InvalidArgumentError("empty alias")
        if data.chain_id == 0:
            raise InvalidArgumentError("zero chain id")
        if data.chain_id < 0:
            raise InvalidArgumentError(f"chain id must be positive, got {data.chain_id}")

        existing_alias = self._alias_by_id.get(data.chain_id)
        if existing_alias is not None and existing_alias != alias:
            logger.warning(f"Rejected '{alias}': chain ID {data.chain_id} belongs to '{existing_alias}'")
            raise ChainIdConflictError(data.chain_id, existing_alias)

        previous = self._by_alias.get(alias)
        if previous is not None and self._alias_by_id.get(previous.chain_id) == alias:
            del self._alias_by_id[previous.chain_id]

        self._by_alias[alias] = ChainRecord(
            name=data.name,
            chain_id=data.chain_id,
            alias=alias,
            rpc_url=data.rpc_url,
        )
        self._alias_by_id[data.chain_id] = alias

    def set_chain(self, alias: str, data: ChainData | ChainRecord | Mapping) -> None:
        """Register or replace the chain stored under alias.

        A ChainRecord's own alias field is ignored; `alias` decides where it is stored.
        """
        if isinstance(data, ChainRecord):
            data = ChainData(name=data.name, chain_id=data.chain_id, rpc_url=data.rpc_url)
        elif not isinstance(data, ChainData):
            data = ChainData.model_validate(data)

        if not alias:
            raise InvalidArgumentError("empty alias")
        if data.chain_id == 0:
            raise InvalidArgumentError("zero chain id")

        self._ensure_initialized()
        self._register(alias, data)
        logger.info(f"Registered chain '{alias}' (chain_id={data.chain_id})")

    def get_chain_by_alias(self, alias: str) -> ChainRecord:
        if not alias:
            raise InvalidArgumentError("empty alias")
        self._ensure_initialized()

        record = self._by_alias.get(alias)
        if record is None:
            raise ChainNotFoundError(alias)
        return self._resolver.resolve(alias, record)

    def get_chain_by_id(self, chain_id: int) -> ChainRecord:
        if isinstance(chain_id, bool):
            raise InvalidArgumentError(f"chain id must be an integer, got {chain_id!r}")
        if chain_id == 0:
            raise InvalidArgumentError("zero chain id")
        if chain_id < 0:
            raise InvalidArgumentError(f"chain id must be positive, got {chain_id}")
        self._ensure_initialized()

        alias = self._alias_by_id.get(chain_id)
        if alias is None:
            raise ChainNotFoundError(chain_id)
        return self.get_chain_by_alias(alias)

    def get_chain(self, alias_or_id: str | int) -> ChainRecord:
        """Look up a chain by alias (str) or chain ID (int)."""
        if isinstance(alias_or_id, int):
            return self.get_chain_by_id(alias_or_id)
        return self.get_chain_by_alias(alias_or_id)

    def aliases(self) -> list[str]:
        """Registered aliases, catalog entries first, in registration order."""
        self._ensure_initialized()
        return list(self._by_alias)
