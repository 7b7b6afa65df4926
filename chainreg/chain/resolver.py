"""Four-tier RPC URL resolution: record, config, environment, catalog default."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from chainreg.chain.sources import ConfigSource, EnvSource, OsEnvSource
from chainreg.errors import RpcUrlUnresolvedError
from chainreg.models.schema import ChainRecord

logger = logging.getLogger(__name__)

RPC_ENV_SUFFIX = "_RPC_URL"


def rpc_env_var(alias: str) -> str:
    """Environment variable consulted for an alias, e.g. mainnet -> MAINNET_RPC_URL."""
    return f"{alias.upper()}{RPC_ENV_SUFFIX}"


class RpcResolver:
    """Fill in a record's RPC URL.

    Precedence, first hit wins:
      1. a non-empty rpc_url already on the record
      2. config_source.lookup(alias); ConfigSourceError propagates
      3. env_source.lookup(<ALIAS>_RPC_URL)
      4. the catalog default, only while use_catalog_fallback is on
    """

    def __init__(
        self,
        config_source: ConfigSource | None = None,
        env_source: EnvSource | None = None,
        default_urls: Mapping[str, str] | None = None,
        use_catalog_fallback: bool = True,
    ):
        self.config_source = config_source
        self.env_source = env_source if env_source is not None else OsEnvSource()
        self.default_urls = default_urls if default_urls is not None else {}
        self.use_catalog_fallback = use_catalog_fallback

    def resolve(self, alias: str, record: ChainRecord) -> ChainRecord:
        if record.rpc_url:
            logger.debug(f"{alias}: using RPC URL set on the record")
            return record

        if self.config_source is not None:
            configured = self.config_source.lookup(alias)
            if configured:
                logger.debug(f"{alias}: RPC URL from config")
                return record.model_copy(update={"rpc_url": configured})

        env_var = rpc_env_var(alias)
        from_env = self.env_source.lookup(env_var)
        if from_env:
            logger.debug(f"{alias}: RPC URL from ${env_var}")
            return record.model_copy(update={"rpc_url": from_env})

        default = self.default_urls.get(alias) if self.use_catalog_fallback else None
        if default:
            logger.debug(f"{alias}: falling back to catalog default RPC URL")
            return record.model_copy(update={"rpc_url": default})

        raise RpcUrlUnresolvedError(alias, env_var)
