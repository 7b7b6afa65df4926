"""Exception taxonomy for registry lookups, registrations and RPC resolution."""

from __future__ import annotations


class ChainRegistryError(Exception):
    """Base class for every error raised by chainreg."""


class InvalidArgumentError(ChainRegistryError, ValueError):
    """Empty alias or non-positive chain ID passed to the registry."""


class ChainNotFoundError(ChainRegistryError, LookupError):
    def __init__(self, identifier: str | int):
        self.identifier = identifier
        if isinstance(identifier, int):
            message = f"Chain with ID {identifier} not found"
        else:
            message = f'Chain with alias "{identifier}" not found'
        super().__init__(message)


class ChainIdConflictError(ChainRegistryError):
    def __init__(self, chain_id: int, existing_alias: str):
        self.chain_id = chain_id
        self.existing_alias = existing_alias
        super().__init__(f'Chain ID {chain_id} already used by "{existing_alias}"')


class RpcUrlUnresolvedError(ChainRegistryError, LookupError):
    def __init__(self, alias: str, env_var: str):
        self.alias = alias
        self.env_var = env_var
        super().__init__(
            f'No RPC URL for chain "{alias}": not in config, {env_var} not set, '
            f"and no catalog default available"
        )


class ConfigSourceError(ChainRegistryError):
    """A config source holds a value for the key but cannot produce it."""

    def __init__(self, message: str, key: str | None = None):
        self.key = key
        super().__init__(message)
