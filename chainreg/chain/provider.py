"""AsyncWeb3 client construction from a resolved registry record, using web3.py 7.x."""

from __future__ import annotations

from web3 import AsyncWeb3, AsyncHTTPProvider

from chainreg.chain.registry import ChainRegistry
from chainreg.models.schema import ChainRecord


class ChainProvider:
    """Async web3 provider for a registered chain."""

    def __init__(self, record: ChainRecord):
        if not record.rpc_url:
            raise ValueError(f"Chain '{record.alias}' has no resolved RPC URL")
        self.record = record
        self.w3 = AsyncWeb3(AsyncHTTPProvider(record.rpc_url))

    @classmethod
    def from_registry(cls, registry: ChainRegistry, alias_or_id: str | int) -> ChainProvider:
        return cls(registry.get_chain(alias_or_id))

    @property
    def chain_id(self) -> int:
        return self.record.chain_id

    @property
    def name(self) -> str:
        return self.record.name

    @property
    def rpc_url(self) -> str:
        return self.record.rpc_url
