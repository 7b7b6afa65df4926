"""Pydantic v2 value types for registered chains."""

from pydantic import BaseModel, ConfigDict, Field


class ChainData(BaseModel):
    """Payload accepted by ChainRegistry.set_chain."""

    model_config = ConfigDict(frozen=True)

    name: str
    chain_id: int = Field(description="EVM chain ID, must be positive")
    rpc_url: str = Field(default="", description="Empty means resolve at read time")


class ChainRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    chain_id: int = Field(description="EVM chain ID")
    alias: str = Field(description="Lookup key, e.g. 'mainnet'")
    rpc_url: str = ""
