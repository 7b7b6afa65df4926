from __future__ import annotations

import pytest

from chainreg.chain.registry import ChainRegistry
from chainreg.chain.sources import MappingConfigSource, MappingEnvSource
from chainreg.config import get_settings


@pytest.fixture
def config_source() -> MappingConfigSource:
    return MappingConfigSource()


@pytest.fixture
def env_source() -> MappingEnvSource:
    return MappingEnvSource()


@pytest.fixture
def registry(config_source, env_source) -> ChainRegistry:
    """Registry isolated from the process environment."""
    return ChainRegistry(config_source=config_source, env_source=env_source)


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
