"""Tests for the TOML, mapping and os.environ sources."""

from __future__ import annotations

import pytest

from chainreg.chain.sources import MappingConfigSource, MappingEnvSource, OsEnvSource, TomlConfigSource
from chainreg.errors import ConfigSourceError


def _write(tmp_path, text: str):
    path = tmp_path / "chains.toml"
    path.write_text(text, encoding="utf-8")
    return path


class TestTomlConfigSource:
    def test_literal_value(self, tmp_path):
        path = _write(tmp_path, '[rpc_endpoints]\nmainnet = "https://configured.example"\n')
        assert TomlConfigSource(path).lookup("mainnet") == "https://configured.example"

    def test_absent_key(self, tmp_path):
        path = _write(tmp_path, '[rpc_endpoints]\nmainnet = "https://configured.example"\n')
        assert TomlConfigSource(path).lookup("optimism") is None

    def test_missing_table(self, tmp_path):
        path = _write(tmp_path, '[profile.default]\nsrc = "src"\n')
        assert TomlConfigSource(path).lookup("mainnet") is None

    def test_missing_file_is_empty(self, tmp_path):
        assert TomlConfigSource(tmp_path / "nope.toml").lookup("mainnet") is None

    def test_env_interpolation(self, tmp_path):
        path = _write(tmp_path, '[rpc_endpoints]\nmainnet = "https://eth.example/v2/${ALCHEMY_KEY}"\n')
        source = TomlConfigSource(path, env_source=MappingEnvSource({"ALCHEMY_KEY": "abc123"}))
        assert source.lookup("mainnet") == "https://eth.example/v2/abc123"

    def test_unset_env_reference_is_a_read_error(self, tmp_path):
        path = _write(tmp_path, '[rpc_endpoints]\nmainnet = "${MAINNET_RPC}"\n')
        source = TomlConfigSource(path, env_source=MappingEnvSource())
        with pytest.raises(ConfigSourceError, match="MAINNET_RPC") as exc_info:
            source.lookup("mainnet")
        assert exc_info.value.key == "mainnet"

    def test_malformed_toml(self, tmp_path):
        path = _write(tmp_path, "[rpc_endpoints\nmainnet = \n")
        with pytest.raises(ConfigSourceError, match="Cannot read"):
            TomlConfigSource(path).lookup("mainnet")

    def test_non_table_endpoints(self, tmp_path):
        path = _write(tmp_path, 'rpc_endpoints = "https://x"\n')
        with pytest.raises(ConfigSourceError, match="must be a table"):
            TomlConfigSource(path).lookup("mainnet")

    def test_non_string_value(self, tmp_path):
        path = _write(tmp_path, "[rpc_endpoints]\nmainnet = 42\n")
        with pytest.raises(ConfigSourceError, match="must be a string"):
            TomlConfigSource(path).lookup("mainnet")

    def test_parsed_once(self, tmp_path):
        path = _write(tmp_path, '[rpc_endpoints]\nmainnet = "https://first.example"\n')
        source = TomlConfigSource(path)
        assert source.lookup("mainnet") == "https://first.example"

        path.write_text('[rpc_endpoints]\nmainnet = "https://second.example"\n', encoding="utf-8")
        assert source.lookup("mainnet") == "https://first.example"

    def test_uses_os_environ_by_default(self, tmp_path, monkeypatch):
        monkeypatch.setenv("CHAINREG_TEST_KEY", "k")
        path = _write(tmp_path, '[rpc_endpoints]\nbase = "https://base.example/${CHAINREG_TEST_KEY}"\n')
        assert TomlConfigSource(path).lookup("base") == "https://base.example/k"


class TestMappingSources:
    def test_config_mapping(self):
        source = MappingConfigSource({"mainnet": "https://m"})
        assert source.lookup("mainnet") == "https://m"
        assert source.lookup("base") is None

    def test_env_mapping(self):
        source = MappingEnvSource({"MAINNET_RPC_URL": "https://m"})
        assert source.lookup("MAINNET_RPC_URL") == "https://m"
        assert source.lookup("BASE_RPC_URL") is None

    def test_mapping_is_copied(self):
        values = {"mainnet": "https://m"}
        source = MappingConfigSource(values)
        values["mainnet"] = "https://changed"
        assert source.lookup("mainnet") == "https://m"


class TestOsEnvSource:
    def test_set_and_unset(self, monkeypatch):
        monkeypatch.setenv("CHAINREG_TEST_RPC_URL", "https://os.example")
        monkeypatch.delenv("CHAINREG_MISSING_RPC_URL", raising=False)
        source = OsEnvSource()
        assert source.lookup("CHAINREG_TEST_RPC_URL") == "https://os.example"
        assert source.lookup("CHAINREG_MISSING_RPC_URL") is None
