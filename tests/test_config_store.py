import json
from pathlib import Path

import pytest

from wormhole_config.config import (
    CONFIG_FILE_ENV_VAR,
    ConfigStore,
    ConfigurationError,
    default_config_path,
)


def test_relative_path_resolves_against_working_directory(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(tmp_path)

    store = ConfigStore("custom.json")

    assert store.path == tmp_path / "custom.json"


def test_absolute_path_is_kept(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "wormhole.config.json"

    assert ConfigStore(path).path == path


def test_default_config_path_honours_environment() -> None:
    assert default_config_path({}) == "wormhole.config.json"
    assert default_config_path({CONFIG_FILE_ENV_VAR: "/etc/wormhole.json"}) == "/etc/wormhole.json"


def test_read_missing_file_returns_empty_environments(tmp_path: Path) -> None:
    store = ConfigStore(tmp_path / "missing.json")

    assert not store.exists()
    assert store.read() == {"mainnet": {}, "testnet": {}, "devnet": {}}


def test_read_parses_existing_file(tmp_path: Path) -> None:
    path = tmp_path / "wormhole.config.json"
    path.write_text(json.dumps({"testnet": {"base": {"mode": "BURNING"}}}))

    store = ConfigStore(path)

    assert store.exists()
    assert store.read() == {"testnet": {"base": {"mode": "BURNING"}}}


def test_read_rejects_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "wormhole.config.json"
    path.write_text("{not json")

    with pytest.raises(ConfigurationError) as excinfo:
        ConfigStore(path).read()

    assert "Failed to read config file" in str(excinfo.value)


def test_read_rejects_non_object_document(tmp_path: Path) -> None:
    path = tmp_path / "wormhole.config.json"
    path.write_text("[1, 2, 3]")

    with pytest.raises(ConfigurationError):
        ConfigStore(path).read()


def test_write_fills_missing_environments_with_two_space_indent(tmp_path: Path) -> None:
    path = tmp_path / "wormhole.config.json"
    store = ConfigStore(path)

    store.write({"testnet": {"solana": {"mode": "LOCKING"}}, "extra": {"ignored": True}})

    expected = {"mainnet": {}, "testnet": {"solana": {"mode": "LOCKING"}}, "devnet": {}}
    assert path.read_text() == json.dumps(expected, indent=2)


def test_write_reports_io_errors(tmp_path: Path) -> None:
    store = ConfigStore(tmp_path / "no-such-dir" / "wormhole.config.json")

    with pytest.raises(ConfigurationError) as excinfo:
        store.write({})

    assert "Failed to write config file" in str(excinfo.value)


def test_environment_and_chain_lookup(tmp_path: Path) -> None:
    store = ConfigStore(tmp_path / "wormhole.config.json")
    store.write({"mainnet": {"ethereum": {"mode": "LOCKING"}}})

    assert store.get_environment("mainnet") == {"ethereum": {"mode": "LOCKING"}}
    assert store.get_environment("devnet") == {}
    assert store.get_chain("ethereum", "mainnet") == {"mode": "LOCKING"}
    assert store.get_chain("solana", "mainnet") is None


def test_set_chain_replaces_existing_entry(tmp_path: Path) -> None:
    store = ConfigStore(tmp_path / "wormhole.config.json")
    store.set_chain("base", "testnet", {"rpc": "https://old", "mode": "BURNING"})

    store.set_chain("base", "testnet", {"rpc": "https://new"})

    assert store.get_chain("base", "testnet") == {"rpc": "https://new"}


def test_update_chain_merges_fields(tmp_path: Path) -> None:
    store = ConfigStore(tmp_path / "wormhole.config.json")
    store.set_chain("arbitrum", "devnet", {"rpc": "http://localhost:8546", "custom": 1})

    store.update_chain("arbitrum", "devnet", {"mode": "BURNING"})
    store.update_chain("optimism", "devnet", {"privateKey": "${OP_KEY}"})

    assert store.get_chain("arbitrum", "devnet") == {
        "rpc": "http://localhost:8546",
        "custom": 1,
        "mode": "BURNING",
    }
    assert store.get_chain("optimism", "devnet") == {"privateKey": "${OP_KEY}"}
    assert store.read()["mainnet"] == {}


@pytest.mark.parametrize(
    "document, message",
    [
        ({"testnet": {"ethereum": "oops"}}, 'chain "ethereum" in testnet must be a JSON object'),
        ({"testnet": {"base": [1, 2]}}, 'chain "base" in testnet must be a JSON object'),
        ({"mainnet": "oops"}, 'environment "mainnet" must be a JSON object'),
        ({"devnet": []}, 'environment "devnet" must be a JSON object'),
    ],
)
def test_read_rejects_malformed_entries(tmp_path: Path, document, message: str) -> None:
    path = tmp_path / "wormhole.config.json"
    path.write_text(json.dumps(document))

    with pytest.raises(ConfigurationError) as excinfo:
        ConfigStore(path).read()

    assert str(excinfo.value).startswith("Failed to read config file:")
    assert message in str(excinfo.value)


def test_read_accepts_null_entries(tmp_path: Path) -> None:
    path = tmp_path / "wormhole.config.json"
    path.write_text(json.dumps({"mainnet": None, "testnet": {"base": None}}))

    assert ConfigStore(path).read() == {"mainnet": None, "testnet": {"base": None}}
