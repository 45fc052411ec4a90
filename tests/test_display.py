from wormhole_config.display import (
    chain_detail_lines,
    format_address,
    format_config_for_display,
    format_private_key,
)

UNIVERSAL = "0x000000000000000000000000a0b86991c6218b36c1d19d4a2e9eb0ce3606eb48"


def test_env_var_keys_are_shown_verbatim() -> None:
    assert format_private_key("${ETH_PRIVATE_KEY}") == "${ETH_PRIVATE_KEY}"
    assert format_private_key("${PARTIAL") == "${PARTIAL"


def test_literal_keys_are_truncated() -> None:
    key = "0x1234567890abcdef1234567890abcdef"

    assert format_private_key(key) == "0x12345678...cdef"


def test_format_address_truncates_long_values() -> None:
    assert format_address(UNIVERSAL) == "0x00000000...eb48"
    assert format_address(UNIVERSAL, prefix_len=6, suffix_len=6) == "0x0000...06eb48"


def test_format_address_keeps_short_values() -> None:
    assert format_address("0x1234") == "0x1234"
    assert format_address("a" * 14) == "a" * 14


def test_config_display_copy_redacts_keys_without_mutating() -> None:
    config = {
        "mainnet": {},
        "testnet": {
            "ethereum": {"privateKey": "0x" + "ab" * 32, "mode": "LOCKING"},
            "base": {"privateKey": "${BASE_KEY}", "mode": "BURNING"},
        },
    }

    display = format_config_for_display(config)

    assert display["testnet"]["ethereum"]["privateKey"] == "0xabababab...abab"
    assert display["testnet"]["base"]["privateKey"] == "${BASE_KEY}"
    assert display["mainnet"] == {}
    assert config["testnet"]["ethereum"]["privateKey"] == "0x" + "ab" * 32


def test_chain_detail_lines_skip_missing_fields() -> None:
    lines = chain_detail_lines({"rpc": "https://rpc", "mode": "BURNING"})

    assert lines == ["  RPC:          https://rpc", "  Mode:         BURNING"]
