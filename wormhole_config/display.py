"""Redaction helpers for printing configuration values."""

from __future__ import annotations

from typing import Any, Mapping


def format_private_key(key: str) -> str:
    """Return ``key`` safe for display.

    Environment variable references such as ``${ETH_KEY}`` are shown in full;
    literal keys are reduced to their first 10 and last 4 characters.
    """

    if key.startswith("${"):
        return key
    return f"{key[:10]}...{key[-4:]}"


def format_address(address: str, prefix_len: int = 10, suffix_len: int = 4) -> str:
    if len(address) <= prefix_len + suffix_len:
        return address
    return f"{address[:prefix_len]}...{address[len(address) - suffix_len:]}"


def format_config_for_display(config: Mapping[str, Any]) -> dict[str, Any]:
    """Copy ``config`` with every private key passed through :func:`format_private_key`."""

    display: dict[str, Any] = {}
    for environment, chains in config.items():
        display[environment] = {}
        for chain, chain_config in (chains or {}).items():
            entry = dict(chain_config or {})
            if entry.get("privateKey"):
                entry["privateKey"] = format_private_key(str(entry["privateKey"]))
            display[environment][chain] = entry
    return display


def chain_detail_lines(chain_config: Mapping[str, Any]) -> list[str]:
    """Return the indented ``RPC/Private Key/Token/Mode`` lines for a chain."""

    lines = []
    if chain_config.get("rpc"):
        lines.append(f"  RPC:          {chain_config['rpc']}")
    if chain_config.get("privateKey"):
        lines.append(f"  Private Key:  {format_private_key(str(chain_config['privateKey']))}")
    if chain_config.get("tokenAddress"):
        lines.append(f"  Token:        {chain_config['tokenAddress']}")
    if chain_config.get("mode"):
        lines.append(f"  Mode:         {chain_config['mode']}")
    return lines
