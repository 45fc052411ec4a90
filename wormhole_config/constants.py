"""Names shared across the wormhole configuration tool."""

from __future__ import annotations

from enum import Enum

DEFAULT_CONFIG_FILE = "wormhole.config.json"

ENVIRONMENTS = ("mainnet", "testnet", "devnet")

CHAINS = ("ethereum", "arbitrum", "optimism", "base", "solana")

MODES = ("BURNING", "LOCKING")

REQUIRED_CHAIN_FIELDS = ("rpc", "privateKey", "tokenAddress", "mode")


class ChainFamily(Enum):
    """Address encoding family a chain belongs to."""

    EVM = "evm"
    SOLANA = "solana"


CHAIN_FAMILIES = {
    "ethereum": ChainFamily.EVM,
    "arbitrum": ChainFamily.EVM,
    "optimism": ChainFamily.EVM,
    "base": ChainFamily.EVM,
    "solana": ChainFamily.SOLANA,
}

# Chain names as spelled by the Wormhole SDK.
WORMHOLE_CHAIN_NAMES = {
    "ethereum": "Ethereum",
    "arbitrum": "Arbitrum",
    "optimism": "Optimism",
    "base": "Base",
    "solana": "Solana",
}


def display_chain_name(chain: str) -> str:
    return chain[:1].upper() + chain[1:]
