"""Default public RPC endpoints per environment and chain."""

from __future__ import annotations

DEFAULT_RPCS: dict[str, dict[str, str]] = {
    "mainnet": {
        "ethereum": "https://eth.llamarpc.com",
        "arbitrum": "https://arbitrum-one-rpc.publicnode.com",
        "optimism": "https://mainnet.optimism.io",
        "base": "https://mainnet.base.org",
        "solana": "https://api.mainnet-beta.solana.com",
    },
    "testnet": {
        "ethereum": "https://ethereum-sepolia-rpc.publicnode.com",
        "arbitrum": "https://arbitrum-sepolia-rpc.publicnode.com",
        "optimism": "https://sepolia.optimism.io",
        "base": "https://sepolia.base.org",
        "solana": "https://api.testnet.solana.com",
    },
    "devnet": {
        "ethereum": "http://localhost:8545",
        "arbitrum": "http://localhost:8546",
        "optimism": "http://localhost:8547",
        "base": "http://localhost:8548",
        "solana": "http://localhost:8899",
    },
}


def get_default_rpc(chain: str, environment: str) -> str | None:
    """Return the default RPC endpoint for ``chain`` in ``environment``."""

    return DEFAULT_RPCS.get(environment, {}).get(chain)
