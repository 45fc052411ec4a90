"""Token address checks and conversion to Wormhole's universal format.

Wormhole stores every token address as a 32-byte "universal address"
regardless of the chain it lives on. Each chain family contributes one
:class:`AddressFormat` that knows how to recognise a native address and how to
turn it into those 32 bytes. The result is rendered as ``0x`` followed by 64
lower-case hex digits.
"""

from __future__ import annotations

import binascii
import logging
import re
from dataclasses import dataclass
from typing import Callable

from .constants import CHAIN_FAMILIES, WORMHOLE_CHAIN_NAMES, ChainFamily

logger = logging.getLogger(__name__)

UNIVERSAL_ADDRESS_BYTES = 32

b58_digits = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"


class AddressConversionError(ValueError):
    """Raised when an address cannot be converted to the universal format."""


def base58_decode(value: str) -> bytes:
    """Decode a plain Base58 string (no version byte, no checksum)."""

    number = 0
    for character in value:
        number *= 58
        if character not in b58_digits:
            raise ValueError(f"Invalid Base58 character: {character}")
        number += b58_digits.index(character)

    decoded = b""
    if number:
        hex_value = f"{number:x}"
        if len(hex_value) % 2:
            hex_value = "0" + hex_value
        decoded = binascii.unhexlify(hex_value.encode("utf8"))

    padding = 0
    for character in value:
        if character == b58_digits[0]:
            padding += 1
        else:
            break
    return b"\x00" * padding + decoded


def _evm_to_bytes(address: str) -> bytes:
    return binascii.unhexlify(address[2:])


def _solana_to_bytes(address: str) -> bytes:
    raw = base58_decode(address)
    if len(raw) != UNIVERSAL_ADDRESS_BYTES:
        raise ValueError(
            f"Solana addresses must decode to {UNIVERSAL_ADDRESS_BYTES} bytes, got {len(raw)}"
        )
    return raw


@dataclass(frozen=True)
class AddressFormat:
    """Native address rules for one chain family."""

    family: ChainFamily
    pattern: re.Pattern[str]
    label: str
    description: str
    example: str
    to_bytes: Callable[[str], bytes]

    def matches(self, address: object) -> bool:
        return isinstance(address, str) and bool(self.pattern.fullmatch(address))


ADDRESS_FORMATS = {
    ChainFamily.EVM: AddressFormat(
        family=ChainFamily.EVM,
        pattern=re.compile(r"0x[a-fA-F0-9]{40}"),
        label="EVM",
        description="EVM addresses must start with 0x followed by 40 hexadecimal characters.",
        example="0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48",
        to_bytes=_evm_to_bytes,
    ),
    ChainFamily.SOLANA: AddressFormat(
        family=ChainFamily.SOLANA,
        pattern=re.compile(r"[1-9A-HJ-NP-Za-km-z]{32,44}"),
        label="Solana",
        description="Solana addresses are base58 encoded and typically 32-44 characters long.",
        example="So11111111111111111111111111111111111111112",
        to_bytes=_solana_to_bytes,
    ),
}


def address_format_for(chain: str) -> AddressFormat:
    """Return the address rules for ``chain``; unknown chains use EVM rules."""

    return ADDRESS_FORMATS[CHAIN_FAMILIES.get(chain, ChainFamily.EVM)]


class AddressConverter:
    """Validates native token addresses and converts them to universal form."""

    def is_valid_format(self, address: object, chain: str) -> bool:
        if not address:
            return False
        return address_format_for(chain).matches(address)

    def to_wormhole_format(self, address: str, chain: str) -> str:
        """Return ``address`` as a 0x-prefixed 32-byte universal address."""

        if chain not in WORMHOLE_CHAIN_NAMES:
            raise AddressConversionError(f"Failed to convert address: Unsupported chain: {chain}")

        address_format = address_format_for(chain)
        if not address_format.matches(address):
            raise AddressConversionError(
                f"Failed to convert address: invalid {WORMHOLE_CHAIN_NAMES[chain]} address {address!r}"
            )
        try:
            raw = address_format.to_bytes(address)
        except ValueError as exc:
            raise AddressConversionError(f"Failed to convert address: {exc}") from exc

        universal = raw.rjust(UNIVERSAL_ADDRESS_BYTES, b"\x00")
        logger.debug("Converted %s address %s to universal format", chain, address)
        return "0x" + universal.hex()


_default_converter = AddressConverter()


def is_valid_address_format(address: object, chain: str) -> bool:
    return _default_converter.is_valid_format(address, chain)


def convert_to_wormhole_address(address: str, chain: str) -> str:
    return _default_converter.to_wormhole_format(address, chain)
