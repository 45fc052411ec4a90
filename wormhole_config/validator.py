"""Deployment mode and completeness checks for configured chains.

A Wormhole multichain deployment either burns on every chain, or locks the
original tokens on exactly one chain and burns the wrapped ones everywhere
else. These helpers report violations of that rule together with missing
fields and insecure-looking private keys.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from .constants import ENVIRONMENTS, REQUIRED_CHAIN_FIELDS

MIN_PRIVATE_KEY_LENGTH = 32


@dataclass
class ValidationResult:
    """Outcome of validating a single environment."""

    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors


@dataclass
class ConfigValidationReport:
    """Validation results for every environment in a configuration."""

    results: dict[str, ValidationResult]

    @property
    def valid(self) -> bool:
        return all(result.valid for result in self.results.values())


def is_env_var_reference(value: str) -> bool:
    """Return ``True`` when ``value`` uses the ``${NAME}`` syntax."""

    return value.startswith("${") and value.endswith("}")


def validate_environment_config(env_config: Mapping[str, Any], environment: str) -> ValidationResult:
    result = ValidationResult()

    if not env_config:
        result.warnings.append(f"No chains configured for {environment}")
        return result

    locking_chains: list[str] = []
    burning_count = 0
    missing_mode_chains: list[str] = []

    for chain, chain_config in env_config.items():
        chain_config = chain_config or {}
        missing_fields = [name for name in REQUIRED_CHAIN_FIELDS if not chain_config.get(name)]
        if "mode" in missing_fields:
            missing_mode_chains.append(chain)
        if missing_fields:
            result.errors.append(
                f'Chain "{chain}" is missing required fields: {", ".join(missing_fields)}'
            )

        mode = chain_config.get("mode")
        if mode == "LOCKING":
            locking_chains.append(chain)
        elif mode == "BURNING":
            burning_count += 1
        elif mode:
            result.errors.append(
                f'Chain "{chain}" has invalid mode: {mode}. Must be LOCKING or BURNING'
            )

        private_key = chain_config.get("privateKey")
        if private_key:
            private_key = str(private_key)
            if not is_env_var_reference(private_key) and len(private_key) < MIN_PRIVATE_KEY_LENGTH:
                result.warnings.append(
                    f'Chain "{chain}" has a suspiciously short private key. '
                    "Consider using environment variable syntax: ${VAR_NAME}"
                )

    if len(locking_chains) == 1 and burning_count == 0:
        result.warnings.append(
            "Only one chain configured with LOCKING mode. "
            "Consider adding BURNING chains for a multichain deployment."
        )
    elif len(locking_chains) > 1:
        result.errors.append(
            f"Invalid configuration: {len(locking_chains)} chains have LOCKING mode "
            f"({', '.join(locking_chains)}). Only one chain can have LOCKING mode, "
            "all others must be BURNING."
        )

    if missing_mode_chains and (locking_chains or burning_count):
        result.errors.append(
            f"Some chains are missing mode configuration: {', '.join(missing_mode_chains)}"
        )

    return result


def validate_config(config: Mapping[str, Any]) -> ConfigValidationReport:
    """Validate mainnet, testnet and devnet of a full configuration."""

    return ConfigValidationReport(
        results={
            environment: validate_environment_config(config.get(environment) or {}, environment)
            for environment in ENVIRONMENTS
        }
    )
