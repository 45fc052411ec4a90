"""JSON configuration store for multichain deployments."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Mapping

from .constants import DEFAULT_CONFIG_FILE, ENVIRONMENTS

logger = logging.getLogger(__name__)

CONFIG_FILE_ENV_VAR = "WORMHOLE_CONFIG_FILE"


class ConfigurationError(RuntimeError):
    """Raised when the configuration file cannot be read or written."""


def empty_config() -> dict[str, dict[str, Any]]:
    return {environment: {} for environment in ENVIRONMENTS}


def default_config_path(env: Mapping[str, str] | None = None) -> str:
    """Return the config path to use when none is given on the command line."""

    env_map = os.environ if env is None else env
    return env_map.get(CONFIG_FILE_ENV_VAR) or DEFAULT_CONFIG_FILE


class ConfigStore:
    """Reads and writes the ``wormhole.config.json`` document at one path.

    Relative paths are resolved against the working directory when the store
    is created, so a store keeps pointing at the same file for its lifetime.
    """

    def __init__(self, path: str | Path = DEFAULT_CONFIG_FILE) -> None:
        resolved = Path(path).expanduser()
        if not resolved.is_absolute():
            resolved = Path.cwd() / resolved
        self.path = resolved

    def __repr__(self) -> str:
        return f"ConfigStore({str(self.path)!r})"

    def exists(self) -> bool:
        return self.path.exists()

    def read(self) -> dict[str, Any]:
        """Return the parsed configuration.

        A missing file yields an empty document with all three environments.
        """

        if not self.path.exists():
            logger.debug("Config file %s not found; using empty configuration", self.path)
            return empty_config()

        try:
            loaded = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise ConfigurationError(f"Failed to read config file: {exc}") from exc

        if not isinstance(loaded, dict):
            raise ConfigurationError(
                f"Failed to read config file: expected {self.path} to contain a JSON object"
            )
        for environment, chains in loaded.items():
            if chains is None:
                continue
            if not isinstance(chains, dict):
                raise ConfigurationError(
                    f'Failed to read config file: environment "{environment}" must be a JSON object'
                )
            for chain, chain_config in chains.items():
                if chain_config is not None and not isinstance(chain_config, dict):
                    raise ConfigurationError(
                        f'Failed to read config file: chain "{chain}" in {environment} '
                        "must be a JSON object"
                    )
        logger.debug("Loaded configuration from %s", self.path)
        return loaded

    def write(self, config: Mapping[str, Any]) -> None:
        """Persist ``config``, always emitting mainnet, testnet and devnet."""

        full_config = {environment: config.get(environment) or {} for environment in ENVIRONMENTS}
        try:
            self.path.write_text(json.dumps(full_config, indent=2), encoding="utf-8")
        except (OSError, TypeError, ValueError) as exc:
            raise ConfigurationError(f"Failed to write config file: {exc}") from exc
        logger.info("Wrote configuration to %s", self.path)

    def get_environment(self, environment: str) -> dict[str, Any]:
        return self.read().get(environment) or {}

    def get_chain(self, chain: str, environment: str) -> dict[str, Any] | None:
        return self.get_environment(environment).get(chain) or None

    def set_chain(self, chain: str, environment: str, chain_config: Mapping[str, Any]) -> None:
        """Replace the configuration of ``chain`` in ``environment``."""

        config = self.read()
        config.setdefault(environment, {})[chain] = dict(chain_config)
        self.write(config)

    def update_chain(self, chain: str, environment: str, updates: Mapping[str, Any]) -> None:
        """Merge ``updates`` into the stored configuration of ``chain``."""

        config = self.read()
        env_config = config.get(environment) or {}
        config[environment] = env_config
        merged = dict(env_config.get(chain) or {})
        merged.update(updates)
        env_config[chain] = merged
        logger.debug("Updating %s (%s) fields: %s", chain, environment, ", ".join(sorted(updates)))
        self.write(config)
