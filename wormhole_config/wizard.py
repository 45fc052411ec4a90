"""Interactive wizard for building a multichain deployment configuration."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Sequence

from .addresses import AddressConverter, address_format_for
from .config import ConfigStore
from .constants import CHAINS, ENVIRONMENTS, display_chain_name
from .defaults import get_default_rpc
from .display import format_address, format_private_key
from .text_formatter import echo, get_terminal_width
from .validator import is_env_var_reference, validate_environment_config

logger = logging.getLogger(__name__)

MAX_CHAINS = len(CHAINS)
RULE = "━" * 50

ENVIRONMENT_CHOICES = [
    ("testnet", "Testnet (recommended for development)"),
    ("mainnet", "Mainnet (production deployments)"),
    ("devnet", "Devnet (local development)"),
]

STRATEGY_CHOICES = [
    ("multichain", "Multi-chain bridge (1 LOCKING chain, others BURNING)"),
    ("single", "Single mode deployment (all chains BURNING)"),
]

NON_INTERACTIVE_MESSAGE = (
    "Your terminal does not support interactive prompts. "
    "Please use the direct configuration commands instead: wormhole config set --help"
)


class WizardError(RuntimeError):
    """Raised when the wizard cannot run to completion."""


@dataclass
class DeploymentStrategy:
    type: str
    chain_count: int

    @property
    def is_multichain(self) -> bool:
        return self.type == "multichain"


def parse_chain_selection(raw: str) -> list[str]:
    """Turn ``"1, solana"`` style input into chain names, keeping order."""

    selected: list[str] = []
    for piece in raw.replace(" ", ",").split(","):
        piece = piece.strip().lower()
        if not piece:
            continue
        if piece.isdigit() and 1 <= int(piece) <= len(CHAINS):
            chain = CHAINS[int(piece) - 1]
        elif piece in CHAINS:
            chain = piece
        else:
            raise ValueError(f"Unknown chain: {piece}")
        if chain not in selected:
            selected.append(chain)
    return selected


class ConfigWizard:
    """Walks the user through configuring every chain of one environment.

    The steps are environment, deployment strategy, chain selection, LOCKING
    chain, per-chain settings, summary, and saving. All text is wrapped to
    the terminal width before it is printed.
    """

    def __init__(
        self,
        store: ConfigStore,
        converter: AddressConverter | None = None,
        *,
        columns: int | None = None,
    ) -> None:
        self.store = store
        self.converter = converter or AddressConverter()
        self.columns = get_terminal_width() if columns is None else columns

    def _echo(self, text: str = "") -> None:
        echo(text, self.columns)

    def _ask(self, prompt: str, required: str) -> str:
        """Read a non-blank answer, repeating ``required`` until one is given."""

        while True:
            answer = input(f"{prompt}: ").strip()
            if answer:
                return answer
            self._echo(required)

    def _choose(self, prompt: str, choices: Sequence[tuple[str, str]], default: str | None = None) -> str:
        """Show a numbered menu and return the value of the chosen entry.

        Entries can be picked by number or by value; blank input picks ``default``.
        """

        self._echo(prompt)
        for index, (value, label) in enumerate(choices, start=1):
            marker = " (default)" if value == default else ""
            self._echo(f"  [{index}] {label}{marker}")
        while True:
            raw = input("Select an option: ").strip().lower()
            if not raw and default is not None:
                return default
            for index, (value, _label) in enumerate(choices, start=1):
                if raw in {str(index), value.lower()}:
                    return value
            self._echo("Invalid selection, please try again.")

    def _ask_chain_count(self, default: int) -> int | None:
        """Return the entered chain count, ``default`` on blank input, ``None`` if not a number."""

        answer = input(f"How many chains do you want to configure? [{default}]: ").strip()
        if not answer:
            return default
        try:
            return int(answer)
        except ValueError:
            return None

    def _confirm(self, prompt: str, default: bool = True) -> bool:
        hint = "[Y/n]" if default else "[y/N]"
        answer = input(f"{prompt} {hint}: ").strip().lower()
        if not answer:
            return default
        return answer.startswith("y")

    def run(self, environment: str | None = None) -> bool:
        """Run the wizard; return ``True`` when a configuration was saved."""

        self._echo("\nWelcome to the Wormhole Multichain Configuration Wizard!\n")
        try:
            selected_env = self.select_environment(environment)
            strategy = self.select_deployment_strategy()
            chains = self.select_chains(strategy.chain_count)
            locking_chain = self.select_locking_chain(chains) if strategy.is_multichain else None
            chain_configs = self.configure_chains(chains, locking_chain, selected_env)

            if not self.show_summary_and_confirm(selected_env, chain_configs):
                self._echo("\nConfiguration cancelled.\n")
                return False

            self.save_configuration(selected_env, chain_configs)
            self.show_next_steps(selected_env, chain_configs)
        except EOFError as exc:
            raise WizardError(NON_INTERACTIVE_MESSAGE) from exc
        return True

    def select_environment(self, preselected: str | None = None) -> str:
        if preselected in ENVIRONMENTS:
            self._echo(f"Environment: {preselected}\n")
            return preselected
        environment = self._choose(
            "Which environment are you configuring?", ENVIRONMENT_CHOICES, default="testnet"
        )
        self._echo()
        return environment

    def select_deployment_strategy(self) -> DeploymentStrategy:
        strategy_type = self._choose(
            "What type of deployment are you setting up?", STRATEGY_CHOICES, default="multichain"
        )
        while True:
            count = self._ask_chain_count(default=2)
            if count is None or not 1 <= count <= MAX_CHAINS:
                self._echo(f"Please enter a number between 1 and {MAX_CHAINS}")
                continue
            if count == 1 and strategy_type == "multichain":
                self._echo(
                    "A multichain deployment requires at least 2 chains. "
                    "Please enter 2 or more, or choose single mode deployment."
                )
                continue
            break
        self._echo()
        return DeploymentStrategy(type=strategy_type, chain_count=count)

    def select_chains(self, count: int) -> list[str]:
        self._echo(f"Select {count} chain(s) to configure:")
        for index, chain in enumerate(CHAINS, start=1):
            self._echo(f"  [{index}] {display_chain_name(chain)}")
        while True:
            raw = input("Chains (comma-separated names or numbers): ")
            try:
                chains = parse_chain_selection(raw)
            except ValueError as exc:
                self._echo(str(exc))
                continue
            if len(chains) != count:
                self._echo(f"Please select exactly {count} chain(s)")
                continue
            self._echo()
            return chains

    def select_locking_chain(self, chains: Sequence[str]) -> str:
        if len(chains) == 1:
            return chains[0]
        locking_chain = self._choose(
            "Which chain will hold the original tokens (LOCKING mode)?\n"
            "  The other chain(s) will use BURNING mode for wrapped tokens.",
            [(chain, display_chain_name(chain)) for chain in chains],
        )
        self._echo()
        return locking_chain

    def configure_chains(
        self, chains: Sequence[str], locking_chain: str | None, environment: str
    ) -> dict[str, dict[str, Any]]:
        configs: dict[str, dict[str, Any]] = {}
        for position, chain in enumerate(chains, start=1):
            mode = "LOCKING" if chain == locking_chain else "BURNING"
            self._echo(f"\nConfiguring: {display_chain_name(chain)} ({mode}) [{position}/{len(chains)}]")
            self._echo(RULE)
            configs[chain] = self.configure_chain(chain, mode, environment)
        self._echo()
        return configs

    def configure_chain(self, chain: str, mode: str, environment: str) -> dict[str, Any]:
        chain_config: dict[str, Any] = {"mode": mode}

        default_rpc = get_default_rpc(chain, environment)
        rpc_choice = self._choose(
            f"RPC Endpoint (default: {default_rpc})",
            [("default", "Use default"), ("custom", "Custom RPC endpoint")],
            default="default",
        )
        if rpc_choice == "default" and default_rpc:
            chain_config["rpc"] = default_rpc
        else:
            chain_config["rpc"] = self._prompt_rpc()

        self._echo("\n  Security tip: Use environment variable syntax for production")
        self._echo(f"  Example: ${{{chain.upper()}_PRIVATE_KEY}}\n")
        chain_config["privateKey"] = self._ask(
            "Private Key (required for transactions)", "Private key is required"
        )

        token = self._prompt_token_address(chain)
        self._echo("  Converting to Wormhole format...")
        chain_config["tokenAddress"] = self.converter.to_wormhole_format(token, chain)
        self._echo(f"  ✓ Converted: {format_address(chain_config['tokenAddress'])}")
        return chain_config

    def _prompt_rpc(self) -> str:
        while True:
            rpc = self._ask("Enter custom RPC endpoint", "RPC endpoint is required")
            if rpc.startswith(("http://", "https://")):
                return rpc
            self._echo("RPC endpoint must start with http:// or https://")

    def _prompt_token_address(self, chain: str) -> str:
        while True:
            token = self._ask("Token contract address", "Token address is required")
            if self.converter.is_valid_format(token, chain):
                return token
            address_format = address_format_for(chain)
            self._echo(f"Invalid {address_format.label} address. {address_format.description}")

    def show_summary_and_confirm(self, environment: str, chain_configs: dict[str, dict[str, Any]]) -> bool:
        self._echo("\n\nConfiguration Summary")
        self._echo(RULE)
        self._echo(f"\nEnvironment: {environment}\n")
        self._echo("Chains:")
        for chain, chain_config in chain_configs.items():
            self._echo(f"  • {display_chain_name(chain)} [{chain_config['mode']}]")
            self._echo(f"    RPC:   {chain_config['rpc']}")
            self._echo(f"    Key:   {format_private_key(chain_config['privateKey'])}")
            self._echo(f"    Token: {format_address(chain_config['tokenAddress'])}")
            self._echo()

        validation = validate_environment_config(chain_configs, environment)
        if validation.errors:
            self._echo("Configuration has errors:\n")
            for error in validation.errors:
                self._echo(f"   ✗ {error}")
            self._echo("\nPlease run the wizard again to fix these issues.\n")
            return False

        if validation.warnings:
            self._echo("Warnings:\n")
            for warning in validation.warnings:
                self._echo(f"   ⚠ {warning}")
            self._echo()
        else:
            self._echo("✓ Configuration is valid\n")

        return self._confirm("Save this configuration?", default=True)

    def save_configuration(self, environment: str, chain_configs: dict[str, dict[str, Any]]) -> None:
        config = self.store.read()
        config[environment] = chain_configs
        self.store.write(config)
        logger.info("Saved %d chain(s) for %s", len(chain_configs), environment)
        self._echo(f"\n✓ Configuration saved to {self.store.path}\n")

    def show_next_steps(self, environment: str, chain_configs: dict[str, dict[str, Any]]) -> None:
        self._echo("Next steps:\n")
        env_vars = [
            chain_config["privateKey"][2:-1]
            for chain_config in chain_configs.values()
            if is_env_var_reference(chain_config["privateKey"])
        ]
        step = 1
        if env_vars:
            self._echo("  1. Set your environment variables:")
            for name in env_vars:
                self._echo(f'     export {name}="your-private-key"')
            self._echo()
            step = 2

        self._echo(f"  {step}. Verify your configuration:")
        self._echo(f"     wormhole validate --env {environment}\n")
        self._echo(f"  {step + 1}. View your configuration anytime:")
        self._echo("     wormhole config show\n")
