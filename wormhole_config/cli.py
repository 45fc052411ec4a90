"""Command line interface for the Wormhole multichain configuration tool.

The ``wormhole`` command manages ``wormhole.config.json``: it sets and shows
per-chain settings, validates deployment modes, converts token addresses to
Wormhole's universal format and runs the interactive wizard. It never talks
to a blockchain.
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from dataclasses import dataclass, field
from typing import Any, Sequence

import yaml

from . import __version__
from .addresses import AddressConversionError, AddressConverter, address_format_for
from .config import ConfigStore, ConfigurationError, default_config_path
from .constants import CHAINS, ENVIRONMENTS, MODES
from .defaults import get_default_rpc
from .display import chain_detail_lines, format_config_for_display
from .text_formatter import break_text, echo, get_terminal_width
from .validator import ValidationResult, validate_config, validate_environment_config
from .wizard import ConfigWizard, WizardError


def _should_debug() -> bool:
    return os.environ.get("WORMHOLE_DEBUG", "0").strip().lower() in {"1", "true", "yes", "on"}


logging.basicConfig(level=logging.DEBUG if _should_debug() else logging.WARNING)
logger = logging.getLogger(__name__)

EPILOG = (
    "This tool generates a wormhole.config.json file for multichain deployments. "
    "It does not interact with blockchains or perform any on-chain transactions.\n\n"
    "Important: Keep your private keys secure. Consider using environment variable "
    "syntax (${VAR_NAME}) instead of hardcoding keys in the configuration file.\n\n"
    "For more information about Wormhole, visit https://wormhole.com/docs"
)


class CLIError(RuntimeError):
    """Raised when CLI arguments are invalid."""


@dataclass
class CommandContext:
    """Collaborators shared by every command handler."""

    store: ConfigStore
    converter: AddressConverter = field(default_factory=AddressConverter)
    columns: int = field(default_factory=get_terminal_width)

    def echo(self, text: str = "", *, err: bool = False) -> None:
        echo(text, self.columns, err=err)


def build_parser(columns: int | None = None) -> argparse.ArgumentParser:
    width = get_terminal_width() if columns is None else columns
    parser = argparse.ArgumentParser(
        prog="wormhole",
        description="Wormhole multichain deployment configuration tool",
        epilog="\n".join(
            break_text(paragraph, width)
            for paragraph in EPILOG.split("\n")
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-c",
        "--config",
        dest="config_path",
        default=None,
        help="Path to the configuration file to use instead of wormhole.config.json",
    )
    parser.add_argument("-v", "--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    config_parser = subparsers.add_parser(
        "config",
        help="Manage chains, RPC endpoints, private keys, token addresses and deployment modes",
    )
    config_subparsers = config_parser.add_subparsers(dest="config_command", required=True)

    set_parser = config_subparsers.add_parser(
        "set",
        help="Set or update configuration for a specific chain (at least one option required)",
    )
    set_parser.add_argument("chain", choices=CHAINS, help="The blockchain to configure")
    _add_env_option(set_parser, default="testnet")
    set_parser.add_argument(
        "--rpc",
        help="RPC endpoint URL; a default public endpoint is used when none is stored",
    )
    set_parser.add_argument(
        "--private-key",
        dest="private_key",
        help="Private key for signing, or a ${ENV_VAR_NAME} reference",
    )
    set_parser.add_argument(
        "--token",
        help="Token contract address; converted to Wormhole's 32-byte universal format",
    )
    set_parser.add_argument(
        "--mode",
        type=str.lower,
        choices=[mode.lower() for mode in MODES],
        help="LOCKING for the primary chain (only one), BURNING for all others",
    )

    show_parser = config_subparsers.add_parser(
        "show", help="Display the configuration for one or all chains in an environment"
    )
    show_parser.add_argument("chain", nargs="?", choices=CHAINS, help="Only show this chain")
    _add_env_option(show_parser, default="testnet")

    list_parser = config_subparsers.add_parser(
        "list", help="List configured chains in an environment with a status summary"
    )
    _add_env_option(list_parser, default="testnet")

    wizard_parser = subparsers.add_parser(
        "wizard", help="Launch an interactive wizard to create a complete configuration"
    )
    _add_env_option(wizard_parser, help_text="Pre-select the environment to configure")

    validate_parser = subparsers.add_parser(
        "validate",
        help="Check deployment modes (all BURNING, or one LOCKING) and required fields",
    )
    _add_env_option(
        validate_parser,
        help_text="The environment to validate; all environments when omitted",
    )

    convert_parser = subparsers.add_parser(
        "convert", help="Convert a native address to Wormhole's universal 32-byte format"
    )
    convert_parser.add_argument(
        "address",
        help="Native address (EVM addresses start with 0x, Solana addresses are base58)",
    )
    convert_parser.add_argument("chain", choices=CHAINS, help="The blockchain the address belongs to")

    show_all_parser = subparsers.add_parser(
        "show", help="Display the entire configuration file with private keys truncated"
    )
    show_all_parser.add_argument(
        "--format",
        dest="output_format",
        choices=("json", "yaml"),
        default="json",
        help="Output format (default: json)",
    )

    return parser


def _add_env_option(
    parser: argparse.ArgumentParser,
    *,
    default: str | None = None,
    help_text: str = "The deployment environment",
) -> None:
    parser.add_argument("-e", "--env", choices=ENVIRONMENTS, default=default, help=help_text)


def _invalid_address_error(address_kind: str, chain: str) -> CLIError:
    address_format = address_format_for(chain)
    return CLIError(
        f"The {address_kind} provided is not a valid {chain} address.\n\n"
        f"{address_format.description}\n"
        f"Example: {address_format.example}"
    )


def _print_chain_config(ctx: CommandContext, chain_config: dict[str, Any]) -> None:
    for line in chain_detail_lines(chain_config):
        ctx.echo(line)


def cmd_config_set(args: argparse.Namespace, ctx: CommandContext) -> None:
    if not (args.rpc or args.private_key or args.token or args.mode):
        raise CLIError(
            "You must specify at least one option to set. "
            "Available options: --rpc, --private-key, --token, --mode\n\n"
            f"Example: wormhole config set {args.chain} --mode burning --token 0xYourTokenAddress"
        )

    existing = ctx.store.get_chain(args.chain, args.env) or {}
    updates: dict[str, Any] = {}

    if args.rpc:
        updates["rpc"] = args.rpc
    elif not existing.get("rpc"):
        default_rpc = get_default_rpc(args.chain, args.env)
        if default_rpc:
            updates["rpc"] = default_rpc

    if args.private_key:
        updates["privateKey"] = args.private_key

    if args.token:
        if not ctx.converter.is_valid_format(args.token, args.chain):
            raise _invalid_address_error("token address", args.chain)
        updates["tokenAddress"] = ctx.converter.to_wormhole_format(args.token, args.chain)

    if args.mode:
        updates["mode"] = args.mode.upper()

    ctx.store.update_chain(args.chain, args.env, updates)
    ctx.echo(f"\n✓ Configuration updated for {args.chain} ({args.env})\n")

    ctx.echo("Current configuration:")
    _print_chain_config(ctx, ctx.store.get_chain(args.chain, args.env) or {})

    ctx.echo(f"\nConfiguration saved to {ctx.store.path}")
    ctx.echo('Run "wormhole validate" to check your configuration.')


def cmd_config_show(args: argparse.Namespace, ctx: CommandContext) -> None:
    if args.chain:
        chain_config = ctx.store.get_chain(args.chain, args.env)
        if not chain_config:
            ctx.echo(f"No configuration found for {args.chain} in {args.env}")
            return
        ctx.echo(f"Configuration for {args.chain} ({args.env}):\n")
        _print_chain_config(ctx, chain_config)
        return

    env_config = ctx.store.get_environment(args.env)
    if not env_config:
        ctx.echo(f"No chains configured for {args.env}")
        return

    ctx.echo(f"Configuration for {args.env}:\n")
    for chain, chain_config in env_config.items():
        ctx.echo(f"{chain}:")
        _print_chain_config(ctx, chain_config or {})
        ctx.echo()


def cmd_config_list(args: argparse.Namespace, ctx: CommandContext) -> None:
    env_config = ctx.store.get_environment(args.env)
    if not env_config:
        ctx.echo(f"No chains configured for {args.env}")
        return

    ctx.echo(f"Configured chains in {args.env}:\n")
    for chain, chain_config in env_config.items():
        chain_config = chain_config or {}
        mode = f" [{chain_config['mode']}]" if chain_config.get("mode") else ""
        has_token = " ✓ token" if chain_config.get("tokenAddress") else ""
        has_key = " ✓ key" if chain_config.get("privateKey") else ""
        ctx.echo(f"  • {chain}{mode}{has_token}{has_key}")


def cmd_wizard(args: argparse.Namespace, ctx: CommandContext) -> None:
    wizard = ConfigWizard(ctx.store, ctx.converter, columns=ctx.columns)
    wizard.run(environment=args.env)


def _print_findings(ctx: CommandContext, result: ValidationResult) -> None:
    for warning in result.warnings:
        ctx.echo(f"  ⚠ {warning}")
    for error in result.errors:
        ctx.echo(f"  ✗ {error}")


def cmd_validate(args: argparse.Namespace, ctx: CommandContext) -> int:
    config = ctx.store.read()

    if args.env:
        result = validate_environment_config(config.get(args.env) or {}, args.env)
        ctx.echo(f"\nValidating {args.env} configuration...\n")

        if result.warnings:
            ctx.echo("Warnings:")
            for warning in result.warnings:
                ctx.echo(f"  ⚠ {warning}")
            ctx.echo()

        if result.errors:
            ctx.echo("Errors:")
            for error in result.errors:
                ctx.echo(f"  ✗ {error}")
            ctx.echo()
            ctx.echo(f"Validation failed for {args.env}. Please fix the errors above.")
            return 1

        suffix = " (with warnings)" if result.warnings else ""
        ctx.echo(f"✓ {args.env} configuration is valid{suffix}")
        return 0

    report = validate_config(config)
    ctx.echo("\nValidating all environments...\n")

    has_warnings = False
    for environment in ENVIRONMENTS:
        result = report.results[environment]
        ctx.echo(f"{environment}:")
        _print_findings(ctx, result)
        has_warnings = has_warnings or bool(result.warnings)
        if not result.errors and not result.warnings:
            ctx.echo("  ✓ Valid" if config.get(environment) else "  (not configured)")
        ctx.echo()

    if not report.valid:
        ctx.echo("Validation failed. Please fix the errors above.")
        return 1

    if has_warnings:
        ctx.echo("✓ Configuration is valid (with warnings)")
    else:
        ctx.echo("✓ All configurations are valid")
    return 0


def cmd_convert(args: argparse.Namespace, ctx: CommandContext) -> None:
    if not ctx.converter.is_valid_format(args.address, args.chain):
        raise _invalid_address_error("address", args.chain)

    ctx.echo(f"\nConverting {args.chain} address to Wormhole format...\n")
    wormhole_address = ctx.converter.to_wormhole_format(args.address, args.chain)

    ctx.echo(f"Original address: {args.address}")
    ctx.echo(f"Wormhole format:  {wormhole_address}")
    ctx.echo(f"\nThis is the format that will be stored in your {ctx.store.path} file.")


def cmd_show(args: argparse.Namespace, ctx: CommandContext) -> None:
    if not ctx.store.exists():
        ctx.echo(f"No configuration file found at {ctx.store.path}")
        ctx.echo('\nRun "wormhole wizard" to create a new configuration.')
        return

    display_config = format_config_for_display(ctx.store.read())
    ctx.echo(f"Configuration from {ctx.store.path}:\n")
    if args.output_format == "yaml":
        print(yaml.safe_dump(display_config, sort_keys=False, allow_unicode=True), end="")
    else:
        print(json.dumps(display_config, indent=2))


def main(argv: Sequence[str] | None = None) -> None:
    columns = get_terminal_width()
    parser = build_parser(columns)
    args = parser.parse_args(argv)
    ctx = CommandContext(
        store=ConfigStore(args.config_path or default_config_path()),
        columns=columns,
    )
    logger.debug("Using configuration file %s", ctx.store.path)

    exit_code = 0
    try:
        if args.command == "config":
            if args.config_command == "set":
                cmd_config_set(args, ctx)
            elif args.config_command == "show":
                cmd_config_show(args, ctx)
            elif args.config_command == "list":
                cmd_config_list(args, ctx)
            else:  # pragma: no cover - argparse enforces choices
                raise CLIError(f"Unknown config command: {args.config_command}")
        elif args.command == "wizard":
            cmd_wizard(args, ctx)
        elif args.command == "validate":
            exit_code = cmd_validate(args, ctx)
        elif args.command == "convert":
            cmd_convert(args, ctx)
        elif args.command == "show":
            cmd_show(args, ctx)
        else:  # pragma: no cover - argparse enforces choices
            raise CLIError(f"Unknown command: {args.command}")
    except KeyboardInterrupt:  # pragma: no cover - interactive use
        logger.info("Interrupted by user")
        ctx.echo("\n\nCancelled.", err=True)
        exit_code = 1
    except (CLIError, ConfigurationError, AddressConversionError, WizardError) as exc:
        ctx.echo(f"\nError: {exc}", err=True)
        exit_code = 1

    if exit_code:
        parser.exit(exit_code)


if __name__ == "__main__":
    main(sys.argv[1:])
