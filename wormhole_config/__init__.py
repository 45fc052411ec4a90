"""Configuration tool for Wormhole multichain token deployments."""

__version__ = "0.1.0"

from .addresses import (
    AddressConversionError,
    AddressConverter,
    convert_to_wormhole_address,
    is_valid_address_format,
)
from .config import ConfigStore, ConfigurationError
from .text_formatter import break_text, get_terminal_width
from .validator import (
    ConfigValidationReport,
    ValidationResult,
    validate_config,
    validate_environment_config,
)

__all__ = [
    "__version__",
    "AddressConversionError",
    "AddressConverter",
    "ConfigStore",
    "ConfigurationError",
    "ConfigValidationReport",
    "ValidationResult",
    "break_text",
    "convert_to_wormhole_address",
    "get_terminal_width",
    "is_valid_address_format",
    "validate_config",
    "validate_environment_config",
]
