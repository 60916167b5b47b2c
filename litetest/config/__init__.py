"""Config module - YAML driver configuration."""

from .schema import (
    CONFIG_ENV_VAR,
    CONFIG_FILE_NAME,
    DriverConfig,
    ValidationError,
    ValidationResult,
)
from .parser import (
    find_config,
    load_config,
    parse_config,
    parse_config_data,
    read_config_data,
)
from .validator import validate_config

__all__ = [
    "CONFIG_ENV_VAR",
    "CONFIG_FILE_NAME",
    "DriverConfig",
    "ValidationError",
    "ValidationResult",
    "find_config",
    "load_config",
    "parse_config",
    "parse_config_data",
    "read_config_data",
    "validate_config",
]
