"""YAML config parser for litetest.

Parses ``litetest.yaml`` files into DriverConfig objects.
"""

import logging
import os
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from .schema import CONFIG_ENV_VAR, CONFIG_FILE_NAME, DriverConfig
from .validator import validate_config

logger = logging.getLogger(__name__)


def read_config_data(file_path: Union[str, Path]) -> dict[str, Any]:
    """Load the raw mapping from a YAML config file.

    Args:
        file_path: Path to the YAML config file.

    Returns:
        The loaded mapping; {} for an empty file.

    Raises:
        FileNotFoundError: If the config file doesn't exist.
        ValueError: If the YAML is malformed or not a mapping.
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"Config file not found: {file_path}")

    if file_path.suffix not in (".yaml", ".yml"):
        raise ValueError(f"Expected .yaml or .yml file, got: {file_path.suffix}")

    with open(file_path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Malformed YAML in {file_path}: {e}") from e

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ValueError(f"Config must be a YAML mapping, got {type(data).__name__} ({file_path})")

    return data


def parse_config(file_path: Union[str, Path]) -> DriverConfig:
    """Parse a YAML config file into a DriverConfig.

    Raises:
        FileNotFoundError: If the config file doesn't exist.
        ValueError: If the YAML is malformed or not a mapping.
    """
    return parse_config_data(read_config_data(file_path), source=str(file_path))


def parse_config_data(data: dict, source: str = "<inline>") -> DriverConfig:
    """Parse a config from a dictionary (already loaded YAML).

    Unknown keys are dropped here; ``validate_config`` reports them.

    Args:
        data: Dictionary with config values.
        source: Source identifier for error messages.

    Returns:
        Parsed DriverConfig.

    Raises:
        ValueError: If ``data`` is not a mapping.
    """
    if not isinstance(data, dict):
        raise ValueError(f"Config must be a YAML mapping, got {type(data).__name__} ({source})")

    # accept a top-level "litetest:" section as well as a flat mapping
    if isinstance(data.get("litetest"), dict):
        data = data["litetest"]

    values = {
        k: v for k, v in data.items()
        if k in DriverConfig.__dataclass_fields__
    }
    for key in ("src_path", "local_test_root"):
        if key in values and values[key] is None:
            values[key] = ""
    return DriverConfig(**values)


def find_config(project_root: Union[str, Path]) -> Optional[Path]:
    """Locate the config file to use for a project.

    Searches in order:
    1. LITETEST_CONFIG environment variable
    2. ``litetest.yaml`` in the project root

    Returns:
        Path to the config file, or None if there is none.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)

    candidate = Path(project_root) / CONFIG_FILE_NAME
    if candidate.is_file():
        return candidate
    return None


def load_config(
    config_path: Optional[Union[str, Path]] = None,
    project_root: Optional[Union[str, Path]] = None,
) -> DriverConfig:
    """Load and validate the config from an explicit path or the default locations.

    Returns:
        DriverConfig; defaults when no config file exists.

    Raises:
        FileNotFoundError: If an explicit or env-provided config file is missing.
        ValueError: If the config is malformed or fails validation.
    """
    if config_path is None:
        config_path = find_config(project_root or Path.cwd())
    if config_path is None:
        return DriverConfig()

    logger.info("Loading config from %s", config_path)
    raw = read_config_data(config_path)
    config = parse_config_data(raw, source=str(config_path))

    validation = validate_config(config, raw)
    for warning in validation.warnings:
        logger.warning("%s: %s", warning.path, warning.message)
    if not validation.valid:
        errors_str = "; ".join(f"{e.path}: {e.message}" for e in validation.errors)
        raise ValueError(f"Invalid config {config_path}: {errors_str}")

    return config
