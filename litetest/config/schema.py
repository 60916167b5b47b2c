"""Configuration data models for litetest.

Defines the driver configuration and the validation result types.
"""

from dataclasses import asdict, dataclass, field
from typing import Any

CONFIG_FILE_NAME = "litetest.yaml"
CONFIG_ENV_VAR = "LITETEST_CONFIG"


@dataclass
class DriverConfig:
    """Defaults for a test driver.

    ``src_path`` is the dot- or slash-separated path from the project root
    to the source root. ``local_test_root`` is a dotted prefix applied to
    every queued target and stripped from class names in reports.
    """
    src_path: str = "src"
    local_test_root: str = ""
    recurse: bool = False
    require_type_marker: bool = True
    full_trace: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for serialization."""
        return asdict(self)


FIELD_TYPES: dict[str, type] = {
    "src_path": str,
    "local_test_root": str,
    "recurse": bool,
    "require_type_marker": bool,
    "full_trace": bool,
}


@dataclass
class ValidationError:
    """A single validation error."""
    path: str
    message: str
    severity: str = "error"  # "error" or "warning"


@dataclass
class ValidationResult:
    """Result of config validation."""
    valid: bool
    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationError] = field(default_factory=list)

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @property
    def warning_count(self) -> int:
        return len(self.warnings)

    def __str__(self) -> str:
        if self.valid:
            msg = "Valid"
            if self.warnings:
                msg += f" ({self.warning_count} warnings)"
            return msg
        return f"Invalid: {self.error_count} errors, {self.warning_count} warnings"
