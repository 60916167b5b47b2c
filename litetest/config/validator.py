"""Config validator for litetest.

Validates parsed DriverConfig objects and raw config mappings.
"""

import re
from typing import Any, Optional

from .schema import FIELD_TYPES, DriverConfig, ValidationError, ValidationResult

_DOTTED_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*([./\\][A-Za-z_][A-Za-z0-9_]*)*[./\\]?$")


def validate_config(
    config: DriverConfig, raw: Optional[dict[str, Any]] = None
) -> ValidationResult:
    """Validate a parsed DriverConfig.

    Checks:
    - Field types
    - ``src_path`` is not empty
    - ``local_test_root`` is a dotted package path
    - Unknown keys in the raw mapping (warnings)

    Args:
        config: Parsed config to validate.
        raw: The mapping it was parsed from, if available.

    Returns:
        ValidationResult with errors and warnings.
    """
    errors: list[ValidationError] = []
    warnings: list[ValidationError] = []

    for name, expected in FIELD_TYPES.items():
        value = getattr(config, name)
        if not isinstance(value, expected):
            errors.append(ValidationError(
                path=name,
                message=f"'{name}' must be {expected.__name__}, got {type(value).__name__}.",
            ))

    if isinstance(config.src_path, str) and not config.src_path.strip(" ./\\"):
        errors.append(ValidationError(
            path="src_path",
            message="'src_path' is required and must not be empty.",
        ))

    root = config.local_test_root
    if isinstance(root, str) and root and not _DOTTED_RE.match(root.lstrip("./\\")):
        errors.append(ValidationError(
            path="local_test_root",
            message=f"Invalid local_test_root '{root}'. Expected a dotted package path.",
        ))

    if raw is not None:
        section = raw.get("litetest") if isinstance(raw.get("litetest"), dict) else raw
        for key in section:
            if key not in FIELD_TYPES:
                warnings.append(ValidationError(
                    path=str(key),
                    message=f"Unknown config key '{key}' is ignored.",
                    severity="warning",
                ))

    return ValidationResult(
        valid=len(errors) == 0,
        errors=errors,
        warnings=warnings,
    )
