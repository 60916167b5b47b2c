"""Discovery module - locating test units in a source tree."""

from .paths import clean_path, dotted_to_path, join_dotted, strip_prefix
from .scanner import RESERVED_NAME_MARKER, TargetScanner

__all__ = [
    "RESERVED_NAME_MARKER",
    "TargetScanner",
    "clean_path",
    "dotted_to_path",
    "join_dotted",
    "strip_prefix",
]
