"""Target path normalization.

Targets may be written dot-separated (``pkg.sub.module``) or
slash-separated (``pkg/sub/module``); both resolve to the same location.
"""

import os
from pathlib import Path
from typing import Union

SEPARATORS = (".", "/", "\\", os.sep)


def clean_path(value: str, sep: str = ".", trim_front: bool = True) -> str:
    """Normalize a dot- or slash-separated path to use ``sep``.

    Leading (when ``trim_front``) and trailing separators are stripped
    and empty segments collapsed.

    Args:
        value: Path text in either notation.
        sep: Separator to emit.
        trim_front: Strip leading separators as well as trailing ones.

    Returns:
        Normalized path, "" if nothing remains.
    """
    for s in SEPARATORS:
        value = value.replace(s, sep)

    segments = value.split(sep)
    leading = not trim_front and value.startswith(sep)
    cleaned = sep.join(seg for seg in segments if seg)
    if leading:
        return sep + cleaned
    return cleaned


def join_dotted(*parts: str) -> str:
    """Join dotted fragments, ignoring empty ones."""
    return clean_path(".".join(p for p in parts if p))


def dotted_to_path(root: Union[str, Path], dotted: str) -> Path:
    """Map a dotted target onto a filesystem path under ``root``."""
    relative = clean_path(dotted, "/")
    if not relative:
        return Path(root)
    return Path(root).joinpath(*relative.split("/"))


def strip_prefix(dotted: str, prefix: str) -> str:
    """Remove a dotted ``prefix`` from ``dotted`` for display."""
    prefix = clean_path(prefix)
    if prefix and dotted.startswith(prefix + "."):
        return dotted[len(prefix) + 1:]
    return dotted
