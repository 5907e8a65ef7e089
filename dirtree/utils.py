"""Small formatting helpers."""

from __future__ import annotations

import math

_UNITS = ("B", "KB", "MB", "GB", "TB")
_BASE = 1024.0


def bytes_to_human_readable(size: int) -> str:
    """Format a byte count with a binary unit, e.g. ``1.0 KB``."""
    if size < 0:
        raise ValueError(f"size must not be negative: {size}")
    if size == 0:
        return "0 B"
    index = math.floor(math.log(size) / math.log(_BASE))
    if index >= len(_UNITS):
        index = 0
    scaled = size / _BASE**index
    if index == 0:
        return f"{int(scaled)} {_UNITS[0]}"
    return f"{scaled:.1f} {_UNITS[index]}"