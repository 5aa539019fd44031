"""Shared utility helpers for get_openjdk."""

from __future__ import annotations

import re
import shlex
from typing import Any, Optional, Sequence

_SAFE_NAME_PATTERN = re.compile(r"[A-Za-z0-9][A-Za-z0-9_.+-]*")


def format_cli_command(argv: Sequence[Any]) -> str:
    return shlex.join(str(part) for part in argv)


def is_safe_name(value: str) -> bool:
    """True for a single, non-hidden path component without traversal."""
    if not value or ".." in value:
        return False
    return _SAFE_NAME_PATTERN.fullmatch(value) is not None


def format_bytes(value: float) -> str:
    if value < 0:
        value = 0
    units = ("B", "KB", "MB", "GB", "TB")
    unit_index = 0
    size = float(value)
    while size >= 1024 and unit_index + 1 < len(units):
        size /= 1024.0
        unit_index += 1
    if unit_index == 0:
        return f"{int(size)} {units[unit_index]}"
    return f"{size:.1f} {units[unit_index]}"


def safe_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    return str(value)
