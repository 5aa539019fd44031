"""Content-Disposition parsing for captured HTTP response headers."""

from __future__ import annotations

import re
from typing import List, Optional, Tuple

import httpx

from .errors import CLIError
from .utils import is_safe_name

_ATTACHMENT_PATTERN = re.compile(r"^attachment\s*;\s*filename=(.*)$", re.IGNORECASE)
_HEADER_LINE_PATTERN = re.compile(r"^([!#$%&'*+.^_`|~0-9A-Za-z-]+):\s*(.*)$")


def parse_header_blocks(text: str) -> List[httpx.Headers]:
    """Split captured header text into one ``httpx.Headers`` per response.

    Status lines are skipped and a blank line ends a block. Carriage returns left
    over from the wire format are dropped.
    """
    blocks: List[httpx.Headers] = []
    current: List[Tuple[str, str]] = []
    in_block = False
    for raw in (text or "").split("\n"):
        line = raw.rstrip("\r")
        if not line.strip():
            if in_block:
                blocks.append(httpx.Headers(current))
            current = []
            in_block = False
            continue
        if line.upper().startswith("HTTP/"):
            if in_block:
                blocks.append(httpx.Headers(current))
            current = []
            in_block = True
            continue
        match = _HEADER_LINE_PATTERN.match(line)
        if not match:
            continue
        current.append((match.group(1), match.group(2)))
        in_block = True
    if in_block:
        blocks.append(httpx.Headers(current))
    return blocks


def attachment_filename(value: Optional[str]) -> Optional[str]:
    """Filename from an ``attachment; filename=...`` disposition value, else None."""
    if not value:
        return None
    match = _ATTACHMENT_PATTERN.match(value.strip())
    if not match:
        return None
    name = match.group(1).rstrip("\r").strip()
    if len(name) >= 2 and name.startswith('"') and name.endswith('"'):
        name = name[1:-1]
    return name or None


def extract_attachment_filename(text: str) -> str:
    """Filename suggested by the last response that carries an attachment disposition."""
    found: Optional[str] = None
    for headers in parse_header_blocks(text):
        for value in headers.get_list("content-disposition"):
            candidate = attachment_filename(value)
            if candidate:
                found = candidate
    if found is None:
        raise CLIError(
            "no 'content-disposition: attachment; filename=...' header in response; "
            "is the JDK version available?"
        )
    if not is_safe_name(found):
        raise CLIError(f"refusing unsafe filename from content-disposition header: {found!r}")
    return found
