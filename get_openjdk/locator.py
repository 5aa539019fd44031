"""Adoptium binary URL construction and response header probing."""

from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List
from urllib.parse import quote, urlencode

import httpx

from .console import announce, echo_raw
from .constants import (
    BINARY_LATEST_PATH,
    BINARY_LATEST_QUERY,
    DEFAULT_API_BASE_URL,
    PROBE_FILE_PREFIX,
)
from .context import AppContext
from .errors import CLIError
from .http import describe_http_error


@dataclass(frozen=True)
class ProbeResult:
    final_url: str
    status_code: int


def binary_latest_url(version: str, base_url: str = DEFAULT_API_BASE_URL) -> str:
    path = BINARY_LATEST_PATH.format(version=quote(str(version), safe=""))
    return f"{base_url.rstrip('/')}{path}?{urlencode(BINARY_LATEST_QUERY)}"


def create_probe_file(directory: Path) -> Path:
    try:
        fd, name = tempfile.mkstemp(prefix=PROBE_FILE_PREFIX, dir=str(directory))
    except OSError as exc:
        raise CLIError(f"failed to create probe file in {directory}: {exc}") from exc
    os.close(fd)
    return Path(name)


def format_header_block(response: httpx.Response) -> List[str]:
    """Render one response the way it looked on the wire: status line, headers, blank line."""
    reason = f" {response.reason_phrase}" if response.reason_phrase else ""
    lines = [f"{response.http_version} {response.status_code}{reason}\r\n"]
    for raw_key, raw_value in response.headers.raw:
        key = raw_key.decode("latin-1")
        value = raw_value.decode("latin-1")
        lines.append(f"{key}: {value}\r\n")
    lines.append("\r\n")
    return lines


def _response_chain(response: httpx.Response) -> Iterable[httpx.Response]:
    yield from response.history
    yield response


def probe_headers(url: str, probe_path: Path, context: AppContext) -> ProbeResult:
    """HEAD the URL (following redirects) and capture every header block into probe_path."""
    announce("HEAD", "--location", url)
    try:
        with context.new_http_client() as client:
            response = client.head(url)
    except httpx.HTTPError as exc:
        raise CLIError(f"header request failed for {url}: {describe_http_error(exc)}") from exc

    try:
        with probe_path.open("w", encoding="latin-1", newline="") as handle:
            for hop in _response_chain(response):
                for line in format_header_block(hop):
                    handle.write(line)
                    echo_raw(line)
    except OSError as exc:
        raise CLIError(f"failed to write probe file {probe_path}: {exc}") from exc

    return ProbeResult(final_url=str(response.url), status_code=response.status_code)


def read_probe_file(probe_path: Path) -> str:
    try:
        return probe_path.read_bytes().decode("latin-1")
    except OSError as exc:
        raise CLIError(f"unable to read probe file {probe_path}: {exc}") from exc
