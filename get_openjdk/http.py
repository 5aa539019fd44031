"""Shared HTTP helpers for get_openjdk."""

from __future__ import annotations

from typing import Dict, Optional

import httpx

from .constants import HTTP_TIMEOUT_SECONDS
from .utils import safe_str
from .version import USER_AGENT


def http_timeout(seconds: float = HTTP_TIMEOUT_SECONDS) -> httpx.Timeout:
    return httpx.Timeout(seconds, connect=seconds)


def request_headers() -> Dict[str, str]:
    return {"User-Agent": USER_AGENT}


def _api_error_message(response: httpx.Response) -> str:
    """The ``errorMessage`` of an Adoptium JSON error body, if there is one."""
    try:
        data = response.json()
    except (httpx.ResponseNotRead, ValueError):
        return ""
    if not isinstance(data, dict):
        return ""
    return (safe_str(data.get("errorMessage")) or "").strip()


def describe_http_error(exc: httpx.HTTPError) -> str:
    if isinstance(exc, httpx.HTTPStatusError):
        response = exc.response
        detail = f"{response.status_code} {response.reason_phrase}".strip()
        message = _api_error_message(response)
        return f"{detail}: {message}" if message else detail

    if isinstance(exc, httpx.TimeoutException):
        summary = "request timed out"
    elif isinstance(exc, httpx.ConnectError):
        summary = "failed to connect"
    else:
        summary = str(exc).strip() or exc.__class__.__name__
    try:
        request = exc.request
    except RuntimeError:
        return summary
    return f"{summary} ({request.method} {request.url})"


def download_error_hint(exc: httpx.HTTPError) -> Optional[str]:
    if isinstance(exc, httpx.TimeoutException):
        return "raise --timeout for slow links"
    if isinstance(exc, httpx.HTTPStatusError):
        status = exc.response.status_code
        if status == 404:
            return "no GA release for this major version on linux/x64"
        if status == 429 or status >= 500:
            return "server error; try again later"
    return None
