"""Application context for injectable dependencies."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

import httpx

from .constants import DEFAULT_API_BASE_URL, HTTP_TIMEOUT_SECONDS
from .http import http_timeout, request_headers

HttpClientFactory = Callable[[httpx.Timeout], httpx.Client]


def default_http_client_factory(timeout: httpx.Timeout) -> httpx.Client:
    return httpx.Client(timeout=timeout, follow_redirects=True, headers=request_headers())


@dataclass(frozen=True)
class AppContext:
    """Shared dependencies for the install pipeline (HTTP, API endpoint)."""

    api_base_url: str = DEFAULT_API_BASE_URL
    timeout_seconds: float = HTTP_TIMEOUT_SECONDS
    http_client_factory: HttpClientFactory = default_http_client_factory

    def timeout(self) -> httpx.Timeout:
        return http_timeout(self.timeout_seconds)

    def new_http_client(self, timeout: Optional[httpx.Timeout] = None) -> httpx.Client:
        return self.http_client_factory(timeout or self.timeout())
