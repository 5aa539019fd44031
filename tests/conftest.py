from __future__ import annotations

import tarfile
from io import BytesIO
from typing import Callable, Dict, Iterable, List, Optional, Tuple

import httpx
import pytest

from get_openjdk.console import configure_console
from get_openjdk.context import AppContext

ARCHIVE_NAME = "OpenJDK8U-jdk_x64_linux_hotspot_8u312b07.tar.gz"
ARCHIVE_DIR = "jdk8u312-b07"
DOWNLOAD_HOST = "downloads.example"


def _add_file(tf: tarfile.TarFile, name: str, data: bytes, mode: int = 0o644) -> None:
    info = tarfile.TarInfo(name=name)
    info.size = len(data)
    info.mode = mode
    tf.addfile(info, BytesIO(data))


def build_jdk_tarball(
    top_level: str = ARCHIVE_DIR,
    *,
    extra: Iterable[Tuple[str, bytes]] = (),
) -> bytes:
    buffer = BytesIO()
    with tarfile.open(fileobj=buffer, mode="w:gz") as tf:
        root = tarfile.TarInfo(name=f"{top_level}/")
        root.type = tarfile.DIRTYPE
        root.mode = 0o755
        tf.addfile(root)
        _add_file(tf, f"{top_level}/bin/java", b"#!/bin/sh\necho java\n", 0o755)
        _add_file(tf, f"{top_level}/release", b'JAVA_VERSION="1.8.0_312"\n')
        for name, data in extra:
            _add_file(tf, name, data)
    return buffer.getvalue()


class FakeAdoptium:
    """Adoptium binary API stand-in: API redirect, then a download host serving attachments."""

    def __init__(self, releases: Dict[str, Tuple[str, bytes]]) -> None:
        self.releases = dict(releases)
        self.calls: List[Tuple[str, str]] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.calls.append((request.method, str(request.url)))
        url = request.url
        if url.host == "api.adoptium.net":
            version = url.path.split("/")[4]
            release = self.releases.get(version)
            if release is None:
                return httpx.Response(
                    404,
                    json={"errorMessage": "No releases match the request"},
                    request=request,
                )
            filename, _ = release
            return httpx.Response(
                307,
                headers={"Location": f"https://{DOWNLOAD_HOST}/{version}/{filename}"},
                request=request,
            )
        if url.host == DOWNLOAD_HOST:
            version = url.path.split("/")[1]
            filename, payload = self.releases[version]
            headers = {
                "Content-Type": "application/octet-stream",
                "Content-Disposition": f"attachment; filename={filename}",
            }
            if request.method == "HEAD":
                return httpx.Response(200, headers=headers, request=request)
            return httpx.Response(200, headers=headers, content=payload, request=request)
        return httpx.Response(404, request=request)

    def count(self, method: str, host: Optional[str] = None) -> int:
        return sum(
            1
            for called_method, url in self.calls
            if called_method == method and (host is None or httpx.URL(url).host == host)
        )


@pytest.fixture(autouse=True)
def loud_console() -> None:
    configure_console(quiet=False)


@pytest.fixture
def make_tarball() -> Callable[..., bytes]:
    return build_jdk_tarball


@pytest.fixture
def fake_adoptium() -> FakeAdoptium:
    return FakeAdoptium({"8": (ARCHIVE_NAME, build_jdk_tarball())})


@pytest.fixture
def client_factory(fake_adoptium: FakeAdoptium) -> Callable[[httpx.Timeout], httpx.Client]:
    transport = httpx.MockTransport(fake_adoptium.handler)

    def factory(timeout: httpx.Timeout) -> httpx.Client:
        return httpx.Client(timeout=timeout, follow_redirects=True, transport=transport)

    return factory


@pytest.fixture
def app_context(client_factory) -> AppContext:
    return AppContext(http_client_factory=client_factory)
