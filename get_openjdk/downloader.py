"""JDK archive download via pooch with an httpx transport."""

from __future__ import annotations

import os
from functools import partial
from pathlib import Path
from typing import Any, Callable, Optional

import httpx
import pooch

from .console import announce, log
from .constants import DOWNLOAD_CHUNK_SIZE, HTTP_TIMEOUT_SECONDS
from .context import AppContext, default_http_client_factory
from .errors import CLIError
from .headers import attachment_filename
from .http import describe_http_error, download_error_hint, http_timeout
from .utils import format_bytes


class HTTPXDownloader:
    """Pooch downloader that streams the GET through httpx into ``<output>.tmp``."""

    def __init__(
        self,
        timeout: float = HTTP_TIMEOUT_SECONDS,
        *,
        client_factory: Optional[Callable[[httpx.Timeout], httpx.Client]] = None,
    ) -> None:
        self.timeout = timeout
        self.client_factory = client_factory or default_http_client_factory

    def __call__(
        self,
        url: str,
        output_file: str,
        pooch_obj: Optional[pooch.Pooch],
        expected_filename: Optional[str] = None,
        **_: Any,
    ) -> None:
        output_path = Path(output_file)
        tmp_path = Path(f"{output_file}.tmp")
        try:
            with self.client_factory(http_timeout(self.timeout)) as client:
                with client.stream("GET", url) as response:
                    response.raise_for_status()
                    if expected_filename:
                        served = attachment_filename(response.headers.get("content-disposition"))
                        if served != expected_filename:
                            raise CLIError(
                                f"server suggested filename {served!r} for {url}, "
                                f"expected {expected_filename!r}"
                            )
                    with tmp_path.open("wb") as fh:
                        for chunk in response.iter_bytes(chunk_size=DOWNLOAD_CHUNK_SIZE):
                            fh.write(chunk)
            os.replace(tmp_path, output_path)
        except httpx.HTTPError as exc:
            _discard(tmp_path)
            hint = download_error_hint(exc)
            extra = f" Hint: {hint}" if hint else ""
            raise CLIError(
                f"download failed for {output_path.name}: {describe_http_error(exc)}{extra}"
            ) from exc
        except CLIError:
            _discard(tmp_path)
            raise
        except OSError as exc:
            _discard(tmp_path)
            raise CLIError(f"failed to write download file {output_path}: {exc}") from exc


def _discard(path: Path) -> None:
    try:
        path.unlink()
    except FileNotFoundError:
        pass
    except OSError as exc:
        log(f"could not remove partial download {path}: {exc}")


def fetch_archive(url: str, filename: str, install_dir: Path, context: AppContext) -> Path:
    """Download ``url`` as ``install_dir/filename`` unless that file is already there."""
    target = install_dir / filename
    if target.is_file():
        log(f"archive already downloaded (not downloading again): {filename}")
    else:
        announce("GET", "--location", "--remote-header-name", url)
        downloader = HTTPXDownloader(
            context.timeout_seconds,
            client_factory=context.http_client_factory,
        )
        try:
            pooch.retrieve(
                url=url,
                known_hash=None,
                fname=filename,
                path=install_dir,
                downloader=partial(downloader, expected_filename=filename),
            )
        except (ValueError, OSError) as exc:
            raise CLIError(f"failed to download {filename}: {exc}") from exc
    return describe_archive(target)


def describe_archive(path: Path) -> Path:
    announce("ls", "-l", path.name)
    try:
        size = path.stat().st_size
    except FileNotFoundError:
        raise CLIError(f"downloaded archive is missing: {path}") from None
    except OSError as exc:
        raise CLIError(f"unable to stat archive {path}: {exc}") from exc
    log(f"{path} ({format_bytes(size)})")
    return path
