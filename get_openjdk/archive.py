"""Archive inspection and extraction for downloaded JDK tarballs."""

from __future__ import annotations

import tarfile
from pathlib import Path
from typing import Tuple

from .console import announce, log
from .errors import CLIError
from .utils import is_safe_name


def member_top_level(name: str) -> str:
    """First path component of a tar member name, ``./`` prefixes ignored."""
    parts = [part for part in name.replace("\\", "/").split("/") if part not in {"", "."}]
    return parts[0] if parts else ""


def archive_top_level_dir(archive: Path) -> str:
    """Name of the directory the archive unpacks into.

    The archive is opened as a stream and read only up to the first member
    with a real name, so a leading bare ``./`` entry is passed over.
    """
    announce("tar", "-tf", archive.name, "|", "head", "-n", "1")
    top_level = ""
    try:
        with tarfile.open(str(archive), mode="r|*") as tf:
            for member in tf:
                top_level = member_top_level(member.name)
                if top_level:
                    break
    except (tarfile.TarError, OSError) as exc:
        raise CLIError(f"unable to list archive {archive.name}: {exc}") from exc
    if not top_level:
        raise CLIError(f"archive {archive.name} is empty")
    if not is_safe_name(top_level):
        raise CLIError(f"refusing unsafe top-level directory {top_level!r} in {archive.name}")
    log(top_level)
    return top_level


def extract_archive(archive: Path, dest: Path) -> None:
    """Unpack all of ``archive`` into ``dest`` through tarfile's ``data`` filter.

    Members that would land or link outside ``dest`` and device nodes abort
    the extraction.
    """
    dest.mkdir(parents=True, exist_ok=True)
    try:
        with tarfile.open(archive, mode="r:*") as tf:
            tf.extractall(dest, filter="data")
    except tarfile.FilterError as exc:
        raise CLIError(
            f"refusing to extract {archive.name}: unsafe entry {exc.tarinfo.name!r} ({exc})"
        ) from exc
    except tarfile.TarError as exc:
        raise CLIError(f"unsupported archive format for {archive.name}") from exc
    except OSError as exc:
        raise CLIError(f"failed to extract {archive.name}: {exc}") from exc


def ensure_extracted(archive: Path, install_dir: Path) -> Tuple[Path, bool]:
    """Extract ``archive`` into ``install_dir`` unless its top-level directory exists.

    Returns the top-level directory path and whether extraction happened.
    """
    top_level = archive_top_level_dir(archive)
    target = install_dir / top_level
    extracted = False
    if target.is_dir():
        log(f"archive parent directory already exists (not extracting again): {top_level}")
    else:
        announce("tar", "-xf", archive.name)
        extract_archive(archive, install_dir)
        extracted = True

    announce("ls", "-ld", top_level)
    if not target.is_dir():
        raise CLIError(f"extracting {archive.name} did not produce directory {top_level}")
    log(str(target))
    return target, extracted
