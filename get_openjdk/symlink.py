"""Maintenance of the stable ``jdk-<major>`` symbolic link."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .console import announce, log
from .constants import SYMLINK_PREFIX
from .errors import CLIError

ACTION_CREATED = "created"
ACTION_REPLACED = "replaced"
ACTION_UNCHANGED = "unchanged"


@dataclass(frozen=True)
class SymlinkUpdate:
    link: Path
    target: str
    previous_target: Optional[str]
    action: str


def symlink_name(jdk_version: str) -> str:
    return f"{SYMLINK_PREFIX}{jdk_version}"


def _same_target(current: str, desired: str) -> bool:
    # Trailing slashes change how some tools resolve directory links.
    return current.rstrip("/") == desired.rstrip("/")


def update_symlink(install_dir: Path, jdk_version: str, target_name: str) -> SymlinkUpdate:
    """Point ``install_dir/jdk-<version>`` at ``target_name`` (relative to install_dir)."""
    target_name = target_name.rstrip("/")
    link = install_dir / symlink_name(jdk_version)
    previous: Optional[str] = None

    if link.is_symlink():
        announce("readlink", link.name)
        try:
            previous = os.readlink(link)
        except OSError as exc:
            raise CLIError(f"unable to read symbolic link {link}: {exc}") from exc
        log(previous)
        if _same_target(previous, target_name):
            log(f"symbolic link already up to date: {link.name} -> {previous}")
            return SymlinkUpdate(link, target_name, previous, ACTION_UNCHANGED)
        announce("rm", "--force", link.name)
        try:
            link.unlink()
        except FileNotFoundError:
            pass
        except OSError as exc:
            raise CLIError(f"unable to remove stale symbolic link {link}: {exc}") from exc
    elif link.exists():
        raise CLIError(f"refusing to replace {link}: it exists and is not a symbolic link")

    announce("ln", "--symbolic", target_name, link.name)
    try:
        os.symlink(target_name, link, target_is_directory=True)
    except OSError as exc:
        raise CLIError(f"unable to create symbolic link {link} -> {target_name}: {exc}") from exc
    log(f"{link.name} -> {target_name}")
    action = ACTION_CREATED if previous is None else ACTION_REPLACED
    return SymlinkUpdate(link, target_name, previous, action)
