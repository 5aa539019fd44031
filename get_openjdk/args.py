"""Positional argument handling for get-openjdk."""

from __future__ import annotations

import os
import textwrap
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from .constants import (
    EXAMPLE_ARCHIVE_DIR,
    EXAMPLE_ARCHIVE_NAME,
    EXAMPLE_JDK_VERSION,
    EXIT_CODE_USAGE,
)
from .errors import CLIError
from .locator import binary_latest_url
from .symlink import symlink_name


@dataclass(frozen=True)
class InstallArgs:
    """Arguments for one install run."""

    install_dir: Path
    jdk_version: str


def parse_install_args(arguments: Sequence[str]) -> InstallArgs:
    if len(arguments) != 2 or not all(str(value).strip() for value in arguments):
        raise CLIError(
            "missing required arguments or too many arguments",
            exit_code=EXIT_CODE_USAGE,
        )
    install_dir, jdk_version = (str(value) for value in arguments)
    return InstallArgs(install_dir=Path(install_dir), jdk_version=jdk_version.strip())


def validate_install_dir(path: Path) -> Path:
    resolved = path.expanduser().resolve()
    if not resolved.is_dir():
        raise CLIError(f"install parent directory does not exist: {path}")
    if not os.access(resolved, os.W_OK | os.X_OK):
        raise CLIError(f"install parent directory is not writable: {path}")
    return resolved


def usage_text(program: str) -> str:
    example_dir = "$HOME/dev"
    link = symlink_name(EXAMPLE_JDK_VERSION)
    return textwrap.dedent(
        f"""\
        Usage: {program} [OPTIONS] INSTALL_PARENT_DIR JDK_VERSION
        From https://adoptium.net/, find the latest JDK minor version, download, untar, and update the symlink, e.g., {link}

        Required Arguments:
            INSTALL_PARENT_DIR: parent path for installation
                Example: $HOME/dev or $HOME/saveme

            JDK_VERSION: whole/major JDK version number
                Example: 8 or 11 or 17

        Example:
            {program} {example_dir} {EXAMPLE_JDK_VERSION}

            URL = {binary_latest_url(EXAMPLE_JDK_VERSION)}
            ... downloads file: {example_dir}/{EXAMPLE_ARCHIVE_NAME}
            ... untars to directory: {example_dir}/{EXAMPLE_ARCHIVE_DIR}
            ... creates symbolic link: {example_dir}/{link} -> {EXAMPLE_ARCHIVE_DIR}
        """
    )
