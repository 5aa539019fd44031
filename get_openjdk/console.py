"""Console helpers for get_openjdk."""

from __future__ import annotations

import sys

from .utils import format_cli_command

_LOG_SILENCED = False


def configure_console(*, quiet: bool = False) -> None:
    global _LOG_SILENCED
    _LOG_SILENCED = quiet


def log(message: str) -> None:
    if _LOG_SILENCED:
        return
    print(f"[get_openjdk] {message}")


def log_error(message: str) -> None:
    print(f"[get_openjdk] {message}", file=sys.stderr)


def announce(*parts: object) -> None:
    """Echo the step about to run, shell-trace style."""
    if _LOG_SILENCED:
        return
    print()
    print(f"$ {format_cli_command(parts)}")


def echo_raw(line: str) -> None:
    if _LOG_SILENCED:
        return
    sys.stdout.write(line)
    sys.stdout.flush()
