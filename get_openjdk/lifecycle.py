"""Run lifecycle: probe file cleanup and the final audit status line."""

from __future__ import annotations

import getpass
import socket
import sys
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Optional, Tuple

from .console import announce, log_error
from .constants import EXIT_CODE_FAILURE, EXIT_CODE_SUCCESS, PROGRAM_NAME
from .utils import format_cli_command


@dataclass
class RunContext:
    """State owned by one invocation and released when it ends."""

    program: str = PROGRAM_NAME
    argv: Tuple[str, ...] = field(default_factory=tuple)
    probe_path: Optional[Path] = None
    exit_code: Optional[int] = None


def _current_user() -> str:
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        return "unknown"


def remove_probe_file(run: RunContext) -> None:
    path = run.probe_path
    if path is None or not path.exists():
        return
    announce("rm", "--force", str(path))
    try:
        path.unlink()
    except FileNotFoundError:
        pass
    except OSError as exc:
        log_error(f"failed to remove probe file {path}: {exc}")


def status_line(run: RunContext) -> str:
    code = EXIT_CODE_FAILURE if run.exit_code is None else run.exit_code
    prefix = "INFO " if code == EXIT_CODE_SUCCESS else "ERROR"
    invocation = f"{run.program} {format_cli_command(run.argv)}".rstrip()
    return (
        f"{prefix}: {_current_user()} @ {socket.getfqdn()}: "
        f"Exit with status code [{code}]: {invocation}"
    )


def finalize_run(run: RunContext) -> None:
    remove_probe_file(run)
    stream = sys.stdout if run.exit_code == EXIT_CODE_SUCCESS else sys.stderr
    print(f"\n{status_line(run)}\n", file=stream)


@contextmanager
def run_lifecycle(program: str, argv: Tuple[str, ...]) -> Iterator[RunContext]:
    """Yield the run's context; clean up and report on every way out of the block.

    The caller records ``exit_code`` on the context. If the block raises, the
    run is reported as a failure.
    """
    run = RunContext(program=program, argv=tuple(argv))
    try:
        yield run
    except BaseException:
        if run.exit_code in (None, EXIT_CODE_SUCCESS):
            run.exit_code = EXIT_CODE_FAILURE
        raise
    finally:
        finalize_run(run)
