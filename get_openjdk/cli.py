#!/usr/bin/env python3
"""get-openjdk CLI entry point."""

from __future__ import annotations

import os
import sys
from typing import List, Optional, Sequence

import typer

from .args import parse_install_args, usage_text
from .console import configure_console, log_error
from .constants import (
    DEFAULT_API_BASE_URL,
    EXIT_CODE_INTERRUPT,
    EXIT_CODE_SUCCESS,
    HTTP_TIMEOUT_SECONDS,
    PACKAGE_NAME,
    PROGRAM_NAME,
)
from .context import AppContext, default_http_client_factory
from .errors import CLIError
from .installer import install_latest_jdk
from .lifecycle import RunContext, run_lifecycle
from .version import cli_version

app = typer.Typer(
    help="Install the latest Eclipse Temurin JDK for a major version and update its jdk-<major> link.",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{PACKAGE_NAME} {cli_version()}")
        raise typer.Exit()


@app.command()
def install(
    ctx: typer.Context,
    arguments: Optional[List[str]] = typer.Argument(
        None,
        metavar="INSTALL_PARENT_DIR JDK_VERSION",
        help="parent path for installation and whole/major JDK version (8, 11, 17, ...)",
        show_default=False,
    ),
    api_base_url: str = typer.Option(
        DEFAULT_API_BASE_URL,
        "--api-base-url",
        help="Adoptium API base URL",
    ),
    timeout: float = typer.Option(
        HTTP_TIMEOUT_SECONDS,
        "--timeout",
        min=0.1,
        help="HTTP connect/read timeout in seconds",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="do not trace each step (the final status line is always printed)",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="show the version and exit",
    ),
) -> None:
    run = ctx.ensure_object(RunContext)
    configure_console(quiet=quiet)
    try:
        args = parse_install_args(arguments or [])
    except CLIError as exc:
        log_error(f"error: {exc}")
        typer.echo("", err=True)
        typer.echo(usage_text(run.program), err=True)
        raise typer.Exit(code=exc.exit_code) from exc

    context = AppContext(
        api_base_url=api_base_url,
        timeout_seconds=timeout,
        http_client_factory=default_http_client_factory,
    )
    try:
        install_latest_jdk(args, run, context)
    except CLIError as exc:
        log_error(f"error: {exc}")
        raise typer.Exit(code=exc.exit_code) from exc
    except KeyboardInterrupt:
        log_error("interrupted")
        raise typer.Exit(code=EXIT_CODE_INTERRUPT) from None


def _dispatch(arguments: List[str], run: RunContext) -> int:
    command = typer.main.get_command(app)
    try:
        command.main(args=arguments, prog_name=run.program, obj=run)
    except SystemExit as exc:
        return int(exc.code or EXIT_CODE_SUCCESS)
    return EXIT_CODE_SUCCESS


def _program_name() -> str:
    return os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else PROGRAM_NAME


def main(argv: Optional[Sequence[str]] = None) -> int:
    if argv is None:
        program, arguments = _program_name(), sys.argv[1:]
    else:
        program, arguments = PROGRAM_NAME, list(argv)
    with run_lifecycle(program, tuple(arguments)) as run:
        run.exit_code = _dispatch(arguments, run)
    return run.exit_code


if __name__ == "__main__":
    sys.exit(main())
