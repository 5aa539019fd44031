"""Error types for get_openjdk."""

from __future__ import annotations

from .constants import EXIT_CODE_FAILURE


class CLIError(Exception):
    """Raised for user-facing CLI errors."""

    def __init__(self, message: str, *, exit_code: int = EXIT_CODE_FAILURE) -> None:
        super().__init__(message)
        self.exit_code = exit_code
