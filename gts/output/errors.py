"""Error presentation utilities.

Centralized error formatting and exit code mapping for tagging failures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gts.core.errors import ErrorCode
from gts.output.console import Style
from gts.platform.actions import redact
from gts.services.tagging.errors import (
    BackendOperationError,
    InvalidReleaseTypeError,
    InvalidVersionIncrementError,
    NoValidVersionTagsError,
    TagError,
)

if TYPE_CHECKING:
    from gts.output.console import ConsoleProtocol

__all__ = ["print_tag_error", "tag_error_exit_code"]


def print_tag_error(
    error: TagError, console: ConsoleProtocol, *, secret: str | None = None
) -> None:
    """Print the full error chain: summary, raw details, then the hint."""
    console.error(redact(error.message, secret))
    match error:
        case NoValidVersionTagsError(tags=tags):
            for tag in tags:
                console.print(f"  rejected: {tag}", Style.DIM)
        case BackendOperationError(command=command, returncode=rc):
            console.print(f"command: git {redact(command, secret)} (exit {rc})", Style.DIM)
        case InvalidVersionIncrementError() | InvalidReleaseTypeError():
            pass
    if error.hint:
        console.print(f"hint: {error.hint}", Style.DIM)


def tag_error_exit_code(error: TagError) -> int:
    """Get exit code for a tagging error."""
    match error:
        case InvalidReleaseTypeError():
            return int(ErrorCode.USER_ERROR)
        case NoValidVersionTagsError() | InvalidVersionIncrementError():
            return int(ErrorCode.VERSION_ERROR)
        case BackendOperationError():
            return int(ErrorCode.NETWORK_ERROR)
    # Fallback for exhaustiveness
    return int(ErrorCode.USER_ERROR)
