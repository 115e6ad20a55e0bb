"""Error presentation utilities.

Centralized error formatting and exit code mapping for consistent UX.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from hfr.core.errors import ErrorCode
from hfr.output.console import Style
from hfr.release.errors import (
    AmbiguousApplicationError,
    ConfigInvalid,
    EditorFailed,
    GitFailed,
    MalformedTagError,
    MessageAborted,
    ReleaseError,
    UsageError,
    WriteFailed,
)

if TYPE_CHECKING:
    from hfr.output.console import ConsoleProtocol

__all__ = ["print_release_error", "release_error_exit_code"]


def print_release_error(error: ReleaseError, console: ConsoleProtocol) -> None:
    """Print a release error with an optional dim hint line."""
    match error:
        case UsageError(message=message):
            console.error(message)
            console.print("hint: run `hfr --help` for usage", Style.DIM)
        case AmbiguousApplicationError(application=application, reason=reason):
            console.error(f"invalid application '{application}': {reason}")
        case MalformedTagError(tag=tag, application=application):
            console.error(f"tag '{tag}' does not end in a {application}-MAJOR.MINOR.PATCH version")
            console.print("hint: rename or delete the tag before releasing", Style.DIM)
        case GitFailed(command=command, message=message):
            console.error(f"{command}: {message}")
        case EditorFailed(editor=editor, message=message):
            console.error(f"editor '{editor}' failed: {message}")
            console.print("hint: set $EDITOR or pass --message", Style.DIM)
        case MessageAborted(editor=editor):
            console.error(f"no release message saved from '{editor}'; aborting")
        case WriteFailed(path=path, reason=reason):
            console.error(f"cannot write commit message to {path}: {reason}")
        case ConfigInvalid(message=message):
            console.error(message)


def release_error_exit_code(error: ReleaseError) -> int:
    """Get exit code for a release error."""
    match error:
        case UsageError() | AmbiguousApplicationError() | MalformedTagError() | MessageAborted():
            return int(ErrorCode.USER_ERROR)
        case GitFailed() | EditorFailed() | ConfigInvalid():
            return int(ErrorCode.ENV_ERROR)
        case WriteFailed():
            return int(ErrorCode.IO_ERROR)
