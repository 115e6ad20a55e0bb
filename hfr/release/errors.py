"""Error types for the release flow.

Each failure is its own frozen dataclass; `ReleaseError` is the union the
service layer returns and `hfr.output.errors` renders.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class UsageError:
    """Bad command-line input (missing/multiple applications, conflicting flags)."""

    message: str


@dataclass(frozen=True, slots=True)
class AmbiguousApplicationError:
    """Application name that cannot be told apart from its version suffix."""

    application: str
    reason: str


@dataclass(frozen=True, slots=True)
class MalformedTagError:
    """A tag in the application's namespace whose suffix is not `int.int.int`."""

    tag: str
    application: str


@dataclass(frozen=True, slots=True)
class GitFailed:
    command: str
    message: str


@dataclass(frozen=True, slots=True)
class EditorFailed:
    editor: str
    message: str


@dataclass(frozen=True, slots=True)
class MessageAborted:
    """The editor exited without saving a release message."""

    editor: str


@dataclass(frozen=True, slots=True)
class WriteFailed:
    path: Path
    reason: str


@dataclass(frozen=True, slots=True)
class ConfigInvalid:
    message: str
    path: Path | None = None


ReleaseError = (
    UsageError
    | AmbiguousApplicationError
    | MalformedTagError
    | GitFailed
    | EditorFailed
    | MessageAborted
    | WriteFailed
    | ConfigInvalid
)
