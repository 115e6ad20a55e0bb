"""Git repository abstraction.

This module provides the Repository class for the handful of read-only git
operations a release needs. All operations return Result types.

Usage:
    repo = Repository(Path("/path/to/helmfiles"))

    match repo.tags():
        case Ok(tags):
            print(f"{len(tags)} tags")
        case Err(e):
            print(f"Error: {e.message}")

    match repo.log_oneline("svc-1.2.3..HEAD"):
        case Ok(lines):
            for line in lines:
                print(line)
        case Err(e):
            print(f"log failed: {e.message}")
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from hfr.core.result import Err, Ok, Result
from hfr.platform.process import ProcessError
from hfr.platform.process import run as run_process

_GIT_TIMEOUT_SECONDS = 30.0

__all__ = [
    "GitError",
    "Repository",
]


@dataclass(frozen=True, slots=True)
class GitError:
    """Error from a git operation.

    Attributes:
        command: The git command that failed
        message: Error message
        returncode: Process return code
    """

    command: str
    message: str
    returncode: int = 1


class Repository:
    """Read-only view of a git repository.

    Attributes:
        path: Directory git commands run in (the repo root or any subdir)
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def tags(self) -> Result[list[str], GitError]:
        """List every tag in the repository.

        Order is whatever git reports; callers sort as they need.
        """
        result = self._run(["tag"])
        match result:
            case Err(e):
                return Err(self._error("tag", e, "git tag failed"))
            case Ok(stdout):
                return Ok(_non_empty_lines(stdout))

    def has_commits(self) -> bool:
        """Check if HEAD points at a commit.

        False in a freshly initialised repository, where `git log HEAD` fails.
        """
        result = self._run(["rev-parse", "--verify", "-q", "HEAD"])
        return isinstance(result, Ok)

    def log_oneline(self, revision_range: str) -> Result[list[str], GitError]:
        """One `<short sha> <subject>` line per commit in `revision_range`.

        Runs `git log <range> --oneline --no-decorate`, newest first.
        """
        result = self._run(["log", revision_range, "--oneline", "--no-decorate"])
        match result:
            case Err(e):
                return Err(self._error(f"log {revision_range}", e, "git log failed"))
            case Ok(stdout):
                return Ok(_non_empty_lines(stdout))

    def _run(self, args: list[str]) -> Result[str, ProcessError]:
        """Run a git command in this repository."""
        return run_process(
            ["git", "-C", str(self.path), *args], cwd=self.path, timeout=_GIT_TIMEOUT_SECONDS
        )

    @staticmethod
    def _error(command: str, e: ProcessError, fallback: str) -> GitError:
        return GitError(
            command=command,
            message=e.stderr.strip() or fallback,
            returncode=e.returncode,
        )


def _non_empty_lines(output: str) -> list[str]:
    return [ln.rstrip() for ln in output.splitlines() if ln.strip()]
