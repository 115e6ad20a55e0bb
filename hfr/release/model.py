from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from hfr.release.semver import SemVer


ReleaseBump = Literal["major", "minor", "patch"]

TAG_SEPARATOR = "-"
INITIAL_VERSION = SemVer(0, 0, 1)


@dataclass(frozen=True, slots=True, order=True)
class AppTag:
    """A tag in an application's namespace: `{application}-{version}`.

    Ordering is by version first, so `max()` over one application's tags
    picks the numerically highest release.
    """

    version: SemVer
    application: str

    @property
    def name(self) -> str:
        return f"{self.application}{TAG_SEPARATOR}{self.version}"


@dataclass(frozen=True, slots=True)
class CommitRecord:
    """One `git log --oneline` entry."""

    sha: str
    subject: str

    @property
    def text(self) -> str:
        if not self.subject:
            return self.sha
        return f"{self.sha} {self.subject}"

    @classmethod
    def parse(cls, line: str) -> CommitRecord:
        sha, _, subject = line.strip().partition(" ")
        return cls(sha=sha, subject=subject.strip())


@dataclass(frozen=True, slots=True)
class ReleaseRequest:
    """Validated command-line input for one release."""

    application: str
    bump: ReleaseBump
    message: str | None = None


@dataclass(frozen=True, slots=True)
class ResolvedTag:
    new_tag: str
    previous_tag: str | None
    app_tags: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class ReleasePlan:
    application: str
    new_tag: str
    previous_tag: str | None
    revision_range: str
    app_tags: tuple[str, ...]
    commits: tuple[CommitRecord, ...]
