from __future__ import annotations

from collections.abc import Iterable, Sequence

from hfr.release.model import CommitRecord


def revision_range(previous_tag: str | None) -> str:
    """`HEAD` for a first release, otherwise everything since the previous tag."""
    if not previous_tag:
        return "HEAD"
    return f"{previous_tag}..HEAD"


def commit_marker(application: str) -> str:
    return f"[{application}]"


def parse_oneline_log(lines: Iterable[str]) -> list[CommitRecord]:
    return [CommitRecord.parse(line) for line in lines if line.strip()]


def filter_release_commits(
    commits: Sequence[CommitRecord], application: str
) -> list[CommitRecord]:
    """Keep the commits tagged `[application]`, in their original order."""
    marker = commit_marker(application)
    return [c for c in commits if marker in c.text]
