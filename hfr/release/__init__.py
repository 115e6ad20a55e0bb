"""Release bounded context: version resolution, commit filtering, message composition."""

from hfr.release.commits import filter_release_commits, revision_range
from hfr.release.errors import ReleaseError
from hfr.release.model import CommitRecord, ReleaseBump, ReleasePlan, ReleaseRequest, ResolvedTag
from hfr.release.resolver import resolve_next_tag
from hfr.release.semver import SemVer

__all__ = [
    "CommitRecord",
    "ReleaseBump",
    "ReleaseError",
    "ReleasePlan",
    "ReleaseRequest",
    "ResolvedTag",
    "SemVer",
    "filter_release_commits",
    "resolve_next_tag",
    "revision_range",
]
