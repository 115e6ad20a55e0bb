from __future__ import annotations

from collections.abc import Sequence

from hfr.core.result import Err, Ok, Result
from hfr.release.errors import UsageError
from hfr.release.model import ReleaseBump, ReleaseRequest


def select_bump(*, major: bool, minor: bool) -> Result[ReleaseBump, UsageError]:
    if major and minor:
        return Err(UsageError("cannot specify both '--major' and '--minor' flags"))
    if major:
        return Ok("major")
    if minor:
        return Ok("minor")
    return Ok("patch")


def parse_request(
    applications: Sequence[str],
    *,
    major: bool,
    minor: bool,
    message: str | None,
) -> Result[ReleaseRequest, UsageError]:
    """Validate raw CLI input into a ReleaseRequest.

    Flag conflicts are reported before positional problems. An empty
    `message` counts as no message, so the editor is opened.
    """
    bump = select_bump(major=major, minor=minor)
    if isinstance(bump, Err):
        return bump

    if not applications:
        return Err(UsageError("no application specified for release"))
    if len(applications) > 1:
        return Err(
            UsageError(f"multiple applications specified for release ({' '.join(applications)})")
        )

    application = applications[0].strip()
    if not application:
        return Err(UsageError("application name must not be empty"))

    return Ok(ReleaseRequest(application=application, bump=bump.value, message=message or None))
