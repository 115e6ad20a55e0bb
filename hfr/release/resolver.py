"""Next-version resolution for an application's tag namespace.

Tags look like `{application}-{major}.{minor}.{patch}`. The previous
release is the numerically highest tag of the application, so `svc-1.10.0`
correctly wins over `svc-1.9.0` even though it sorts first as a string.
"""

from __future__ import annotations

from collections.abc import Iterable

from hfr.core.result import Err, Ok, Result
from hfr.release.errors import AmbiguousApplicationError, MalformedTagError
from hfr.release.model import (
    INITIAL_VERSION,
    TAG_SEPARATOR,
    AppTag,
    ReleaseBump,
    ResolvedTag,
)
from hfr.release.semver import parse_version


def check_application(application: str) -> Result[str, AmbiguousApplicationError]:
    if not application:
        return Err(AmbiguousApplicationError(application, "application name is empty"))
    if TAG_SEPARATOR in application:
        return Err(
            AmbiguousApplicationError(
                application,
                f"application name contains the tag separator '{TAG_SEPARATOR}'",
            )
        )
    return Ok(application)


def app_tags(
    application: str, existing_tags: Iterable[str]
) -> Result[list[AppTag], MalformedTagError]:
    """Parse the tags in `application`'s namespace, sorted by version.

    Tags of other applications are ignored. A tag that carries the
    `{application}-` prefix but no valid version fails the whole lookup.
    """
    prefix = f"{application}{TAG_SEPARATOR}"
    parsed: list[AppTag] = []
    for tag in existing_tags:
        tag = tag.strip()
        if not tag.startswith(prefix):
            continue
        version = parse_version(tag[len(prefix) :])
        if version is None:
            return Err(MalformedTagError(tag=tag, application=application))
        parsed.append(AppTag(version=version, application=application))
    return Ok(sorted(parsed))


def resolve_next_tag(
    application: str,
    bump: ReleaseBump,
    existing_tags: Iterable[str],
) -> Result[ResolvedTag, AmbiguousApplicationError | MalformedTagError]:
    """Compute the next tag for `application`.

    Args:
        application: Namespace to release
        bump: Version component to increment
        existing_tags: Every known tag, any application, any order

    Returns:
        Ok(ResolvedTag) with the new tag, the previous one (None when the
        application has never been released; the new version is then
        0.0.1 whatever the bump) and the application's tags in version order.
    """
    checked = check_application(application)
    if isinstance(checked, Err):
        return checked

    tags = app_tags(application, existing_tags)
    if isinstance(tags, Err):
        return tags

    if not tags.value:
        first = AppTag(version=INITIAL_VERSION, application=application)
        return Ok(ResolvedTag(new_tag=first.name, previous_tag=None))

    previous = tags.value[-1]
    new = AppTag(version=previous.version.bump(bump), application=application)
    return Ok(
        ResolvedTag(
            new_tag=new.name,
            previous_tag=previous.name,
            app_tags=tuple(t.name for t in tags.value),
        )
    )
