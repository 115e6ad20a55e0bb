from __future__ import annotations

from pathlib import Path

from hfr.core.result import Err, Ok, Result
from hfr.git.repository import GitError, Repository
from hfr.release.commits import filter_release_commits, parse_oneline_log, revision_range
from hfr.release.errors import GitFailed, ReleaseError, WriteFailed
from hfr.release.message import render_commit_message, write_commit_message
from hfr.release.model import ReleasePlan, ReleaseRequest
from hfr.release.resolver import resolve_next_tag


def _git_failed(e: GitError) -> GitFailed:
    return GitFailed(command=f"git {e.command}", message=e.message)


def plan_release(repo: Repository, request: ReleaseRequest) -> Result[ReleasePlan, ReleaseError]:
    """Resolve the next tag and collect the application's commits since the last one.

    Reads from git only; nothing is created or modified. A first release in a
    repository without commits has an empty commit list.
    """
    tags = repo.tags()
    if isinstance(tags, Err):
        return Err(_git_failed(tags.error))

    resolved = resolve_next_tag(request.application, request.bump, tags.value)
    if isinstance(resolved, Err):
        return resolved
    next_tag = resolved.value

    rev_range = revision_range(next_tag.previous_tag)
    lines: list[str] = []
    if next_tag.previous_tag is not None or repo.has_commits():
        log = repo.log_oneline(rev_range)
        if isinstance(log, Err):
            return Err(_git_failed(log.error))
        lines = log.value

    commits = filter_release_commits(parse_oneline_log(lines), request.application)

    return Ok(
        ReleasePlan(
            application=request.application,
            new_tag=next_tag.new_tag,
            previous_tag=next_tag.previous_tag,
            revision_range=rev_range,
            app_tags=next_tag.app_tags,
            commits=tuple(commits),
        )
    )


def write_release_message(
    plan: ReleasePlan,
    message: str,
    output: Path,
    *,
    include_commits: bool,
) -> Result[Path, WriteFailed]:
    content = render_commit_message(
        plan.new_tag,
        message,
        plan.commits,
        include_commits=include_commits,
    )
    return write_commit_message(output, content)
