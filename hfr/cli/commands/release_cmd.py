from __future__ import annotations

import os
from pathlib import Path
from typing import NoReturn

import typer

from hfr import __version__
from hfr.cli.context import build_context
from hfr.core.errors import ErrorCode
from hfr.core.result import Err
from hfr.output.console import ConsoleProtocol, RichConsole, Style
from hfr.output.errors import print_release_error, release_error_exit_code
from hfr.release.errors import ReleaseError
from hfr.release.message import edit_message, resolve_editor
from hfr.release.model import ReleasePlan
from hfr.release.request import parse_request
from hfr.release.service import plan_release, write_release_message


def _fail(error: ReleaseError, console: ConsoleProtocol) -> NoReturn:
    print_release_error(error, console)
    raise typer.Exit(code=release_error_exit_code(error))


def _print_plan(plan: ReleasePlan, console: ConsoleProtocol) -> None:
    console.print(f"app tags: {' '.join(plan.app_tags) or '(none)'}", Style.DIM)
    console.print(f"creating new release: {plan.new_tag}", Style.SUCCESS)
    console.print(f"prev tag: {plan.previous_tag or '(none)'}", Style.DIM)
    console.print(f"revision range: {plan.revision_range}", Style.DIM)
    if plan.commits:
        console.print("commits:", Style.DIM)
        for commit in plan.commits:
            console.print(f"  * {commit.text}", Style.DIM)
    else:
        console.print(f"commits: none tagged [{plan.application}]", Style.DIM)


def release(
    applications: list[str] | None = typer.Argument(
        None,
        metavar="APPLICATION",
        help="Application to release; its tags are named APPLICATION-X.Y.Z.",
        show_default=False,
    ),
    message: str | None = typer.Option(
        None, "-m", "--message", help="Release message (opens $EDITOR when omitted)."
    ),
    major: bool = typer.Option(False, "--major", help="Bump the major version."),
    minor: bool = typer.Option(False, "--minor", help="Bump the minor version."),
    yolo: bool = typer.Option(False, "-y", "--yolo", help="Accepted for compatibility; no effect."),
    include_commits: bool = typer.Option(
        False,
        "--include-commits",
        help="Append the commits marked for the application to the commit message.",
    ),
    output: Path | None = typer.Option(
        None, "-o", "--output", help="Commit message file (default: COMMIT_MSG)."
    ),
    editor: str | None = typer.Option(None, "--editor", help="Editor command override."),
    repo_dir: Path = typer.Option(Path("."), "-C", "--repo", help="Repository directory."),
    config_path: Path | None = typer.Option(
        None, "--config", help="Config file (default: hfr.toml in the repository)."
    ),
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
) -> None:
    """Prepare the commit message for a new APPLICATION-X.Y.Z release tag.

    Without --major or --minor the patch version is bumped. The first
    release of an application is 0.0.1.
    """
    del yolo  # no confirmation prompt to skip

    if version:
        typer.echo(__version__)
        raise typer.Exit(code=int(ErrorCode.OK))

    console = RichConsole()

    request = parse_request(applications or [], major=major, minor=minor, message=message)
    if isinstance(request, Err):
        _fail(request.error, console)
    req = request.value

    built = build_context(repo_dir=repo_dir, config_path=config_path, console=console)
    if isinstance(built, Err):
        _fail(built.error, console)
    ctx = built.value

    console.print(f"application: {req.application}")

    planned = plan_release(ctx.repo, req)
    if isinstance(planned, Err):
        _fail(planned.error, console)
    plan = planned.value
    _print_plan(plan, console)

    text = req.message
    if text is None:
        editor_cmd = resolve_editor(editor, os.environ, ctx.config.release.editor)
        edited = edit_message(editor_cmd, cwd=ctx.root)
        if isinstance(edited, Err):
            _fail(edited.error, console)
        text = edited.value

    console.print(f"message: {text}", Style.DIM)

    target = output or Path(ctx.config.release.commit_message_file)
    if not target.is_absolute():
        target = ctx.root / target

    include = include_commits or ctx.config.release.include_commits
    written = write_release_message(plan, text, target, include_commits=include)
    if isinstance(written, Err):
        _fail(written.error, console)

    console.success(f"commit message for {plan.new_tag} written to {written.value}")
