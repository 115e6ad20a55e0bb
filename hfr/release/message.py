from __future__ import annotations

import shlex
import tempfile
from collections.abc import Mapping, Sequence
from pathlib import Path

from hfr.core.result import Err, Ok, Result
from hfr.platform.files import atomic_write_text
from hfr.platform.process import run_attached
from hfr.release.errors import EditorFailed, MessageAborted, WriteFailed
from hfr.release.model import CommitRecord


RELEASE_MSG_FILE = "RELEASE_MSG"


def resolve_editor(
    cli_editor: str | None,
    env: Mapping[str, str],
    default: str,
) -> list[str]:
    """Pick the editor command: `--editor`, then `$EDITOR`, then the configured default.

    The value is split like a shell word list so `EDITOR="code --wait"` works.
    """
    for candidate in (cli_editor, env.get("EDITOR"), default):
        if candidate and candidate.strip():
            return shlex.split(candidate)
    return [default]


def edit_message(
    editor_cmd: Sequence[str],
    cwd: Path,
) -> Result[str, EditorFailed | MessageAborted]:
    """Open the editor on a fresh scratch file and return what was saved.

    The scratch file lives in its own temporary directory, removed however
    the editor exits. Trailing newlines are dropped.
    """
    editor = " ".join(editor_cmd)
    with tempfile.TemporaryDirectory(prefix="hfr-") as tmp:
        scratch = Path(tmp) / RELEASE_MSG_FILE

        ran = run_attached([*editor_cmd, str(scratch)], cwd=cwd)
        if isinstance(ran, Err):
            e = ran.error
            detail = e.stderr.strip() or f"exited with code {e.returncode}"
            return Err(EditorFailed(editor=editor, message=detail))

        if not scratch.exists():
            return Err(MessageAborted(editor=editor))

        try:
            text = scratch.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            return Err(EditorFailed(editor=editor, message=f"cannot read message: {e}"))

    return Ok(text.rstrip("\n"))


def render_commit_message(
    new_tag: str,
    message: str,
    commits: Sequence[CommitRecord] = (),
    *,
    include_commits: bool = False,
) -> str:
    """Compose `{tag}`, a blank line, then the message.

    The filtered commit list is only appended as `* ...` bullets when
    `include_commits` is set.
    """
    blocks = [new_tag]
    if message:
        blocks.append(message)
    if include_commits and commits:
        blocks.append("\n".join(f"* {c.text}" for c in commits))
    return "\n\n".join(blocks) + "\n"


def write_commit_message(path: Path, content: str) -> Result[Path, WriteFailed]:
    try:
        atomic_write_text(path, content)
    except OSError as e:
        return Err(WriteFailed(path=path, reason=str(e)))
    return Ok(path)
