"""Tests for hfr.output.errors module."""

from __future__ import annotations

from pathlib import Path

import pytest

from hfr.core.errors import ErrorCode
from hfr.output.console import MockConsole, Style
from hfr.output.errors import print_release_error, release_error_exit_code
from hfr.release.errors import (
    AmbiguousApplicationError,
    ConfigInvalid,
    EditorFailed,
    GitFailed,
    MalformedTagError,
    MessageAborted,
    ReleaseError,
    UsageError,
    WriteFailed,
)


@pytest.mark.parametrize(
    ("error", "code"),
    [
        (UsageError("no application specified for release"), ErrorCode.USER_ERROR),
        (AmbiguousApplicationError("a-b", "contains '-'"), ErrorCode.USER_ERROR),
        (MalformedTagError("svc-latest", "svc"), ErrorCode.USER_ERROR),
        (MessageAborted("nano"), ErrorCode.USER_ERROR),
        (GitFailed("git tag", "fatal"), ErrorCode.ENV_ERROR),
        (EditorFailed("nano", "exited with code 1"), ErrorCode.ENV_ERROR),
        (ConfigInvalid("Invalid TOML syntax"), ErrorCode.ENV_ERROR),
        (WriteFailed(Path("COMMIT_MSG"), "read-only"), ErrorCode.IO_ERROR),
    ],
)
def test_exit_codes(error: ReleaseError, code: ErrorCode) -> None:
    assert release_error_exit_code(error) == int(code)


def test_usage_error_has_hint() -> None:
    console = MockConsole()
    print_release_error(UsageError("cannot specify both '--major' and '--minor' flags"), console)

    assert console.messages[0] == "error: cannot specify both '--major' and '--minor' flags"
    assert console.outputs[1].style == Style.DIM


def test_malformed_tag_names_the_tag() -> None:
    console = MockConsole()
    print_release_error(MalformedTagError("svc-1.2", "svc"), console)

    assert console.find("svc-1.2")
    assert console.has_error()


def test_git_failure() -> None:
    console = MockConsole()
    print_release_error(GitFailed("git log HEAD", "bad revision"), console)

    assert console.messages == ["error: git log HEAD: bad revision"]
