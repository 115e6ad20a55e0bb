from __future__ import annotations

from hfr.core.result import Err, Ok
from hfr.release.errors import UsageError
from hfr.release.model import ReleaseRequest
from hfr.release.request import parse_request, select_bump


def test_select_bump() -> None:
    assert select_bump(major=False, minor=False) == Ok("patch")
    assert select_bump(major=False, minor=True) == Ok("minor")
    assert select_bump(major=True, minor=False) == Ok("major")


def test_major_and_minor_conflict() -> None:
    result = parse_request(["svc"], major=True, minor=True, message=None)

    assert result == Err(UsageError("cannot specify both '--major' and '--minor' flags"))


def test_conflict_reported_before_missing_application() -> None:
    result = parse_request([], major=True, minor=True, message=None)

    assert isinstance(result, Err)
    assert "--major" in result.error.message


def test_no_application() -> None:
    result = parse_request([], major=False, minor=False, message=None)

    assert result == Err(UsageError("no application specified for release"))


def test_multiple_applications() -> None:
    result = parse_request(["svc", "other"], major=False, minor=False, message=None)

    assert result == Err(UsageError("multiple applications specified for release (svc other)"))


def test_blank_application() -> None:
    result = parse_request(["  "], major=False, minor=False, message=None)

    assert isinstance(result, Err)


def test_valid_request() -> None:
    result = parse_request(["svc"], major=False, minor=True, message="hello")

    assert result == Ok(ReleaseRequest(application="svc", bump="minor", message="hello"))


def test_empty_message_means_editor() -> None:
    result = parse_request(["svc"], major=False, minor=False, message="")

    assert isinstance(result, Ok)
    assert result.value.message is None
