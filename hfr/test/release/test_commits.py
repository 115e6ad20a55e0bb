from __future__ import annotations

from hfr.release.commits import (
    commit_marker,
    filter_release_commits,
    parse_oneline_log,
    revision_range,
)
from hfr.release.model import CommitRecord


LOG = ["abc123 fix bug", "def456 [svc] add feature", "ghi789 [other] change"]


def test_revision_range_first_release() -> None:
    assert revision_range(None) == "HEAD"


def test_revision_range_since_previous_tag() -> None:
    assert revision_range("svc-1.2.3") == "svc-1.2.3..HEAD"


def test_commit_marker() -> None:
    assert commit_marker("svc") == "[svc]"


def test_parse_oneline_log() -> None:
    commits = parse_oneline_log(["def456 [svc] add feature", "", "abc123"])

    assert commits == [
        CommitRecord(sha="def456", subject="[svc] add feature"),
        CommitRecord(sha="abc123", subject=""),
    ]
    assert commits[0].text == "def456 [svc] add feature"
    assert commits[1].text == "abc123"


def test_filter_keeps_only_marked_commits() -> None:
    filtered = filter_release_commits(parse_oneline_log(LOG), "svc")

    assert [c.text for c in filtered] == ["def456 [svc] add feature"]


def test_filter_preserves_order() -> None:
    log = parse_oneline_log(["c3 [svc] three", "c2 two", "c1 [svc] one"])

    assert [c.sha for c in filter_release_commits(log, "svc")] == ["c3", "c1"]


def test_filter_requires_brackets() -> None:
    log = parse_oneline_log(["c1 svc: no marker", "c2 [svc-api] other app"])

    assert filter_release_commits(log, "svc") == []


def test_filter_empty_input() -> None:
    assert filter_release_commits([], "svc") == []


def test_filter_is_idempotent() -> None:
    log = parse_oneline_log(LOG + ["jkl000 [svc] second", "mno111 [svc][other] both"])

    once = filter_release_commits(log, "svc")

    assert filter_release_commits(once, "svc") == once
