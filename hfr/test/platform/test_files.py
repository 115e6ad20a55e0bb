"""Tests for hfr.platform.files module."""

from __future__ import annotations

from pathlib import Path

from hfr.platform.files import atomic_write_text


def test_writes_content(tmp_path: Path) -> None:
    path = tmp_path / "COMMIT_MSG"
    atomic_write_text(path, "svc-0.0.1\n")
    assert path.read_text(encoding="utf-8") == "svc-0.0.1\n"


def test_overwrites_existing_file(tmp_path: Path) -> None:
    path = tmp_path / "COMMIT_MSG"
    path.write_text("old\n", encoding="utf-8")

    atomic_write_text(path, "new\n")

    assert path.read_text(encoding="utf-8") == "new\n"


def test_creates_parent_dirs_and_leaves_no_temp_files(tmp_path: Path) -> None:
    path = tmp_path / "out" / "COMMIT_MSG"

    atomic_write_text(path, "x\n")

    assert [p.name for p in path.parent.iterdir()] == ["COMMIT_MSG"]
