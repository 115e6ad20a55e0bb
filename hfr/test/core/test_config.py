"""Tests for hfr.core.config module."""

from __future__ import annotations

from pathlib import Path

import pytest

from hfr.core.config import (
    Config,
    ReleaseConfig,
    load_config,
    load_config_or_default,
)
from hfr.core.result import Err, Ok


class TestReleaseConfig:
    def test_defaults(self) -> None:
        config = ReleaseConfig()
        assert config.editor == "nano"
        assert config.commit_message_file == "COMMIT_MSG"
        assert config.include_commits is False

    def test_frozen(self) -> None:
        config = ReleaseConfig()
        with pytest.raises(AttributeError):
            config.editor = "vim"  # type: ignore[misc]


class TestFromDict:
    def test_empty(self) -> None:
        assert Config.from_dict({}) == Config()

    def test_release_table(self) -> None:
        config = Config.from_dict(
            {
                "release": {
                    "editor": "vim",
                    "commit_message_file": "out/MSG",
                    "include_commits": True,
                }
            }
        )
        assert config.release == ReleaseConfig(
            editor="vim", commit_message_file="out/MSG", include_commits=True
        )

    def test_wrong_types_fall_back_to_defaults(self) -> None:
        config = Config.from_dict(
            {"release": {"editor": 3, "commit_message_file": "  ", "include_commits": "yes"}}
        )
        assert config.release == ReleaseConfig()

    def test_release_not_a_table(self) -> None:
        assert Config.from_dict({"release": "vim"}) == Config()


class TestLoadConfig:
    def test_valid_file(self, tmp_path: Path) -> None:
        path = tmp_path / "hfr.toml"
        path.write_text('[release]\neditor = "emacs -nw"\n', encoding="utf-8")

        result = load_config(path)

        assert isinstance(result, Ok)
        assert result.value.release.editor == "emacs -nw"

    def test_missing_file(self, tmp_path: Path) -> None:
        result = load_config(tmp_path / "missing.toml")

        assert isinstance(result, Err)
        assert "not found" in result.error.message

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "hfr.toml"
        path.write_text("[release\n", encoding="utf-8")

        result = load_config(path)

        assert isinstance(result, Err)
        assert "Invalid TOML" in result.error.message
        assert result.error.path == path


class TestLoadConfigOrDefault:
    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        assert load_config_or_default(tmp_path / "hfr.toml") == Ok(Config())

    def test_broken_file_is_still_an_error(self, tmp_path: Path) -> None:
        path = tmp_path / "hfr.toml"
        path.write_text("include_commits = = true\n", encoding="utf-8")

        assert isinstance(load_config_or_default(path), Err)
