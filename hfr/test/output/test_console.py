"""Tests for hfr.output.console module."""

from __future__ import annotations

import pytest

from hfr.output.console import ConsoleProtocol, MockConsole, RichConsole, Style


class TestStyle:
    def test_str_conversion(self) -> None:
        assert str(Style.SUCCESS) == "success"
        assert str(Style.DIM) == "dim"


class TestMockConsole:
    def test_print_captures_message(self) -> None:
        console = MockConsole()
        console.print("hello")
        assert console.outputs[0].message == "hello"
        assert console.outputs[0].style == Style.DEFAULT

    def test_shorthands(self) -> None:
        console = MockConsole()
        console.success("done")
        console.error("broken")

        assert console.messages == ["OK done", "error: broken"]
        assert console.has_error()

    def test_find(self) -> None:
        console = MockConsole()
        console.print("prev tag: svc-1.2.3", Style.DIM)
        console.print("revision range: svc-1.2.3..HEAD", Style.DIM)

        assert len(console.find("svc-1.2.3")) == 2
        assert console.find("missing") == []

    def test_satisfies_protocol(self) -> None:
        console: ConsoleProtocol = MockConsole()
        console.success("release")


class TestRichConsole:
    def test_brackets_are_not_markup(self, capsys: pytest.CaptureFixture[str]) -> None:
        console = RichConsole()
        console.print("def456 [svc] add feature")
        console.error("tag [bold] broken")

        out = capsys.readouterr().out
        assert "def456 [svc] add feature" in out
        assert "error: tag [bold] broken" in out
