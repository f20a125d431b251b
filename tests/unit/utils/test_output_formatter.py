"""Tests for rgpy.utils.formatter module."""

from __future__ import annotations

import io
import json

from rich.console import Console

from rgpy.core.types import MatchEntry, OutputFormat
from rgpy.utils.formatter import format_result, format_text, render_highlight_console, to_json_bytes

ENTRIES = [MatchEntry("a.txt", 1, "foo"), MatchEntry("a.txt", 3, "foobar")]


class TestFormatText:
    def test_entries(self):
        assert format_text(ENTRIES) == "a.txt:1:foo\na.txt:3:foobar"

    def test_count(self):
        assert format_text(2) == "2"

    def test_empty(self):
        assert format_text([]) == ""


class TestToJsonBytes:
    def test_entries(self):
        data = json.loads(to_json_bytes(ENTRIES))
        assert data["count"] == 2
        assert data["matches"][1] == {"path": "a.txt", "line_number": 3, "text": "foobar"}

    def test_count(self):
        assert json.loads(to_json_bytes(7)) == {"matches": [], "count": 7}


class TestRenderHighlightConsole:
    def test_renders_entries(self):
        buffer = io.StringIO()
        console = Console(file=buffer, force_terminal=False, width=120)
        render_highlight_console(ENTRIES, console)
        out = buffer.getvalue()
        assert "a.txt:1:foo" in out
        assert "a.txt:3:foobar" in out

    def test_markup_not_interpreted(self):
        buffer = io.StringIO()
        console = Console(file=buffer, force_terminal=False, width=120)
        render_highlight_console([MatchEntry("b.txt", 1, "[bold]x[/bold]")], console)
        assert "[bold]x[/bold]" in buffer.getvalue()

    def test_count(self):
        buffer = io.StringIO()
        render_highlight_console(5, Console(file=buffer, force_terminal=False))
        assert buffer.getvalue().strip() == "5"


class TestFormatResult:
    def test_text(self):
        assert format_result(ENTRIES, OutputFormat.TEXT) == format_text(ENTRIES)

    def test_json(self):
        assert json.loads(format_result(ENTRIES, OutputFormat.JSON))["count"] == 2

    def test_highlight_without_tty_falls_back_to_text(self, monkeypatch):
        monkeypatch.setattr("sys.stdout", io.StringIO())
        assert format_result(ENTRIES, OutputFormat.HIGHLIGHT) == format_text(ENTRIES)
