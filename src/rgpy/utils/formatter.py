"""
Output formatting module for rgpy.

Renders a scan result (a list of MatchEntry or a count) for the command line.

Supported Output Formats:
    - TEXT: ``path:line:text`` per entry, or the bare count
    - JSON: ``{"matches": [...], "count": n}`` via orjson
    - HIGHLIGHT: rich console output with styled path and line number

Example:
    >>> from rgpy.utils.formatter import format_result
    >>> from rgpy.core.types import OutputFormat
    >>> print(format_result(entries, OutputFormat.TEXT))
    notes.txt:1:foo
    notes.txt:3:foobar
"""

from __future__ import annotations

import sys

import orjson
from rich.console import Console
from rich.text import Text

from ..core.types import MatchEntry, OutputFormat

ScanResult = list[MatchEntry] | int


def to_json_bytes(result: ScanResult) -> bytes:
    """
    Convert a scan result to indented JSON bytes.

    Count results serialize with an empty ``matches`` list.
    """
    if isinstance(result, int):
        payload = {"matches": [], "count": result}
    else:
        payload = {"matches": [entry.as_dict() for entry in result], "count": len(result)}
    return orjson.dumps(payload, option=orjson.OPT_INDENT_2)


def format_text(result: ScanResult) -> str:
    if isinstance(result, int):
        return str(result)
    return "\n".join(f"{e.path}:{e.line_number}:{e.text}" for e in result)


def render_highlight_console(result: ScanResult, console: Console | None = None) -> None:
    """Render a scan result with rich styling to the console."""
    if console is None:
        console = Console()
    if isinstance(result, int):
        console.print(Text(str(result), style="bold"))
        return
    for entry in result:
        console.print(
            Text.assemble(
                (entry.path, "magenta"),
                ":",
                (str(entry.line_number), "green"),
                ":",
                entry.text,
            ),
            soft_wrap=True,
        )


def format_result(result: ScanResult, fmt: OutputFormat) -> str:
    """Format a scan result according to the specified output format."""
    if fmt == OutputFormat.JSON:
        return to_json_bytes(result).decode("utf-8")
    if fmt == OutputFormat.HIGHLIGHT and sys.stdout.isatty():
        render_highlight_console(result)
        return ""
    return format_text(result)
