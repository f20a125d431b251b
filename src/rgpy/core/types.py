"""
Core type definitions for rgpy.

Key Types:
    Engine: Closed set of pattern engines a Matcher can be compiled against
    OutputFormat: Enumeration of supported CLI output formats
    MatchEntry: One reported line with its source path and 1-based line number
    ScanOutcome: Partial result of one scanned unit (a file or a line batch)

Example:
    Working with results:
        >>> from rgpy import compile
        >>> matcher = compile("foo")
        >>> for entry in matcher.search_file("notes.txt"):
        ...     print(f"{entry.path}:{entry.line_number}: {entry.text}")
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum


class Engine(str, Enum):
    """Pattern engines. ``REGEX`` is always available, ``PCRE2`` is optional."""

    REGEX = "regex"
    PCRE2 = "pcre2"


class OutputFormat(str, Enum):
    TEXT = "text"
    JSON = "json"
    HIGHLIGHT = "highlight"


@dataclass(frozen=True, slots=True)
class MatchEntry:
    """
    A single reported line.

    Under invert-match the entry is a line that did *not* match the pattern.

    Attributes:
        path: Path of the file the line came from, as given to the scanner
        line_number: 1-based position of the line in the original file content
        text: Line content with its terminator removed
    """

    path: str
    line_number: int
    text: str

    def __iter__(self) -> Iterator[str | int]:
        yield self.path
        yield self.line_number
        yield self.text

    def as_dict(self) -> dict[str, str | int]:
        return {"path": self.path, "line_number": self.line_number, "text": self.text}


@dataclass(slots=True)
class ScanOutcome:
    """
    Partial result of scanning one unit of work.

    In count mode only ``count`` is maintained and ``entries`` stays empty.
    Merging is order independent for the count and for the multiset of entries.
    """

    entries: list[MatchEntry] = field(default_factory=list)
    count: int = 0

    def add(self, entry: MatchEntry, count_only: bool) -> None:
        self.count += 1
        if not count_only:
            self.entries.append(entry)

    def merge(self, other: ScanOutcome) -> None:
        self.entries.extend(other.entries)
        self.count += other.count

    @classmethod
    def combine(cls, parts: Iterable[ScanOutcome]) -> ScanOutcome:
        total = cls()
        for part in parts:
            total.merge(part)
        return total

    def result(self, count_only: bool) -> list[MatchEntry] | int:
        return self.count if count_only else self.entries
