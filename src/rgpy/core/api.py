"""
One-shot search API for rgpy.

``search_file`` and ``search_dir`` here take a raw pattern and are exactly
``compile(...)`` followed by the matching Matcher method. Use them when a
pattern is used once; compile a Matcher yourself to reuse it across calls.

Example:
    >>> import rgpy
    >>> rgpy.search_file("foo", "lines.txt")
    [MatchEntry(path='lines.txt', line_number=1, text='foo'), ...]
    >>> rgpy.search_dir("TODO", "src", ignore_case=True, count=True)
    12
"""

from __future__ import annotations

import os

from ..search.matchers import Matcher, compile_matcher
from ..utils.error_handling import ErrorCollector
from .config import ScanConfig
from .types import Engine, MatchEntry


def compile(
    pattern: str,
    ignore_case: bool = False,
    engine: Engine | str = Engine.REGEX,
) -> Matcher:
    """Compile ``pattern`` into a reusable Matcher. See :func:`compile_matcher`."""
    return compile_matcher(pattern, ignore_case=ignore_case, engine=engine)


def search_file(
    pattern: str,
    path: str | os.PathLike[str],
    ignore_case: bool = False,
    engine: Engine | str = Engine.REGEX,
    count: bool = False,
    invert_match: bool = False,
    *,
    config: ScanConfig | None = None,
) -> list[MatchEntry] | int:
    matcher = compile_matcher(pattern, ignore_case=ignore_case, engine=engine)
    return matcher.search_file(path, count=count, invert_match=invert_match, config=config)


def search_dir(
    pattern: str,
    dir: str | os.PathLike[str],
    ignore_case: bool = False,
    engine: Engine | str = Engine.REGEX,
    count: bool = False,
    invert_match: bool = False,
    *,
    config: ScanConfig | None = None,
    errors: ErrorCollector | None = None,
) -> list[MatchEntry] | int:
    matcher = compile_matcher(pattern, ignore_case=ignore_case, engine=engine)
    return matcher.search_dir(
        dir, count=count, invert_match=invert_match, config=config, errors=errors
    )
