"""
Line scanning module for rgpy.

Applies a compiled Matcher to the lines of a file (``search_file``) or of every
regular file in a tree (``search_dir``). A line is reported when
``matcher.is_match(text) XOR invert_match`` holds; that rule is the whole of
invert-match.

Error policy:
    - search_file: any open/read failure raises FileAccessError (an OSError)
    - search_dir: per-entry and per-file failures are skipped, logged at debug
      level and recorded in the optional ErrorCollector
    - Both: lines that are not valid UTF-8 are skipped silently

Example:
    >>> from rgpy.search.matchers import compile_matcher
    >>> from rgpy.search.scanner import search_file, search_dir
    >>>
    >>> m = compile_matcher("foo")
    >>> search_file(m, "lines.txt")                 # [MatchEntry(..., 1, 'foo'), ...]
    >>> search_file(m, "lines.txt", count=True)     # 2
    >>> search_dir(m, "project", invert_match=True, count=True)
"""

from __future__ import annotations

import os
import time
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from ..core.config import ScanConfig
from ..core.managers.parallel_processing import ParallelScanManager
from ..core.types import MatchEntry, ScanOutcome
from ..utils.error_handling import ErrorCollector, handle_file_error
from ..utils.logging_config import get_logger
from ..utils.utils import iter_files, iter_numbered_lines

if TYPE_CHECKING:
    from .matchers import Matcher

NumberedLine = tuple[int, str]


def match_lines(
    matcher: Matcher,
    path: str,
    lines: Sequence[NumberedLine],
    invert_match: bool,
    count: bool,
) -> ScanOutcome:
    """Apply the include rule to already-decoded ``(line_number, text)`` pairs."""
    outcome = ScanOutcome()
    is_match = matcher.is_match
    for line_number, text in lines:
        if is_match(text) != invert_match:
            outcome.add(MatchEntry(path, line_number, text), count)
    return outcome


def _read_numbered_lines(path: str | os.PathLike[str]) -> list[NumberedLine]:
    with open(path, "rb") as handle:
        return list(iter_numbered_lines(handle))


def _scan_stream(matcher: Matcher, path: Path, invert_match: bool, count: bool) -> ScanOutcome:
    """Scan one file sequentially without holding all of its lines in memory."""
    outcome = ScanOutcome()
    is_match = matcher.is_match
    path_str = str(path)
    with open(path, "rb") as handle:
        for line_number, text in iter_numbered_lines(handle):
            if is_match(text) != invert_match:
                outcome.add(MatchEntry(path_str, line_number, text), count)
    return outcome


def _split_batches(lines: list[NumberedLine], batch_size: int) -> list[list[NumberedLine]]:
    return [lines[i : i + batch_size] for i in range(0, len(lines), batch_size)]


def search_file(
    matcher: Matcher,
    path: str | os.PathLike[str],
    invert_match: bool = False,
    count: bool = False,
    *,
    config: ScanConfig | None = None,
) -> list[MatchEntry] | int:
    """
    Scan a single file.

    Args:
        matcher: Compiled matcher
        path: File to scan
        invert_match: Report the lines that do not match instead
        count: Return the number of reported lines instead of the lines

    Returns:
        Entries in line order, or their count

    Raises:
        FileAccessError: The file cannot be opened or read (not found,
            permission denied, is a directory, ...)
    """
    config = config or ScanConfig()
    logger = get_logger()
    path_str = os.fspath(path)
    started = time.perf_counter()
    logger.log_search_start(matcher.pattern, path_str, mode="file")

    try:
        lines = _read_numbered_lines(path)
    except OSError as e:
        raise handle_file_error(Path(path_str), "read", e, logger=logger) from e

    if config.parallel and len(lines) >= config.line_parallel_threshold:
        manager = ParallelScanManager(config)
        outcome = manager.scan_batches(
            _split_batches(lines, config.line_batch_size),
            lambda batch: match_lines(matcher, path_str, batch, invert_match, count),
        )
    else:
        outcome = match_lines(matcher, path_str, lines, invert_match, count)

    logger.log_search_complete(
        matcher.pattern, outcome.count, (time.perf_counter() - started) * 1000.0, mode="file"
    )
    return outcome.result(count)


def search_dir(
    matcher: Matcher,
    dir: str | os.PathLike[str],
    invert_match: bool = False,
    count: bool = False,
    *,
    config: ScanConfig | None = None,
    errors: ErrorCollector | None = None,
) -> list[MatchEntry] | int:
    """
    Scan every regular file under ``dir``.

    Unreadable entries and files are skipped (and recorded in ``errors`` when
    given). A missing or untraversable ``dir`` gives an empty result. Entries
    from one file are in line order; files are merged in no particular order.
    """
    config = config or ScanConfig()
    logger = get_logger()
    started = time.perf_counter()
    logger.log_search_start(matcher.pattern, os.fspath(dir), mode="dir")

    files = list(iter_files(dir, include=config.include, exclude=config.exclude))
    manager = ParallelScanManager(config)

    def scan_one(file_path: Path) -> ScanOutcome:
        return _scan_stream(matcher, file_path, invert_match, count)

    def on_error(file_path: Path, exc: OSError) -> None:
        handle_file_error(file_path, "read", exc, error_collector=errors, logger=logger)

    outcome = manager.scan_files(files, scan_one, on_error)

    logger.log_search_complete(
        matcher.pattern,
        outcome.count,
        (time.perf_counter() - started) * 1000.0,
        mode="dir",
        files_scanned=len(files),
    )
    return outcome.result(count)
