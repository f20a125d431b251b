"""
Utility functions for rgpy.

Key Functions:
    File Operations:
        - iter_numbered_lines: Stream a file as (1-based ordinal, text) pairs,
          skipping lines that are not valid UTF-8
        - is_regular_file: lstat-based regular file check that never raises

    Path Utilities:
        - build_pathspec: Compile include/exclude gitignore-style patterns
        - iter_files: Best-effort recursive enumeration of regular files

Example:
    Enumerating a tree:
        >>> from rgpy.utils.utils import iter_files
        >>> for path in iter_files("src", exclude=["**/__pycache__/**"]):
        ...     print(path)
"""

from __future__ import annotations

import os
import stat
import time
from collections.abc import Iterator
from pathlib import Path
from typing import BinaryIO

import pathspec

from .logging_config import get_logger


def iter_numbered_lines(handle: BinaryIO) -> Iterator[tuple[int, str]]:
    """
    Yield ``(line_number, text)`` for each line of a binary stream.

    Lines are split on ``\\n``; a trailing ``\\r`` is removed as well. A final
    line without terminator still counts. Lines that are not valid UTF-8 are
    skipped but keep their ordinal, so later line numbers stay exact.
    """
    for line_number, raw in enumerate(handle, start=1):
        if raw.endswith(b"\n"):
            raw = raw[:-1]
            if raw.endswith(b"\r"):
                raw = raw[:-1]
        try:
            yield line_number, raw.decode("utf-8")
        except UnicodeDecodeError:
            continue


def is_regular_file(path: str | os.PathLike[str]) -> bool:
    """True for regular files only; symlinks, directories and devices are excluded."""
    try:
        return stat.S_ISREG(os.lstat(path).st_mode)
    except OSError:
        return False


def build_pathspec(
    include: list[str] | None, exclude: list[str] | None
) -> tuple[pathspec.GitIgnoreSpec, pathspec.GitIgnoreSpec]:
    inc = pathspec.GitIgnoreSpec.from_lines(include or ["**/*"])
    exc = pathspec.GitIgnoreSpec.from_lines(exclude or [])
    return inc, exc


def iter_files(
    root: str | os.PathLike[str],
    include: list[str] | None = None,
    exclude: list[str] | None = None,
) -> Iterator[Path]:
    """
    Recursively yield the regular files under ``root``.

    The walk is best effort: a directory that cannot be listed or an entry
    that cannot be stat'ed is skipped and the walk continues. A missing or
    unreadable ``root`` yields nothing. Symlinked directories are not
    followed and symlinked files are not yielded. Order is unspecified.

    ``include``/``exclude`` are gitignore-style patterns matched against the
    path relative to ``root``; excluded directories are pruned.
    """
    logger = get_logger()
    started = time.perf_counter()
    found = 0
    filtered = bool(include or exclude)
    inc, exc = build_pathspec(include, exclude)
    root_path = Path(root)

    def on_walk_error(err: OSError) -> None:
        logger.log_file_error(str(err.filename), str(err), stage="list")

    for dirpath, dirnames, filenames in os.walk(root_path, onerror=on_walk_error):
        # Directory pruning: edit dirnames in place so os.walk skips the subtree
        if filtered and dirnames:
            for d in list(dirnames):
                rel_dir = (Path(dirpath) / d).relative_to(root_path).as_posix() + "/"
                if exc.match_file(rel_dir):
                    dirnames.remove(d)

        for name in filenames:
            p = Path(dirpath) / name
            if not is_regular_file(p):
                continue
            if filtered:
                rel = p.relative_to(root_path).as_posix()
                if not inc.match_file(rel) or exc.match_file(rel):
                    continue
            found += 1
            yield p

    logger.log_walk_stats(str(root_path), found, (time.perf_counter() - started) * 1000.0)
