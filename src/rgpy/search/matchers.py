"""
Pattern compilation module for rgpy.

This module turns a raw pattern plus options into a :class:`Matcher`, an
immutable predicate over single lines of text that can be shared by any number
of worker threads.

Engines:
    regex: Default engine backed by the ``regex`` library, always available
    pcre2: Optional engine backed by the ``pcre2`` bindings; only present when
           that distribution is installed (``pip install 'rgpy[pcre2]'``)

Functions:
    compile_matcher: Main entry point, compiles a pattern into a Matcher
    resolve_engine: Normalize an engine selector string into an Engine
    engine_available / available_engines: Report what this installation offers

Example:
    Compile once, scan many:
        >>> from rgpy.search.matchers import compile_matcher
        >>> matcher = compile_matcher("foo", ignore_case=True)
        >>> matcher.is_match("a FOO b")
        True
        >>> hits = matcher.search_file("notes.txt")
        >>> total = matcher.search_dir("docs", count=True)
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any

import regex as regex_mod  # better regex engine

from ..core.config import ScanConfig
from ..core.types import Engine, MatchEntry
from ..utils.error_handling import (
    ConfigurationError,
    EngineUnavailableError,
    ErrorCollector,
    InvalidPatternError,
)

# Attempt to import the optional PCRE2 bindings
_PCRE2_AVAILABLE = False
_pcre2_module: Any = None
_PCRE2_IMPORT_ERROR: str | None = None

try:
    import pcre2 as _pcre2_module  # type: ignore[no-redef]

    _PCRE2_AVAILABLE = True
except ImportError as exc:  # pragma: no cover - depends on the installation
    _PCRE2_IMPORT_ERROR = str(exc)


@lru_cache(maxsize=64)
def _get_compiled_regex(pattern: str, flags: int) -> regex_mod.Pattern:
    return regex_mod.compile(pattern, flags=flags)


def resolve_engine(engine: Engine | str) -> Engine:
    """Map an engine selector (``"regex"``, ``"pcre2"`` or an Engine) to an Engine."""
    if isinstance(engine, Engine):
        return engine
    try:
        return Engine(str(engine).strip().lower())
    except ValueError:
        valid = ", ".join(e.value for e in Engine)
        raise ConfigurationError(
            f"Unknown engine {engine!r}; expected one of: {valid}", context={"engine": engine}
        ) from None


def engine_available(engine: Engine | str) -> bool:
    """Return True if ``engine`` can be compiled against in this installation."""
    resolved = resolve_engine(engine)
    if resolved is Engine.PCRE2:
        return _PCRE2_AVAILABLE
    return True


def available_engines() -> list[Engine]:
    return [e for e in Engine if engine_available(e)]


@dataclass(frozen=True, slots=True)
class Matcher:
    """
    Compiled, reusable, read-only line predicate.

    Instances are created by :func:`compile_matcher` and never change afterwards,
    so one Matcher can be used by many threads at once without locking. The
    engine-specific search function is bound at construction; :meth:`is_match`
    only calls it.

    Attributes:
        pattern: The pattern as given by the caller
        ignore_case: Whether the pattern was compiled case-insensitively
        engine: Engine the pattern was compiled against
    """

    pattern: str
    ignore_case: bool
    engine: Engine
    _search: Callable[[str], Any] = field(repr=False, compare=False)

    def is_match(self, line: str) -> bool:
        """Return True if the pattern matches anywhere in ``line``."""
        return self._search(line) is not None

    def search_file(
        self,
        path: str | Path,
        count: bool = False,
        invert_match: bool = False,
        *,
        config: ScanConfig | None = None,
    ) -> list[MatchEntry] | int:
        """Scan one file. Raises FileAccessError if it cannot be opened or read."""
        from .scanner import search_file

        return search_file(self, path, invert_match=invert_match, count=count, config=config)

    def search_dir(
        self,
        dir: str | Path,
        count: bool = False,
        invert_match: bool = False,
        *,
        config: ScanConfig | None = None,
        errors: ErrorCollector | None = None,
    ) -> list[MatchEntry] | int:
        """Scan every readable regular file under ``dir``; unreadable entries are skipped."""
        from .scanner import search_dir

        return search_dir(
            self, dir, invert_match=invert_match, count=count, config=config, errors=errors
        )


def _compile_regex(pattern: str, ignore_case: bool) -> Callable[[str], Any]:
    flags = regex_mod.IGNORECASE if ignore_case else 0
    try:
        compiled = _get_compiled_regex(pattern, flags)
    except regex_mod.error as e:
        raise InvalidPatternError(pattern, Engine.REGEX.value, str(e)) from e
    return compiled.search


def _compile_pcre2(pattern: str, ignore_case: bool) -> Callable[[str], Any]:
    if not _PCRE2_AVAILABLE:
        raise EngineUnavailableError(Engine.PCRE2.value, _PCRE2_IMPORT_ERROR)
    source = f"(?i){pattern}" if ignore_case else pattern
    try:
        compiled = _pcre2_module.compile(source)
    except Exception as e:
        # pcre2 reports syntax problems through its own exception types
        raise InvalidPatternError(pattern, Engine.PCRE2.value, str(e)) from e
    return compiled.search


_COMPILERS: dict[Engine, Callable[[str, bool], Callable[[str], Any]]] = {
    Engine.REGEX: _compile_regex,
    Engine.PCRE2: _compile_pcre2,
}


def compile_matcher(
    pattern: str,
    ignore_case: bool = False,
    engine: Engine | str = Engine.REGEX,
) -> Matcher:
    """
    Compile ``pattern`` into a reusable :class:`Matcher`.

    Args:
        pattern: Pattern in the syntax of the selected engine
        ignore_case: Compile with the engine's case-insensitive option
        engine: ``"regex"`` (default) or ``"pcre2"``

    Returns:
        An immutable Matcher

    Raises:
        InvalidPatternError: The engine rejected the pattern
        EngineUnavailableError: ``pcre2`` was requested but is not installed
        ConfigurationError: ``engine`` names no known engine
    """
    resolved = resolve_engine(engine)
    search = _COMPILERS[resolved](pattern, bool(ignore_case))
    return Matcher(
        pattern=pattern,
        ignore_case=bool(ignore_case),
        engine=resolved,
        _search=search,
    )
