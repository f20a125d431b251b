"""
rgpy: compiled-once line search over files and directory trees.

A pattern is compiled once into an immutable Matcher, which can then scan any
number of files or directory trees. Scans return the matching lines, each with
its file path and 1-based line number, or just their count.

Key Features:
    - **Two engines**: ``regex`` (default, always available) and ``pcre2``
      (optional, ``pip install 'rgpy[pcre2]'``)
    - **Compile once, scan many**: Matchers are immutable and thread-safe
    - **Invert and count**: ``invert_match`` reports non-matching lines,
      ``count`` returns the number of reported lines
    - **Parallel scanning**: directory scans fan out over files, large files
      over line batches; results keep exact line numbers
    - **Best-effort trees**: unreadable entries in a directory scan are skipped

Example Usage:
    Reusing a matcher:
        >>> import rgpy
        >>> matcher = rgpy.compile("foo", ignore_case=True)
        >>> for entry in matcher.search_file("lines.txt"):
        ...     print(entry.line_number, entry.text)
        >>> matcher.search_dir("src", count=True)

    One-shot helpers:
        >>> rgpy.search_file("foo", "lines.txt", invert_match=True)
        >>> rgpy.search_dir("TODO", "src", engine="pcre2")

    CLI usage:
        $ rgpy search "foo" lines.txt --count
        $ rgpy search "TODO" src -i --format json
"""

from .core.api import compile, search_dir, search_file
from .core.config import ScanConfig
from .core.types import Engine, MatchEntry, OutputFormat
from .search.matchers import Matcher, available_engines, compile_matcher, engine_available
from .utils.error_handling import (
    ConfigurationError,
    EngineUnavailableError,
    ErrorCollector,
    FileAccessError,
    InvalidPatternError,
    PermissionError,
    SearchError,
)
from .utils.logging_config import configure_logging, disable_logging, enable_debug_logging, get_logger

# Package metadata
__version__ = "0.1.0"
__license__ = "MIT"
__description__ = "Compiled-once line search over files and directory trees"

# Public API
__all__ = [
    # Compilation and scanning
    "compile",
    "compile_matcher",
    "search_file",
    "search_dir",
    "Matcher",
    "available_engines",
    "engine_available",
    # Data types
    "Engine",
    "MatchEntry",
    "OutputFormat",
    "ScanConfig",
    # Logging and configuration
    "configure_logging",
    "get_logger",
    "enable_debug_logging",
    "disable_logging",
    # Exception classes
    "SearchError",
    "InvalidPatternError",
    "EngineUnavailableError",
    "ConfigurationError",
    "FileAccessError",
    "PermissionError",
    "ErrorCollector",
    # Package metadata
    "__version__",
    "__license__",
    "__description__",
]
