"""
Pattern compilation and line scanning.

- matchers: engine selection and the immutable Matcher
- scanner: single-file and directory scans built on a Matcher
"""

from .matchers import Matcher, available_engines, compile_matcher, engine_available
from .scanner import search_dir, search_file

__all__ = [
    "Matcher",
    "available_engines",
    "compile_matcher",
    "engine_available",
    "search_dir",
    "search_file",
]
