"""
Utility functions and helper modules.

- Error taxonomy and collection
- Logging configuration
- Output formatting
- File and line iteration helpers
"""

from .error_handling import (
    ConfigurationError,
    EngineUnavailableError,
    ErrorCollector,
    FileAccessError,
    InvalidPatternError,
    PermissionError,
    SearchError,
    create_error_report,
    handle_file_error,
)
from .logging_config import configure_logging, disable_logging, enable_debug_logging, get_logger
from .utils import iter_files, iter_numbered_lines

__all__ = [
    # Error handling
    "ConfigurationError",
    "EngineUnavailableError",
    "ErrorCollector",
    "FileAccessError",
    "InvalidPatternError",
    "PermissionError",
    "SearchError",
    "create_error_report",
    "handle_file_error",
    # Logging
    "configure_logging",
    "disable_logging",
    "enable_debug_logging",
    "get_logger",
    # Utilities
    "iter_files",
    "iter_numbered_lines",
]
