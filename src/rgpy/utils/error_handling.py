"""
Error taxonomy and reporting for rgpy.

Every failure the engine can raise derives from :class:`SearchError`, which
carries a category, a severity, optional suggestions and a free-form context
dictionary. Some members also derive from a builtin exception so callers can
catch them the usual way (``ValueError`` for bad patterns, ``OSError`` for
file access failures).

Error Categories:
    - PATTERN: Pattern fails to compile under the selected engine
    - CONFIGURATION: Unknown or unavailable engine, invalid scan settings
    - FILE_ACCESS: File cannot be opened or read
    - PERMISSION: Permission denied while opening or listing an entry
    - ENCODING: Text decoding problems
    - UNKNOWN: Anything else

Classes:
    ErrorSeverity: Error severity levels (LOW, MEDIUM, HIGH, CRITICAL)
    ErrorCategory: Error classification categories
    ErrorInfo: Detailed error information container
    ErrorCollector: Batch error collection used by directory scans
    SearchError: Base exception class for rgpy errors

Functions:
    handle_file_error: Classify a file-level OS error and record it
    create_error_report: Render a human-readable report from a collector

Example:
    Recording files skipped by a directory scan:
        >>> from rgpy import compile
        >>> from rgpy.utils.error_handling import ErrorCollector, create_error_report
        >>>
        >>> collector = ErrorCollector()
        >>> matcher = compile("TODO")
        >>> hits = matcher.search_dir("src", errors=collector)
        >>> print(create_error_report(collector))
"""

from __future__ import annotations

# Import built-in exceptions before defining custom ones
import builtins
import sys
import time
import traceback
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

BuiltinPermissionError = builtins.PermissionError


class ErrorSeverity(str, Enum):
    """Error severity levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """Error categories for classification."""

    PATTERN = "pattern"
    CONFIGURATION = "configuration"
    FILE_ACCESS = "file_access"
    PERMISSION = "permission"
    ENCODING = "encoding"
    UNKNOWN = "unknown"


@dataclass
class ErrorInfo:
    """Detailed error information."""

    category: ErrorCategory
    severity: ErrorSeverity
    message: str
    file_path: Path | None = None
    exception_type: str | None = None
    traceback_str: str | None = None
    timestamp: float = field(default_factory=time.time)
    context: dict[str, Any] = field(default_factory=dict)
    suggestions: list[str] = field(default_factory=list)


class SearchError(Exception):
    """Base exception for search-related errors."""

    def __init__(
        self,
        message: str,
        category: ErrorCategory = ErrorCategory.UNKNOWN,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        file_path: Path | None = None,
        suggestions: list[str] | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message: str = message
        self.category: ErrorCategory = category
        self.severity: ErrorSeverity = severity
        self.file_path: Path | None = file_path
        self.suggestions: list[str] = suggestions or []
        self.context: dict[str, Any] = context or {}
        self.timestamp: float = time.time()

    def __str__(self) -> str:
        return self.message


class InvalidPatternError(SearchError, ValueError):
    """Pattern rejected by the selected engine."""

    def __init__(self, pattern: str, engine: str, diagnostic: str) -> None:
        super().__init__(
            f"Invalid {engine} pattern {pattern!r}: {diagnostic}",
            category=ErrorCategory.PATTERN,
            severity=ErrorSeverity.HIGH,
            suggestions=[
                "Check the pattern syntax for the selected engine",
                "Escape regex metacharacters for a literal search",
            ],
            context={"pattern": pattern, "engine": engine},
        )
        self.pattern: str = pattern
        self.engine: str = engine
        self.diagnostic: str = diagnostic


class EngineUnavailableError(SearchError):
    """The requested optional engine is not installed."""

    def __init__(self, engine: str, reason: str | None = None) -> None:
        message = f"Engine {engine!r} is not available in this installation"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(
            message,
            category=ErrorCategory.CONFIGURATION,
            severity=ErrorSeverity.HIGH,
            suggestions=[
                "Install the optional dependency: pip install 'rgpy[pcre2]'",
                "Use the default 'regex' engine",
            ],
            context={"engine": engine},
        )
        self.engine: str = engine


class ConfigurationError(SearchError, ValueError):
    """Configuration-related errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(
            message,
            category=ErrorCategory.CONFIGURATION,
            severity=ErrorSeverity.HIGH,
            suggestions=[
                "Verify engine names and scan settings",
                "Use default configuration",
            ],
            context=context,
        )


class FileAccessError(SearchError, OSError):
    """Error opening or reading a file."""

    def __init__(
        self,
        message: str,
        file_path: Path,
        context: dict[str, Any] | None = None,
        category: ErrorCategory = ErrorCategory.FILE_ACCESS,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        suggestions: list[str] | None = None,
    ) -> None:
        super().__init__(
            message,
            category=category,
            severity=severity,
            file_path=file_path,
            suggestions=suggestions,
            context=context,
        )


class PermissionError(FileAccessError):
    """Permission-related errors."""

    def __init__(
        self, message: str, file_path: Path, context: dict[str, Any] | None = None
    ) -> None:
        super().__init__(
            message,
            file_path,
            context=context,
            category=ErrorCategory.PERMISSION,
            severity=ErrorSeverity.HIGH,
            suggestions=[
                "Check file permissions",
                "Run with appropriate user privileges",
                "Verify file ownership",
            ],
        )


class ErrorCollector:
    """Collects and manages errors during search operations."""

    def __init__(self, max_errors: int = 100) -> None:
        self.max_errors = max_errors
        self.errors: list[ErrorInfo] = []
        self.error_counts: dict[ErrorCategory, int] = {}

    def add_error(
        self,
        exception: Exception | SearchError,
        category: ErrorCategory | None = None,
        severity: ErrorSeverity | None = None,
        file_path: Path | None = None,
        context: dict[str, Any] | None = None,
        suggestions: list[str] | None = None,
    ) -> None:
        """Add an error to the collection."""
        if isinstance(exception, SearchError):
            error_category = exception.category
            error_severity = exception.severity
            error_file_path = exception.file_path or file_path
            error_suggestions = exception.suggestions or suggestions or []
            error_context = {**exception.context, **(context or {})}
        else:
            error_category = category or self._classify_exception(exception)
            error_severity = severity or ErrorSeverity.MEDIUM
            error_file_path = file_path
            error_suggestions = suggestions or []
            error_context = context or {}

        error_info = ErrorInfo(
            category=error_category,
            severity=error_severity,
            message=str(exception),
            file_path=error_file_path,
            exception_type=type(exception).__name__,
            traceback_str=traceback.format_exc() if sys.exc_info()[0] else None,
            context=error_context,
            suggestions=error_suggestions,
        )

        if len(self.errors) < self.max_errors:
            self.errors.append(error_info)

        self.error_counts[error_category] = self.error_counts.get(error_category, 0) + 1

    def _classify_exception(self, exception: Exception) -> ErrorCategory:
        """Classify exception into error category."""
        if isinstance(exception, BuiltinPermissionError):
            return ErrorCategory.PERMISSION
        if isinstance(exception, UnicodeError):
            return ErrorCategory.ENCODING
        if isinstance(exception, OSError):
            return ErrorCategory.FILE_ACCESS
        return ErrorCategory.UNKNOWN

    def get_errors_by_category(self, category: ErrorCategory) -> list[ErrorInfo]:
        return [error for error in self.errors if error.category == category]

    def get_errors_by_severity(self, severity: ErrorSeverity) -> list[ErrorInfo]:
        return [error for error in self.errors if error.severity == severity]

    def total(self) -> int:
        """Number of errors seen, including those past ``max_errors``."""
        return sum(self.error_counts.values())

    def get_summary(self) -> dict[str, Any]:
        """Get error summary statistics."""
        return {
            "total_errors": self.total(),
            "by_category": {cat.value: n for cat, n in self.error_counts.items()},
            "by_severity": {
                severity.value: len(self.get_errors_by_severity(severity))
                for severity in ErrorSeverity
            },
        }

    def clear(self) -> None:
        self.errors.clear()
        self.error_counts.clear()


def classify_file_error(file_path: Path, operation: str, exception: Exception) -> SearchError:
    """Map an exception raised while touching ``file_path`` onto the taxonomy."""
    if isinstance(exception, SearchError):
        return exception
    if isinstance(exception, BuiltinPermissionError):
        return PermissionError(f"Permission denied during {operation}: {exception}", file_path)
    if isinstance(exception, OSError):
        return FileAccessError(f"Cannot {operation} file: {exception}", file_path)
    if isinstance(exception, UnicodeError):
        return SearchError(
            f"Encoding error during {operation}: {exception}",
            category=ErrorCategory.ENCODING,
            severity=ErrorSeverity.LOW,
            file_path=file_path,
        )
    return SearchError(f"Unexpected error during {operation}: {exception}", file_path=file_path)


def handle_file_error(
    file_path: Path,
    operation: str,
    exception: Exception,
    error_collector: ErrorCollector | None = None,
    logger: Any | None = None,
) -> SearchError:
    """
    Handle file-related errors with appropriate classification and logging.

    Args:
        file_path: Path to the file that caused the error
        operation: Operation being performed (e.g., "open", "read", "list")
        exception: The exception that occurred
        error_collector: Optional error collector to add the error to
        logger: Optional logger to log the error

    Returns:
        The classified error, so callers that must fail can raise it.
    """
    error = classify_file_error(file_path, operation, exception)

    if error_collector is not None:
        error_collector.add_error(error)

    if logger is not None:
        logger.log_file_error(str(file_path), str(error), stage=operation)

    return error


def create_error_report(error_collector: ErrorCollector) -> str:
    """Create a human-readable error report."""
    if not error_collector.errors:
        return "No errors occurred during the search operation."

    summary = error_collector.get_summary()

    report = ["Search Error Report", "=" * 50, ""]

    report.append(f"Total errors: {summary['total_errors']}")
    report.append(f"Critical errors: {summary['by_severity']['critical']}")
    report.append("")

    report.append("Errors by category:")
    for category, count in summary["by_category"].items():
        report.append(f"  {category}: {count}")
    report.append("")

    report.append("Skipped entries:")
    for category in ErrorCategory:
        entries = error_collector.get_errors_by_category(category)
        if not entries:
            continue
        report.append(f"  [{category.value}]")
        for error in entries:
            location = f" ({error.file_path})" if error.file_path else ""
            report.append(f"    - {error.message}{location}")
    report.append("")

    report.append("General Suggestions:")
    report.append("  - Check file permissions and accessibility")
    report.append("  - Consider excluding problematic directories")
    report.append("  - Use --debug flag for more detailed error information")

    return "\n".join(report)
