"""Tests for rgpy.utils.logging_config module."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from rgpy.utils.logging_config import (
    JsonFormatter,
    LogFormat,
    LogLevel,
    SearchLogger,
    StructuredFormatter,
    configure_logging,
    disable_logging,
    enable_debug_logging,
    get_logger,
)


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("rgpy", logging.INFO, "x.py", 1, "hello %s", ("world",), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestLogLevel:
    def test_values(self):
        assert LogLevel.DEBUG == "DEBUG"
        assert LogLevel.WARNING == "WARNING"
        assert LogLevel.CRITICAL == "CRITICAL"


class TestLogFormat:
    def test_values(self):
        assert LogFormat.SIMPLE == "simple"
        assert LogFormat.DETAILED == "detailed"
        assert LogFormat.JSON == "json"
        assert LogFormat.STRUCTURED == "structured"


class TestSearchLogger:
    """Tests for SearchLogger class."""

    def test_init_default(self):
        logger = SearchLogger()
        assert logger.name == "rgpy"
        assert logger.level == LogLevel.WARNING
        assert logger.logger.level == logging.WARNING

    def test_init_custom(self):
        logger = SearchLogger(name="rgpy.test", level=LogLevel.DEBUG, format_type=LogFormat.JSON)
        assert logger.format_type == LogFormat.JSON
        assert isinstance(logger.logger.handlers[0].formatter, JsonFormatter)

    def test_no_console(self):
        logger = SearchLogger(name="rgpy.quiet", enable_console=False)
        assert logger.logger.handlers == []

    def test_file_logging(self, tmp_path: Path):
        log_file = tmp_path / "logs" / "rgpy.log"
        logger = SearchLogger(
            name="rgpy.file",
            level=LogLevel.DEBUG,
            log_file=log_file,
            enable_file=True,
            enable_console=False,
        )
        logger.log_search_start("foo", "src")
        logger.log_search_complete("foo", 3, 1.5)
        for handler in logger.logger.handlers:
            handler.flush()
        content = log_file.read_text(encoding="utf-8")
        assert "Starting scan for pattern: 'foo'" in content
        assert "results=3" in content

    def test_domain_helpers_do_not_raise(self):
        logger = SearchLogger(name="rgpy.helpers", enable_console=False)
        logger.log_file_error("a.txt", "denied", stage="read")
        logger.log_walk_stats("src", 10, 2.0)

    def test_file_error_records_stage(self, tmp_path: Path):
        log_file = tmp_path / "errors.log"
        logger = SearchLogger(
            name="rgpy.stage",
            level=LogLevel.DEBUG,
            format_type=LogFormat.STRUCTURED,
            log_file=log_file,
            enable_file=True,
            enable_console=False,
        )
        logger.log_file_error("a.txt", "denied")
        logger.log_file_error("src", "cannot list", stage="list", root="tree")
        for handler in logger.logger.handlers:
            handler.flush()
        lines = log_file.read_text(encoding="utf-8").splitlines()
        assert "operation=file_error" in lines[0]
        assert "stage=read" in lines[0]
        assert "stage=list" in lines[1]
        assert "root=tree" in lines[1]


class TestFormatters:
    def test_json_formatter(self):
        payload = json.loads(JsonFormatter().format(_record(operation="search_start")))
        assert payload["message"] == "hello world"
        assert payload["level"] == "INFO"
        assert payload["operation"] == "search_start"

    def test_structured_formatter(self):
        line = StructuredFormatter().format(_record(pattern="foo"))
        assert "[INFO] rgpy: hello world" in line
        assert "pattern=foo" in line


class TestGlobalLogger:
    """Tests for module-level logger helpers."""

    def test_returns_same_instance(self):
        assert get_logger() is get_logger()

    def test_configure_replaces(self):
        first = get_logger()
        configured = configure_logging(level=LogLevel.ERROR, enable_console=False)
        assert configured is get_logger()
        assert configured is not first
        assert configured.logger.level == logging.ERROR

    def test_enable_debug(self):
        configure_logging(level=LogLevel.INFO)
        enable_debug_logging()
        logger = get_logger()
        assert logger.level == LogLevel.DEBUG
        assert all(h.level == logging.DEBUG for h in logger.logger.handlers)

    def test_disable(self):
        disable_logging()
        assert get_logger().logger.level > logging.CRITICAL
