"""
Shared test fixtures and utilities for rgpy tests.

This module provides common fixtures and sample files so individual test
modules stay focused on behaviour.
"""

from __future__ import annotations

import builtins
from pathlib import Path

import pytest

from rgpy import ScanConfig
from rgpy.utils import logging_config

# Test data constants
FOO_BAR_LINES = ["foo", "bar", "foobar"]

SAMPLE_TREE = {
    "README.md": "# Project\nfoo is documented here\n",
    "src/app.py": "import os\n\ndef foo():\n    return 'bar'\n",
    "src/util.py": "def helper():\n    return foo()\n",
    "src/nested/deep.txt": "nothing here\nFOO upper\nfoo lower\n",
    "docs/notes.txt": "bar\nbaz\n",
}


@pytest.fixture(autouse=True)
def reset_global_logger():
    """Give each test a fresh global logger so handlers never outlive a test."""
    yield
    logging_config._global_logger = None


@pytest.fixture
def foo_bar_file(tmp_path: Path) -> Path:
    """File with lines foo, bar, foobar."""
    path = tmp_path / "lines.txt"
    path.write_text("\n".join(FOO_BAR_LINES) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Small directory tree with matches spread across nested files."""
    root = tmp_path / "tree"
    for rel, content in SAMPLE_TREE.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def sequential_config() -> ScanConfig:
    """Disable parallel processing for deterministic tests."""
    return ScanConfig(parallel=False)


@pytest.fixture
def eager_parallel_config() -> ScanConfig:
    """Force both fan-out axes even for tiny inputs."""
    return ScanConfig(
        parallel=True,
        workers=4,
        min_parallel_files=1,
        line_parallel_threshold=1,
        line_batch_size=2,
    )


@pytest.fixture
def deny_open(monkeypatch):
    """
    Make ``open`` inside the scanner raise PermissionError for chosen paths.

    Tests usually run with enough privileges to read a chmod 000 file, so
    unreadable files are simulated instead. Returns a set to add paths to.
    """
    from rgpy.search import scanner

    denied: set[str] = set()
    real_open = builtins.open

    def fake_open(file, *args, **kwargs):
        if str(file) in denied:
            raise PermissionError(13, "Permission denied", str(file))
        return real_open(file, *args, **kwargs)

    monkeypatch.setattr(scanner, "open", fake_open, raising=False)
    return denied


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")
    config.addinivalue_line("markers", "cli: CLI-related tests")
