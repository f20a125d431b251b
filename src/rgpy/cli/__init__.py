"""
Command-line interface implementation.

This module provides the ``rgpy`` command:
- ``search`` for scanning a file or a directory tree
- ``engines`` for reporting which pattern engines are installed
"""

from .main import cli, main

__all__ = [
    "cli",
    "main",
]
