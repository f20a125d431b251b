"""
CLI entry point for rgpy.

This module serves as the entry point when rgpy.cli is executed as a module
with `python -m rgpy.cli`.
"""

from .main import main

if __name__ == "__main__":
    main()
