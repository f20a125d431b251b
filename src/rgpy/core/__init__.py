"""
Core functionality for the rgpy package.

- Configuration (ScanConfig)
- Core data types (Engine, MatchEntry, ScanOutcome)
- Parallel execution managers
- One-shot API (``rgpy.core.api``)
"""

from .config import ScanConfig
from .types import Engine, MatchEntry, OutputFormat, ScanOutcome

__all__ = [
    "ScanConfig",
    "Engine",
    "MatchEntry",
    "OutputFormat",
    "ScanOutcome",
]
