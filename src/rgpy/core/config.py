"""
Configuration module for rgpy.

This module defines ScanConfig, the settings object consulted by every scanning
operation. All fields have defaults, so ``ScanConfig()`` is what the top-level
functions use when no configuration is passed.

Key Configuration Areas:
    - Parallelism: worker count, file-count threshold for the thread pool
    - Large files: line-count threshold and batch size for line-level fan-out
    - Directory scope: gitignore-style include/exclude patterns

Example:
    Sequential, deterministic scanning (handy in tests):
        >>> from rgpy.core.config import ScanConfig
        >>> config = ScanConfig(parallel=False)

    Restricting a directory scan:
        >>> config = ScanConfig(
        ...     include=["**/*.py"],
        ...     exclude=["**/.venv/**", "**/__pycache__/**"],
        ...     workers=8,
        ... )
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from ..utils.error_handling import ConfigurationError


@dataclass(slots=True)
class ScanConfig:
    # Performance
    parallel: bool = True
    workers: int = 0  # 0 = auto(cpu_count)
    # directory scans below this many files run sequentially
    min_parallel_files: int = 10
    # single files with at least this many lines are matched in batches
    line_parallel_threshold: int = 50_000
    line_batch_size: int = 10_000

    # Scope (directory scans only); None selects every regular file
    include: list[str] | None = None
    exclude: list[str] | None = None

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if self.workers < 0:
            raise ConfigurationError(
                f"workers must be >= 0, got {self.workers}", context={"workers": self.workers}
            )
        for name in ("min_parallel_files", "line_parallel_threshold", "line_batch_size"):
            value = getattr(self, name)
            if value < 1:
                raise ConfigurationError(f"{name} must be >= 1, got {value}", context={name: value})

    def resolve_workers(self, units: int) -> int:
        """Worker count for ``units`` independent pieces of work."""
        if not self.parallel or units <= 1:
            return 1
        cpu_count = os.cpu_count() or 4
        # File scanning mixes I/O with matching, so allow some oversubscription
        base = self.workers or cpu_count * 2
        return max(1, min(base, units))
