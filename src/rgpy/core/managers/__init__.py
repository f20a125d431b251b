"""
Execution managers for scan operations.

- ParallelScanManager: file-level and line-batch fan-out on a thread pool
"""

from .parallel_processing import ParallelScanManager

__all__ = [
    "ParallelScanManager",
]
