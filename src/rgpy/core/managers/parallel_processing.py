"""
Parallel execution strategies for scan operations.

Two fan-out axes are supported, both on a bounded thread pool:

- files: used by directory scans. Small workloads run sequentially; per-file
  failures are handed to an error callback and the file is skipped.
- line batches: used by single-file scans of large files. Batches are matched
  concurrently and merged back in submission order, so entries come out in
  line order whatever the pool's scheduling.

Classes:
    ParallelScanManager: Chooses and runs the execution strategy

Example:
    Scanning files in parallel:
        >>> from rgpy.core.config import ScanConfig
        >>> from rgpy.core.managers.parallel_processing import ParallelScanManager
        >>>
        >>> manager = ParallelScanManager(ScanConfig(workers=4))
        >>> outcome = manager.scan_files(paths, scan_one, on_error)
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import TypeVar

from ..config import ScanConfig
from ..types import ScanOutcome

T = TypeVar("T")


class ParallelScanManager:
    """Manages parallel scan execution strategies."""

    def __init__(self, config: ScanConfig) -> None:
        self.config = config

    def should_parallelize_files(self, file_count: int) -> bool:
        return self.config.parallel and file_count >= self.config.min_parallel_files

    def scan_files(
        self,
        file_paths: Sequence[Path],
        scan_function: Callable[[Path], ScanOutcome],
        on_error: Callable[[Path, OSError], None],
    ) -> ScanOutcome:
        """
        Scan many files and merge their outcomes.

        Args:
            file_paths: Files to scan
            scan_function: Scans one file; raises OSError if it cannot be read
            on_error: Called with the path and error of every skipped file

        Returns:
            The merged outcome. Entry order across files is unspecified.
        """
        if not self.should_parallelize_files(len(file_paths)):
            return self._scan_sequential(file_paths, scan_function, on_error)
        return self._scan_with_thread_pool(file_paths, scan_function, on_error)

    def _scan_sequential(
        self,
        file_paths: Sequence[Path],
        scan_function: Callable[[Path], ScanOutcome],
        on_error: Callable[[Path, OSError], None],
    ) -> ScanOutcome:
        """Sequential scan for small workloads."""
        total = ScanOutcome()
        for file_path in file_paths:
            try:
                total.merge(scan_function(file_path))
            except OSError as e:
                on_error(file_path, e)
        return total

    def _scan_with_thread_pool(
        self,
        file_paths: Sequence[Path],
        scan_function: Callable[[Path], ScanOutcome],
        on_error: Callable[[Path, OSError], None],
    ) -> ScanOutcome:
        """Thread-based parallel scan; outcomes are merged as they complete."""
        total = ScanOutcome()
        workers = self.config.resolve_workers(len(file_paths))

        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="rgpy-file") as executor:
            futures: dict[Future[ScanOutcome], Path] = {
                executor.submit(scan_function, file_path): file_path for file_path in file_paths
            }
            for future in as_completed(futures):
                try:
                    total.merge(future.result())
                except OSError as e:
                    on_error(futures[future], e)

        return total

    def scan_batches(
        self,
        batches: Sequence[T],
        scan_function: Callable[[T], ScanOutcome],
    ) -> ScanOutcome:
        """
        Match independent batches and merge them in the order given.

        Errors raised by ``scan_function`` propagate to the caller.
        """
        workers = self.config.resolve_workers(len(batches))
        if workers <= 1:
            return ScanOutcome.combine(scan_function(batch) for batch in batches)

        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="rgpy-lines") as executor:
            futures = [executor.submit(scan_function, batch) for batch in batches]
            # Resequence: collect in submission order, not completion order
            return ScanOutcome.combine(future.result() for future in futures)
