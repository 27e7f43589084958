"""Fold per-file conversion outcomes into a batch report."""

from __future__ import annotations

import threading
from collections.abc import Iterable
from pathlib import Path

from pdf_batch_converter.application.results import BatchReport, ConversionOutcome


class ResultAggregator:
    """Thread-safe, streaming accumulator of :class:`ConversionOutcome` objects.

    Every outcome is counted independently; duplicate source paths are not
    merged. One aggregator is used per batch run.
    """

    def __init__(self, output_root: Path | None = None) -> None:
        self._lock = threading.Lock()
        self._outcomes: list[ConversionOutcome] = []
        self._success_files: list[Path] = []
        self._failed_files: list[Path] = []
        self._cumulative = 0.0
        self._output_root = output_root

    def add(self, outcome: ConversionOutcome) -> None:
        """Record one outcome."""
        with self._lock:
            self._outcomes.append(outcome)
            self._cumulative += outcome.elapsed
            if outcome.succeeded:
                self._success_files.append(outcome.source_path)
            else:
                self._failed_files.append(outcome.source_path)

    def extend(self, outcomes: Iterable[ConversionOutcome]) -> None:
        """Record several outcomes."""
        for outcome in outcomes:
            self.add(outcome)

    def __len__(self) -> int:
        with self._lock:
            return len(self._outcomes)

    def report(self, total_elapsed: float | None = None) -> BatchReport:
        """Finalize the accumulated outcomes.

        Parameters
        ----------
        total_elapsed : float | None, default=None
            Batch wall-clock seconds. Defaults to the sum of item times.

        Returns
        -------
        BatchReport
            Snapshot of the counts, path lists and timings.
        """
        with self._lock:
            outcomes = tuple(self._outcomes)
            success_files = tuple(self._success_files)
            failed_files = tuple(self._failed_files)
            cumulative = self._cumulative

        total = cumulative if total_elapsed is None else total_elapsed
        return BatchReport(
            success_count=len(success_files),
            failure_count=len(failed_files),
            success_files=success_files,
            failed_files=failed_files,
            total_elapsed=total,
            average_per_file=total / max(1, len(outcomes)),
            cumulative_conversion_time=cumulative,
            outcomes=outcomes,
            output_root=self._output_root,
        )


def aggregate(
    outcomes: Iterable[ConversionOutcome],
    *,
    total_elapsed: float | None = None,
    output_root: Path | None = None,
) -> BatchReport:
    """Build a :class:`BatchReport` from an iterable of outcomes."""
    aggregator = ResultAggregator(output_root=output_root)
    aggregator.extend(outcomes)
    return aggregator.report(total_elapsed=total_elapsed)
