"""Unit tests for batch result aggregation."""

from __future__ import annotations

import threading
from pathlib import Path

from hypothesis import given
from hypothesis import strategies as st

from pdf_batch_converter.application.aggregator import ResultAggregator, aggregate
from pdf_batch_converter.application.results import ConversionOutcome
from pdf_batch_converter.errors import ConversionError


def _outcome(name: str, succeeded: bool, elapsed: float = 0.5) -> ConversionOutcome:
    return ConversionOutcome(
        source_path=Path("/docs") / name,
        succeeded=succeeded,
        elapsed=elapsed,
        error=None if succeeded else ConversionError("boom"),
    )


def test_empty_batch_reports_zero_average() -> None:
    """An empty batch never divides by zero."""
    report = aggregate([])
    assert report.item_count == 0
    assert report.average_per_file == 0
    assert report.success_files == ()
    assert report.failed_files == ()


def test_counts_and_paths() -> None:
    """Split outcomes into succeeded and failed path lists."""
    report = aggregate([_outcome("a.pdf", True), _outcome("b.pdf", False)])

    assert report.success_count == 1
    assert report.failure_count == 1
    assert report.success_files == (Path("/docs/a.pdf"),)
    assert report.failed_files == (Path("/docs/b.pdf"),)


def test_duplicate_sources_are_counted_independently() -> None:
    """The same source path twice yields two outcomes in the counts."""
    report = aggregate([_outcome("a.pdf", True), _outcome("a.pdf", False), _outcome("a.pdf", True)])
    assert report.success_count == 2
    assert report.failure_count == 1
    assert report.success_files == (Path("/docs/a.pdf"), Path("/docs/a.pdf"))


def test_total_elapsed_falls_back_to_item_sum() -> None:
    """Without wall-clock time the total is the sum of item times."""
    report = aggregate([_outcome("a.pdf", True, 1.0), _outcome("b.pdf", True, 3.0)])
    assert report.total_elapsed == 4.0
    assert report.average_per_file == 2.0
    assert report.cumulative_conversion_time == 4.0


def test_explicit_wall_clock_is_used_for_average() -> None:
    """Wall-clock time overrides the item sum for total and average."""
    report = aggregate(
        [_outcome("a.pdf", True, 1.0), _outcome("b.pdf", True, 3.0)],
        total_elapsed=2.0,
    )
    assert report.total_elapsed == 2.0
    assert report.average_per_file == 1.0
    assert report.cumulative_conversion_time == 4.0


def test_streaming_adds_from_many_threads() -> None:
    """Concurrent ``add`` calls lose no outcomes."""
    aggregator = ResultAggregator()

    def worker(offset: int) -> None:
        for index in range(200):
            aggregator.add(_outcome(f"{offset}-{index}.pdf", index % 3 != 0, 0.0))

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    report = aggregator.report()
    assert len(aggregator) == 1600
    assert report.item_count == 1600
    assert report.failure_count == 8 * 67
    assert len(report.success_files) == report.success_count


def test_summary_lists_failed_files() -> None:
    """The rendered summary includes counts and failed paths."""
    report = aggregate(
        [_outcome("a.pdf", True), _outcome("b.pdf", False)],
        output_root=Path("/out"),
    )
    lines = report.summary_lines()
    assert "Total: 2 files" in lines
    assert "Failed: 1 files" in lines
    assert "Output directory: /out" in lines
    assert "  - /docs/b.pdf" in lines


@given(flags=st.lists(st.booleans(), max_size=50))
def test_count_invariants(flags: list[bool]) -> None:
    """Counts always add up to the number of outcomes."""
    report = aggregate(_outcome(f"{i}.pdf", flag) for i, flag in enumerate(flags))
    assert report.success_count + report.failure_count == len(flags)
    assert len(report.success_files) == report.success_count
    assert len(report.failed_files) == report.failure_count
    assert report.success_count == sum(flags)
