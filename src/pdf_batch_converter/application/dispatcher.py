"""Bounded-concurrency dispatch of single-file conversions.

Conversions run on a ``ThreadPoolExecutor`` whose size is the concurrency
bound, so no more than ``max_concurrency`` converter calls are ever in
flight. Outcomes are folded into a :class:`ResultAggregator` by the calling
thread as futures complete. In-flight conversions are never cancelled; a
converter call that hangs holds its pool slot until it returns.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from pathlib import Path

from pdf_batch_converter.application.aggregator import ResultAggregator
from pdf_batch_converter.application.options import DEFAULT_SUFFIX
from pdf_batch_converter.application.paths import (
    absolute_path,
    display_path,
    ensure_directory,
    output_path_for,
)
from pdf_batch_converter.application.ports import DocumentConverter
from pdf_batch_converter.application.results import BatchReport, ConversionOutcome
from pdf_batch_converter.errors import (
    BatchConversionError,
    ConversionError,
    SourceMissingError,
)
from pdf_batch_converter.types import PathLike

logger = logging.getLogger(__name__)


class ConversionDispatcher:
    """Convert many files into a mirrored output tree.

    Parameters
    ----------
    converter : DocumentConverter
        Single-file converter invoked once per source path.
    output_root : PathLike
        Root of the mirrored output tree; created if absent.
    suffix : str, default="_new"
        Token inserted into every output filename stem.

    Notes
    -----
    The dispatcher keeps no outcome state between runs and may be reused.
    """

    def __init__(
        self,
        converter: DocumentConverter,
        output_root: PathLike,
        *,
        suffix: str = DEFAULT_SUFFIX,
    ) -> None:
        self._converter = converter
        self.output_root = absolute_path(output_root)
        self.suffix = suffix
        ensure_directory(self.output_root)

    def convert_one(self, source_path: PathLike, source_root: PathLike) -> ConversionOutcome:
        """Convert one file, capturing any per-item failure in the outcome."""
        source = absolute_path(source_path)
        started = time.perf_counter()
        output_path: Path | None = None
        try:
            self._check_source(source)
            output_path = self._output_path(source, source_root)
            logger.info(
                "Converting %s -> %s",
                display_path(source, source_root),
                display_path(output_path, self.output_root),
            )
            output_size = self._invoke(source, output_path)
        except BatchConversionError as exc:
            elapsed = time.perf_counter() - started
            logger.warning(
                "✗ %s failed after %.0fms: %s: %s",
                source,
                elapsed * 1000,
                type(exc).__name__,
                exc,
            )
            return ConversionOutcome(
                source_path=source,
                succeeded=False,
                elapsed=elapsed,
                output_path=output_path,
                error=exc,
            )

        elapsed = time.perf_counter() - started
        logger.info(
            "✓ %s converted in %.0fms (%s bytes)",
            display_path(source, source_root),
            elapsed * 1000,
            f"{output_size:,}",
        )
        return ConversionOutcome(
            source_path=source,
            succeeded=True,
            elapsed=elapsed,
            output_path=output_path,
            output_size=output_size,
        )

    def run_sequential(
        self,
        source_paths: Iterable[PathLike],
        source_root: PathLike,
    ) -> BatchReport:
        """Convert files one at a time in input order."""
        paths = list(source_paths)
        logger.info("Starting sequential batch of %d files", len(paths))
        aggregator = ResultAggregator(output_root=self.output_root)
        started = time.perf_counter()
        for path in paths:
            try:
                outcome = self.convert_one(path, source_root)
            except Exception as exc:
                outcome = self._unexpected_failure(path, exc)
            aggregator.add(outcome)
        return self._finish(aggregator, started)

    def run_parallel(
        self,
        source_paths: Iterable[PathLike],
        source_root: PathLike,
        max_concurrency: int,
    ) -> BatchReport:
        """Convert files with at most ``max_concurrency`` conversions in flight.

        Values of ``max_concurrency`` below 1 are treated as 1. Completion
        order, and therefore the order of the report's path lists, is
        unspecified.
        """
        workers = max(1, max_concurrency)
        paths = list(source_paths)
        logger.info(
            "Starting parallel batch of %d files (concurrency=%d, output=%s)",
            len(paths),
            workers,
            self.output_root,
        )
        aggregator = ResultAggregator(output_root=self.output_root)
        started = time.perf_counter()
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="convert") as pool:
            futures: dict[Future[ConversionOutcome], PathLike] = {
                pool.submit(self.convert_one, path, source_root): path for path in paths
            }
            for future in as_completed(futures):
                aggregator.add(self._collect(future, futures[future]))
        return self._finish(aggregator, started)

    @staticmethod
    def _check_source(source: Path) -> None:
        try:
            exists = source.is_file()
        except OSError as exc:
            raise ConversionError(f"Cannot access source file: {exc}") from exc
        if not exists:
            raise SourceMissingError(source)

    def _output_path(self, source: Path, source_root: PathLike) -> Path:
        try:
            return output_path_for(source, source_root, self.output_root, suffix=self.suffix)
        except OSError as exc:
            raise ConversionError(f"Cannot create output directory: {exc}") from exc

    def _invoke(self, source: Path, destination: Path) -> int:
        try:
            reported = self._converter.convert(source, destination)
        except Exception as exc:
            raise ConversionError(f"{type(exc).__name__}: {exc}") from exc
        if not reported:
            raise ConversionError("Converter reported failure.")
        try:
            return destination.stat().st_size
        except FileNotFoundError as exc:
            raise ConversionError(
                f"Converter reported success but produced no file at {destination}."
            ) from exc
        except OSError as exc:
            raise ConversionError(f"Cannot read converted file: {exc}") from exc

    @staticmethod
    def _collect(future: Future[ConversionOutcome], path: PathLike) -> ConversionOutcome:
        try:
            return future.result()
        except Exception as exc:
            return ConversionDispatcher._unexpected_failure(path, exc)

    @staticmethod
    def _unexpected_failure(path: PathLike, exc: Exception) -> ConversionOutcome:
        logger.exception("unexpected error while converting %s", path)
        return ConversionOutcome(
            source_path=absolute_path(path),
            succeeded=False,
            elapsed=0.0,
            error=ConversionError(f"{type(exc).__name__}: {exc}"),
        )

    def _finish(self, aggregator: ResultAggregator, started: float) -> BatchReport:
        report = aggregator.report(total_elapsed=time.perf_counter() - started)
        logger.info(
            "Batch finished: %d total, %d succeeded, %d failed in %.0fms (%.0fms per file)",
            report.item_count,
            report.success_count,
            report.failure_count,
            report.total_elapsed * 1000,
            report.average_per_file * 1000,
        )
        return report
