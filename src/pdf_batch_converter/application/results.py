"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from pdf_batch_converter.errors import BatchConversionError


@dataclass(frozen=True)
class ConversionOutcome:
    """Result of attempting one single-file conversion.

    Parameters
    ----------
    source_path : Path
        Source document that was attempted.
    succeeded : bool
        ``True`` only if the converter reported success and the output exists.
    elapsed : float
        Wall-clock seconds spent on the item.
    output_path : Path | None, default=None
        Derived destination path, when it could be computed.
    output_size : int | None, default=None
        Size of the produced file in bytes, for successful items.
    error : BatchConversionError | None, default=None
        Classified failure reason for failed items.
    """

    source_path: Path
    succeeded: bool
    elapsed: float
    output_path: Path | None = None
    output_size: int | None = None
    error: BatchConversionError | None = None


@dataclass(frozen=True)
class BatchReport:
    """Aggregate outcome of one batch run."""

    success_count: int
    failure_count: int
    success_files: tuple[Path, ...]
    failed_files: tuple[Path, ...]
    total_elapsed: float
    average_per_file: float
    cumulative_conversion_time: float = 0.0
    outcomes: tuple[ConversionOutcome, ...] = field(default=(), repr=False)
    output_root: Path | None = None

    @property
    def item_count(self) -> int:
        """Number of items attempted."""
        return self.success_count + self.failure_count

    def summary_lines(self) -> list[str]:
        """Render a human-readable batch summary."""
        lines = [
            f"Total: {self.item_count} files",
            f"Succeeded: {self.success_count} files",
            f"Failed: {self.failure_count} files",
            f"Total time: {self.total_elapsed * 1000:.0f}ms",
            f"Average per file: {self.average_per_file * 1000:.0f}ms",
        ]
        if self.output_root is not None:
            lines.append(f"Output directory: {self.output_root}")
        if self.failed_files:
            lines.append("Failed files:")
            lines.extend(f"  - {path}" for path in self.failed_files)
        return lines
