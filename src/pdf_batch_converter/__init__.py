"""Top-level API for mirrored batch document conversion."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING

from pdf_batch_converter.types import PathLike

if TYPE_CHECKING:
    from pdf_batch_converter.application.results import BatchReport

__version__ = "0.1.0"


def convert_directory(
    source_root: Path,
    output_root: Path | None = None,
    *,
    max_concurrency: int = 2,
    sequential: bool = False,
    extension: str = ".pdf",
    suffix: str = "_new",
    converter_name: str | None = None,
    converter_modules: Iterable[str] | None = None,
) -> BatchReport:
    """Convert every matching file below ``source_root``.

    Parameters
    ----------
    source_root : Path
        Directory scanned recursively for source files.
    output_root : Path | None, default=None
        Root of the mirrored output tree. Defaults to
        ``source_root / "pdf_output"``.
    max_concurrency : int, default=2
        Maximum number of conversions in flight.
    sequential : bool, default=False
        Convert one file at a time in discovery order.
    extension : str, default=".pdf"
        Extension of the files to convert.
    suffix : str, default="_new"
        Token inserted into output filename stems.
    converter_name : str, optional
        Explicit converter plugin name.
    converter_modules : Iterable[str], optional
        Extra plugin modules or file paths to load.

    Returns
    -------
    BatchReport
        Counts, succeeded/failed paths and timings.
    """
    from .api import convert_directory as _impl

    return _impl(
        source_root=source_root,
        output_root=output_root,
        max_concurrency=max_concurrency,
        sequential=sequential,
        extension=extension,
        suffix=suffix,
        converter_name=converter_name,
        converter_modules=converter_modules,
    )


def discover_files(root: PathLike, extension: str = ".pdf") -> list[Path]:
    """Recursively list files with ``extension`` below ``root``."""
    from .application.discovery import discover as _impl

    return _impl(root, extension)


def output_path_for(
    source_path: PathLike,
    source_root: PathLike,
    output_root: PathLike,
    suffix: str = "_new",
) -> Path:
    """Derive (and prepare) the mirrored output path for one source file."""
    from .application.paths import output_path_for as _impl

    return _impl(source_path, source_root, output_root, suffix=suffix)


__all__ = [
    "convert_directory",
    "discover_files",
    "output_path_for",
]
