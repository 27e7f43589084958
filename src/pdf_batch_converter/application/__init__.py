"""Application-layer use-cases and option objects."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from pdf_batch_converter.application.options import BatchOptions, NamingOptions
from pdf_batch_converter.application.ports import DocumentConverter, FileDiscoverer
from pdf_batch_converter.application.results import BatchReport, ConversionOutcome


def build_batch_options(
    *,
    max_concurrency: int = 2,
    sequential: bool = False,
    extension: str = ".pdf",
    suffix: str = "_new",
) -> BatchOptions:
    """Build typed batch options via lazy use-case import."""
    from pdf_batch_converter.application.use_cases import build_batch_options as _impl

    return _impl(
        max_concurrency=max_concurrency,
        sequential=sequential,
        extension=extension,
        suffix=suffix,
    )


def convert_directory(
    *,
    source_root: Path,
    output_root: Path | None,
    options: BatchOptions,
    converter: DocumentConverter | None = None,
    converter_name: str | None = None,
    converter_modules: Iterable[str] | None = None,
    discoverer: FileDiscoverer | None = None,
) -> BatchReport:
    """Convert a directory tree via lazy use-case import."""
    from pdf_batch_converter.application.use_cases import convert_directory as _impl

    return _impl(
        source_root=source_root,
        output_root=output_root,
        options=options,
        converter=converter,
        converter_name=converter_name,
        converter_modules=converter_modules,
        discoverer=discoverer,
    )


__all__ = [
    "BatchOptions",
    "BatchReport",
    "ConversionOutcome",
    "NamingOptions",
    "build_batch_options",
    "convert_directory",
]
