"""Public directory conversion API (delegates to application use-cases)."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable
from typing import Optional

from pdf_batch_converter.application.ports import DocumentConverter
from pdf_batch_converter.application.results import BatchReport
from pdf_batch_converter.application.use_cases import build_batch_options
from pdf_batch_converter.application.use_cases import convert_directory as _convert_directory


def convert_directory(
    source_root: Path,
    output_root: Optional[Path] = None,
    max_concurrency: int = 2,
    sequential: bool = False,
    extension: str = ".pdf",
    suffix: str = "_new",
    converter: Optional[DocumentConverter] = None,
    converter_name: Optional[str] = None,
    converter_modules: Optional[Iterable[str]] = None,
) -> BatchReport:
    """Convert every matching file below ``source_root`` into a mirrored tree."""
    options = build_batch_options(
        max_concurrency=max_concurrency,
        sequential=sequential,
        extension=extension,
        suffix=suffix,
    )
    return _convert_directory(
        source_root=source_root,
        output_root=output_root,
        options=options,
        converter=converter,
        converter_name=converter_name,
        converter_modules=converter_modules,
    )
