"""Built-in converter plugins."""

from __future__ import annotations

from pathlib import Path

from pdf_batch_converter.adapters.converters import PypdfRewriteConverter


class PypdfRewritePlugin:
    """Rewrite PDF files page by page with pypdf."""

    name = "pypdf_rewrite"

    def __init__(self, converter: PypdfRewriteConverter | None = None) -> None:
        self._converter = converter or PypdfRewriteConverter()

    def can_handle(self, extension: str) -> bool:
        """Return ``True`` for ``.pdf`` sources."""
        return extension.lower() == ".pdf"

    def convert(self, source_path: Path, destination_path: Path) -> bool:
        """Delegate to :class:`PypdfRewriteConverter`."""
        return self._converter.convert(source_path, destination_path)
