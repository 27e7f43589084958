"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Protocol


class DocumentConverter(Protocol):
    """Convert one source document into one destination file.

    Implementations must be safe to call concurrently with distinct
    destination paths, and must either fully write the destination or
    leave it absent.
    """

    def convert(self, source_path: Path, destination_path: Path) -> bool:
        """Convert ``source_path`` into ``destination_path``; return success."""


class FileDiscoverer(Protocol):
    """Enumerate source documents beneath a root directory."""

    def discover(
        self,
        root: Path,
        extension: str,
        exclude: Iterable[Path] = (),
    ) -> list[Path]:
        """Return absolute paths of matching files."""
