"""Recursive discovery of source documents."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from pdf_batch_converter.application.paths import absolute_path
from pdf_batch_converter.errors import DirectoryAccessError, RootNotFoundError
from pdf_batch_converter.types import PathLike

logger = logging.getLogger(__name__)


def normalize_extension(extension: str) -> str:
    """Return ``extension`` lower-cased with a single leading dot."""
    cleaned = extension.strip().lower()
    if not cleaned.startswith("."):
        cleaned = f".{cleaned}"
    return cleaned


def discover(
    root: PathLike,
    extension: str = ".pdf",
    exclude: Iterable[PathLike] = (),
) -> list[Path]:
    """Recursively collect files ending with ``extension`` below ``root``.

    Directories are walked depth-first in pre-order using an explicit stack.
    A directory that cannot be read is logged and its subtree skipped; the
    rest of the scan continues.

    Parameters
    ----------
    root : PathLike
        Directory to scan.
    extension : str, default=".pdf"
        Case-insensitive filename suffix to match.
    exclude : Iterable[PathLike], default=()
        Directories whose subtrees are not scanned.

    Returns
    -------
    list[Path]
        Absolute paths of matching files.

    Raises
    ------
    RootNotFoundError
        If ``root`` does not exist or is not a directory.
    """
    root_path = absolute_path(root)
    if not root_path.is_dir():
        raise RootNotFoundError(root_path)

    wanted = normalize_extension(extension)
    excluded = {absolute_path(path) for path in exclude}
    found: list[Path] = []
    stack = [root_path]
    while stack:
        directory = stack.pop()
        try:
            files, subdirectories = _scan_directory(directory, wanted)
        except OSError as exc:
            error = DirectoryAccessError(directory, exc.strerror or str(exc))
            logger.warning("%s; skipping subtree", error)
            continue
        found.extend(files)
        stack.extend(
            reversed([path for path in subdirectories if path not in excluded])
        )
    return found


def _scan_directory(directory: Path, extension: str) -> tuple[list[Path], list[Path]]:
    files: list[Path] = []
    subdirectories: list[Path] = []
    with os.scandir(directory) as entries:
        for entry in sorted(entries, key=lambda item: item.name):
            # Symlinked directories are not followed to avoid cycles.
            if entry.is_dir(follow_symlinks=False):
                subdirectories.append(Path(entry.path))
            elif entry.is_file() and entry.name.lower().endswith(extension):
                files.append(Path(entry.path))
    return files, subdirectories


class RecursiveFileDiscoverer:
    """Default ``FileDiscoverer`` backed by :func:`discover`."""

    def discover(
        self,
        root: Path,
        extension: str,
        exclude: Iterable[Path] = (),
    ) -> list[Path]:
        """Return absolute paths of matching files below ``root``."""
        return discover(root, extension, exclude=exclude)
