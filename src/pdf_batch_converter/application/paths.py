"""Source-to-output path mapping that mirrors the source directory tree."""

from __future__ import annotations

import os
from pathlib import Path

from pdf_batch_converter.application.options import DEFAULT_SUFFIX
from pdf_batch_converter.errors import PathResolutionError
from pdf_batch_converter.types import PathLike


def absolute_path(path: PathLike) -> Path:
    """Return a normalized absolute path without resolving symlinks."""
    return Path(os.path.abspath(os.fspath(path)))


def relative_path(full_path: PathLike, base_path: PathLike) -> Path:
    """Compute ``full_path`` relative to ``base_path``.

    Parameters
    ----------
    full_path : PathLike
        Path to express relative to ``base_path``.
    base_path : PathLike
        Root directory.

    Returns
    -------
    Path
        Relative path in native form (``Path(".")`` when both are equal).

    Raises
    ------
    PathResolutionError
        If ``full_path`` is not lexically contained under ``base_path``.
    """
    full = absolute_path(full_path)
    base = absolute_path(base_path)
    try:
        return full.relative_to(base)
    except ValueError as exc:
        raise PathResolutionError(full, base) from exc


def apply_suffix(filename: str, suffix: str = DEFAULT_SUFFIX) -> str:
    """Insert ``suffix`` before the extension unless the stem already ends with it.

    Examples
    --------
    >>> apply_suffix("report.pdf")
    'report_new.pdf'
    >>> apply_suffix("report_new.pdf")
    'report_new.pdf'
    """
    name = Path(filename)
    stem, extension = name.stem, name.suffix
    if stem.endswith(suffix):
        return filename
    return f"{stem}{suffix}{extension}"


def ensure_directory(directory: Path) -> None:
    """Create ``directory`` and its parents; an existing directory is fine."""
    directory.mkdir(parents=True, exist_ok=True)


def output_path_for(
    source_path: PathLike,
    source_root: PathLike,
    output_root: PathLike,
    suffix: str = DEFAULT_SUFFIX,
) -> Path:
    """Derive the destination path for ``source_path`` under ``output_root``.

    The relative directory structure below ``source_root`` is preserved and
    the filename stem receives ``suffix`` at most once. The destination's
    parent directory exists when this function returns.

    Raises
    ------
    PathResolutionError
        If ``source_path`` is not a file path below ``source_root``.
    """
    relative = relative_path(source_path, source_root)
    if not relative.parts:
        raise PathResolutionError(absolute_path(source_path), absolute_path(source_root))
    destination = absolute_path(output_root) / relative
    destination = destination.with_name(apply_suffix(destination.name, suffix))
    ensure_directory(destination.parent)
    return destination


def display_path(path: PathLike, root: PathLike) -> str:
    """Render ``path`` relative to ``root`` for log output, when possible."""
    try:
        return str(relative_path(path, root))
    except PathResolutionError:
        return str(path)
