"""Error taxonomy for batch document conversion."""

from __future__ import annotations

from pathlib import Path


class BatchConversionError(Exception):
    """Base class for all batch conversion errors.

    Attributes
    ----------
    exit_code : int
        Process exit code used by the CLI when the error is fatal.
    """

    exit_code = 1


class RootNotFoundError(BatchConversionError):
    """Source root is missing or is not a directory."""

    exit_code = 2

    def __init__(self, root: Path) -> None:
        super().__init__(f"Source directory does not exist: {root}")
        self.root = root


class InvalidConfigurationError(BatchConversionError):
    """Batch run parameters failed validation."""

    exit_code = 2


class PluginError(BatchConversionError):
    """Converter plugin could not be loaded or resolved."""

    exit_code = 3


class DirectoryAccessError(BatchConversionError):
    """A directory could not be read during discovery."""

    def __init__(self, directory: Path, reason: str) -> None:
        super().__init__(f"Cannot read directory {directory}: {reason}")
        self.directory = directory


class PathResolutionError(BatchConversionError):
    """A path is not lexically contained under the claimed root."""

    def __init__(self, path: Path, root: Path) -> None:
        super().__init__(f"{path} is not located under {root}")
        self.path = path
        self.root = root


class SourceMissingError(BatchConversionError):
    """A source file disappeared between discovery and conversion."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Source file does not exist: {path}")
        self.path = path


class ConversionError(BatchConversionError):
    """The single-file converter failed or produced no output."""


__all__ = [
    "BatchConversionError",
    "ConversionError",
    "DirectoryAccessError",
    "InvalidConfigurationError",
    "PathResolutionError",
    "PluginError",
    "RootNotFoundError",
    "SourceMissingError",
]
