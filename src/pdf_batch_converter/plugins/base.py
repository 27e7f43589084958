"""Plugin protocol for single-file document converters."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class ConverterPlugin(Protocol):
    """Protocol implemented by converter plugins.

    A plugin is also a ``DocumentConverter`` and is handed directly to the
    dispatcher once resolved.
    """

    name: str

    def can_handle(self, extension: str) -> bool:
        """Check whether plugin converts files with the given extension.

        Parameters
        ----------
        extension : str
            Lower-case extension with a leading dot, e.g. ``".pdf"``.

        Returns
        -------
        bool
            ``True`` if plugin can convert such files.
        """

    def convert(self, source_path: Path, destination_path: Path) -> bool:
        """Convert one source file into ``destination_path``.

        Parameters
        ----------
        source_path : Path
            Existing source document.
        destination_path : Path
            Output location; its parent directory already exists.

        Returns
        -------
        bool
            ``True`` if conversion succeeded.
        """
