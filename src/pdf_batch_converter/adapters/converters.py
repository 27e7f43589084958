"""Single-file document converters implementing application ports."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from pypdf import PdfReader, PdfWriter

logger = logging.getLogger(__name__)


class PypdfRewriteConverter:
    """Re-render a PDF into a fresh file with pypdf.

    Every page and the document information dictionary are copied into a
    new writer. Output goes to a temporary file next to the destination and
    is renamed into place, so the destination is either complete or absent.

    Parameters
    ----------
    password : str, default=""
        Password tried when the source is encrypted.
    """

    def __init__(self, password: str = "") -> None:
        self.password = password

    def convert(self, source_path: Path, destination_path: Path) -> bool:
        """Rewrite ``source_path`` into ``destination_path``.

        Returns
        -------
        bool
            ``False`` when an encrypted source cannot be opened, otherwise ``True``.

        Raises
        ------
        pypdf.errors.PyPdfError
            If the source cannot be parsed.
        OSError
            If the source cannot be read or the destination cannot be written.
        """
        reader = PdfReader(source_path)
        if reader.is_encrypted and not reader.decrypt(self.password):
            logger.warning("Cannot decrypt %s", source_path)
            return False

        writer = PdfWriter()
        for page in reader.pages:
            writer.add_page(page)
        if reader.metadata:
            writer.add_metadata(reader.metadata)

        destination = Path(destination_path)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{destination.stem}-", suffix=".part", dir=destination.parent
        )
        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "wb") as handle:
                writer.write(handle)
            os.replace(tmp_path, destination)
        finally:
            tmp_path.unlink(missing_ok=True)
        logger.debug("Wrote %d pages to %s", len(reader.pages), destination)
        return True
