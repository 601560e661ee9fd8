"""PDF text extraction."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol, runtime_checkable

import pdfplumber

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


class ExtractionError(Exception):
    """A document could not be read."""


@runtime_checkable
class TextExtractor(Protocol):
    """Protocol for document text extraction backends.

    Implementations return the text of every page joined in page order
    with no separator, and raise ExtractionError when the document
    cannot be read.
    """

    def extract(self, path: Path) -> str: ...


class PdfPlumberExtractor:
    """Extract PDF text with pdfplumber."""

    def extract(self, path: Path) -> str:
        """Return the concatenated text of all pages."""
        try:
            with pdfplumber.open(path) as pdf:
                text = "".join(page.extract_text() or "" for page in pdf.pages)
        except Exception as exc:
            raise ExtractionError(str(exc) or type(exc).__name__) from exc

        logger.debug("Extracted %d characters from %s", len(text), path.name)
        return text
