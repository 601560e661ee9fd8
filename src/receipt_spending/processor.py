"""Turn a directory of receipt PDFs into ReceiptRecords."""

from __future__ import annotations

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING

from receipt_spending.extraction import ExtractionError, PdfPlumberExtractor
from receipt_spending.models import ReceiptRecord
from receipt_spending.parsing import parse_filename_date, parse_total

if TYPE_CHECKING:
    from pathlib import Path

    from receipt_spending.extraction import TextExtractor

logger = logging.getLogger(__name__)

PDF_SUFFIX = ".pdf"


class ReceiptDirectoryError(Exception):
    """The receipts directory could not be listed."""


def process_receipt(path: Path, extractor: TextExtractor) -> ReceiptRecord:
    """Build the record for a single document.

    The date comes from the filename alone, so it is kept even when the
    document itself cannot be read. Undecodable bytes in the name are
    replaced with U+FFFD.
    """
    filename = os.fsencode(path.name).decode("utf-8", "replace")
    logger.info("Processing file: %s", filename)
    date = parse_filename_date(filename)

    try:
        text = extractor.extract(path)
    except ExtractionError as exc:
        logger.warning("Failed to extract text from %s: %s", filename, exc)
        return ReceiptRecord(filename=filename, date=date, error=str(exc))

    total = parse_total(text)
    if total is None:
        logger.info("No total found in %s", filename)
    return ReceiptRecord(filename=filename, date=date, total=total)


def list_receipts(directory: Path) -> list[Path]:
    """Return the PDF files in ``directory`` sorted by name.

    The suffix match is case-sensitive; anything else is skipped.
    """
    try:
        entries = list(directory.iterdir())
    except OSError as exc:
        msg = f"Cannot read receipts directory {directory}: {exc}"
        raise ReceiptDirectoryError(msg) from exc

    return sorted(
        (p for p in entries if p.name.endswith(PDF_SUFFIX) and p.is_file()),
        key=lambda p: p.name,
    )


def process_receipts(
    directory: Path,
    *,
    extractor: TextExtractor | None = None,
    max_workers: int = 1,
) -> list[ReceiptRecord]:
    """Process every receipt in ``directory``.

    With ``max_workers`` above 1 documents are extracted on a thread pool;
    results always come back in filename order.
    """
    if extractor is None:
        extractor = PdfPlumberExtractor()

    paths = list_receipts(directory)
    logger.info("Found %d receipts in %s", len(paths), directory)

    if max_workers <= 1 or len(paths) <= 1:
        return [process_receipt(p, extractor) for p in paths]

    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        return list(pool.map(lambda p: process_receipt(p, extractor), paths))
