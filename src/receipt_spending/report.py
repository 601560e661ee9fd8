"""JSON result report."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import TypeAdapter

from receipt_spending.models import ReceiptRecord

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)

REPORT_FILENAME = "results.json"

_records_adapter = TypeAdapter(list[ReceiptRecord])


class ReportWriteError(Exception):
    """The result report could not be written."""


def write_report(records: Sequence[ReceiptRecord], output_dir: Path) -> Path:
    """Write ``records`` to ``<output_dir>/results.json`` and return its path.

    Absent fields are written as null. Creates ``output_dir`` if needed.
    """
    path = Path(output_dir) / REPORT_FILENAME
    try:
        payload = _records_adapter.dump_json(list(records), indent=2)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(payload)
    except (OSError, ValueError) as exc:
        msg = f"Failed to write report to {path}: {exc}"
        raise ReportWriteError(msg) from exc

    logger.info("Results written to %s", path)
    return path


def load_report(path: Path) -> list[ReceiptRecord]:
    """Read a report written by write_report back into records."""
    return _records_adapter.validate_json(Path(path).read_bytes())
