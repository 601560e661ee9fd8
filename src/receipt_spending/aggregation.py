"""Monthly aggregation of receipt totals."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from receipt_spending.models import MonthlySeries

if TYPE_CHECKING:
    from collections.abc import Iterable

    from receipt_spending.models import ReceiptRecord

logger = logging.getLogger(__name__)


def calculate_total(records: Iterable[ReceiptRecord]) -> float:
    """Sum every present total, whether or not the record has a date."""
    return sum((r.total for r in records if r.total is not None), 0.0)


def aggregate_monthly(records: Iterable[ReceiptRecord]) -> dict[str, float]:
    """Sum totals per ``YYYY-MM`` month, in ascending month order.

    Records without a total, without a date, or whose date is not a real
    calendar date are left out entirely.
    """
    totals: dict[str, float] = {}
    for record in records:
        if record.total is None or record.date is None:
            continue
        day = record.calendar_date()
        if day is None:
            logger.debug("Skipping %s: invalid date %r", record.filename, record.date)
            continue
        key = f"{day.year:04d}-{day.month:02d}"
        totals[key] = totals.get(key, 0.0) + record.total

    return {key: totals[key] for key in sorted(totals)}


def monthly_series(records: Iterable[ReceiptRecord]) -> MonthlySeries:
    """Return the monthly totals as aligned label and value lists."""
    return MonthlySeries.from_mapping(aggregate_monthly(records))
