"""Domain models for receipt spending reports."""

from __future__ import annotations

import datetime
from dataclasses import dataclass, field
from pathlib import Path

from pydantic import BaseModel, Field, model_validator

DATE_FORMAT = "%Y-%m-%d"


class ReceiptRecord(BaseModel):
    """Outcome of processing a single receipt document.

    ``date`` is the string derived from the filename and is not calendar
    validated; use :meth:`calendar_date` to get a real date. ``error`` is set
    only when text extraction failed, so it never coexists with ``total``.
    """

    filename: str = Field(min_length=1)
    date: str | None = None
    total: float | None = Field(default=None, ge=0)
    error: str | None = None

    @model_validator(mode="after")
    def _total_xor_error(self) -> ReceiptRecord:
        if self.total is not None and self.error is not None:
            msg = "a record cannot carry both a total and an error"
            raise ValueError(msg)
        return self

    def calendar_date(self) -> datetime.date | None:
        """Return the parsed date, or None when absent or not a real date."""
        if self.date is None:
            return None
        try:
            return datetime.datetime.strptime(self.date, DATE_FORMAT).date()
        except ValueError:
            return None


@dataclass(frozen=True)
class MonthlySeries:
    """Month labels (``YYYY-MM``) and summed totals, aligned by position."""

    labels: list[str] = field(default_factory=list)
    values: list[float] = field(default_factory=list)

    @classmethod
    def from_mapping(cls, totals: dict[str, float]) -> MonthlySeries:
        keys = sorted(totals)
        return cls(labels=keys, values=[totals[k] for k in keys])

    def __len__(self) -> int:
        return len(self.labels)


@dataclass(frozen=True)
class MovingAverages:
    """Short and long smoothed series, one value per month."""

    short: list[float] = field(default_factory=list)
    long: list[float] = field(default_factory=list)


@dataclass
class SpendingSummary:
    """Everything produced by one report run."""

    records: list[ReceiptRecord]
    grand_total: float
    monthly: MonthlySeries
    averages: MovingAverages
    report_path: Path
    chart_path: Path | None = None
