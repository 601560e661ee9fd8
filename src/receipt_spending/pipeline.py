"""Monthly spending report: process, aggregate, report, chart."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from receipt_spending.aggregation import calculate_total, monthly_series
from receipt_spending.chart import CHART_FILENAME, render_chart
from receipt_spending.models import SpendingSummary
from receipt_spending.processor import process_receipts
from receipt_spending.report import write_report
from receipt_spending.smoothing import moving_averages

if TYPE_CHECKING:
    from collections.abc import Sequence

    from receipt_spending.extraction import TextExtractor
    from receipt_spending.models import MovingAverages

logger = logging.getLogger(__name__)


class ChartRenderer(Protocol):
    """Callable with the signature of render_chart."""

    def __call__(
        self,
        labels: Sequence[str],
        bars: Sequence[float],
        overlays: MovingAverages,
        output_path: Path,
    ) -> Path: ...


def run_report(
    receipts_dir: Path,
    output_dir: Path,
    *,
    extractor: TextExtractor | None = None,
    max_workers: int = 1,
    renderer: ChartRenderer | None = None,
) -> SpendingSummary:
    """Run the whole report for ``receipts_dir`` into ``output_dir``.

    Directory and report-write failures propagate. A failing chart is
    logged and leaves ``chart_path`` as None.
    """
    if renderer is None:
        renderer = render_chart
    output_dir = Path(output_dir)

    records = process_receipts(
        Path(receipts_dir), extractor=extractor, max_workers=max_workers
    )
    report_path = write_report(records, output_dir)

    grand_total = calculate_total(records)
    monthly = monthly_series(records)
    averages = moving_averages(monthly.values)

    chart_path: Path | None = None
    try:
        chart_path = renderer(
            monthly.labels, monthly.values, averages, output_dir / CHART_FILENAME
        )
    except Exception:
        logger.exception("Error creating graph")

    return SpendingSummary(
        records=records,
        grand_total=grand_total,
        monthly=monthly,
        averages=averages,
        report_path=report_path,
        chart_path=chart_path,
    )
