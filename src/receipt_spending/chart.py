"""Monthly spending bar chart with moving-average overlays."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from matplotlib.figure import Figure

if TYPE_CHECKING:
    from collections.abc import Sequence

    from receipt_spending.models import MovingAverages

logger = logging.getLogger(__name__)

CHART_FILENAME = "monthly_spending.png"

WIDTH_PX = 1000
HEIGHT_PX = 600
DPI = 100
LABEL_EVERY = 6
SHORT_COLOR = "red"
LONG_COLOR = "green"


def bar_color(value: float, max_value: float) -> tuple[float, float, float]:
    """Return an RGB colour from light blue (small) to dark blue (largest)."""
    intensity = min(value / max_value, 1.0) if max_value > 0 else 0.0
    green = round(150 * (1 - intensity))
    blue = round(255 - 100 * intensity)
    return (0.0, green / 255, blue / 255)


def tick_labels(labels: Sequence[str]) -> list[str]:
    """Keep every sixth label and blank the rest to avoid crowding."""
    return [label if i % LABEL_EVERY == 0 else "" for i, label in enumerate(labels)]


def render_chart(
    labels: Sequence[str],
    bars: Sequence[float],
    overlays: MovingAverages,
    output_path: Path,
) -> Path:
    """Draw the chart as a PNG at ``output_path`` and return the path."""
    checked = (
        ("labels", labels),
        ("short averages", overlays.short),
        ("long averages", overlays.long),
    )
    for name, series in checked:
        if len(series) != len(bars):
            msg = f"got {len(series)} {name} for {len(bars)} bars"
            raise ValueError(msg)

    max_value = max(bars, default=0.0)
    fig = Figure(figsize=(WIDTH_PX / DPI, HEIGHT_PX / DPI), dpi=DPI)
    ax = fig.subplots()
    ax.bar(
        range(len(bars)),
        bars,
        width=1.0,
        align="edge",
        color=[bar_color(v, max_value) for v in bars],
    )
    ax.plot(range(len(overlays.short)), overlays.short, color=SHORT_COLOR)
    ax.plot(range(len(overlays.long)), overlays.long, color=LONG_COLOR)

    ax.set_title("Monthly Spending", fontsize=20)
    ax.set_xlabel("Month")
    ax.set_ylabel("Amount (€)")
    ax.set_xlim(0, max(len(bars), 1))
    ax.set_ylim(0, max_value * 1.1 if max_value > 0 else 1.0)
    ax.set_xticks(range(len(labels)))
    ax.set_xticklabels(tick_labels(labels))
    ax.grid(axis="y", color="white", alpha=0.3)

    output_path = Path(output_path)
    fig.savefig(output_path, dpi=DPI)

    logger.info("Chart saved to %s", output_path)
    return output_path
