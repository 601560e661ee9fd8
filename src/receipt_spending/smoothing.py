"""Moving averages over the monthly spending series."""

from __future__ import annotations

from typing import TYPE_CHECKING

from receipt_spending.models import MovingAverages

if TYPE_CHECKING:
    from collections.abc import Sequence

# Each window starts one month back and reaches this many positions ahead
# (exclusive), i.e. up to 3 and 12 values.
SHORT_WINDOW_AHEAD = 2
LONG_WINDOW_AHEAD = 11


def moving_average(values: Sequence[float], ahead: int) -> list[float]:
    """Average ``values[i-1:i+ahead]`` for every index, clipped at both ends.

    Each average is divided by the number of values actually in its window.
    """
    n = len(values)
    averages = []
    for i in range(n):
        start = max(0, i - 1)
        end = min(n, i + ahead)
        window = values[start:end]
        averages.append(sum(window) / len(window))
    return averages


def moving_averages(values: Sequence[float]) -> MovingAverages:
    """Compute the short (3 month) and long (12 month) series."""
    return MovingAverages(
        short=moving_average(values, SHORT_WINDOW_AHEAD),
        long=moving_average(values, LONG_WINDOW_AHEAD),
    )
