"""Filename date and receipt total parsing."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)

# e.g. Fatura_Cartao_Continente_20181223_1509.pdf -> 2018-12-23
_FILENAME_DATE_RE = re.compile(r"_(\d{4})(\d{2})(\d{2})_\d{4}\.pdf")


def parse_filename_date(filename: str) -> str | None:
    """Return ``YYYY-MM-DD`` from a ``*_YYYYMMDD_NNNN.pdf`` filename.

    The captured digits are used verbatim, so ``_20241340_0001.pdf`` yields
    ``"2024-13-40"``. Calendar validation happens when records are bucketed.
    """
    match = _FILENAME_DATE_RE.search(filename)
    if match is None:
        return None
    year, month, day = match.groups()
    return f"{year}-{month}-{day}"


@runtime_checkable
class TotalMatcher(Protocol):
    """Strategy that finds a receipt total in extracted text."""

    def match(self, text: str) -> float | None: ...


class RegexTotalMatcher:
    """Find a total with a regex whose first group captures the amount.

    Only the first match in document order is used. ``decimal_sep`` is
    replaced by a period before the amount is converted to float.
    """

    def __init__(self, pattern: str | re.Pattern[str], decimal_sep: str = ",") -> None:
        if isinstance(pattern, str):
            pattern = re.compile(pattern, re.IGNORECASE)
        if pattern.groups < 1:
            msg = f"total pattern {pattern.pattern!r} needs a group capturing the amount"
            raise ValueError(msg)
        self.pattern = pattern
        self.decimal_sep = decimal_sep

    def match(self, text: str) -> float | None:
        found = self.pattern.search(text)
        if found is None:
            return None

        raw_amount = found.group(1)
        if raw_amount is None:
            return None
        try:
            amount = float(raw_amount.replace(self.decimal_sep, "."))
        except ValueError:
            logger.debug("Matched %r but could not parse %r", found.group(0), raw_amount)
            return None

        logger.debug("Matched %r -> %s", found.group(0), amount)
        return amount

    def __repr__(self) -> str:
        return f"RegexTotalMatcher({self.pattern.pattern!r})"


TOTAL_A_PAGAR = RegexTotalMatcher(r"TOTAL A PAGAR\s*\$?(\d+,\d{2})")

DEFAULT_TOTAL_MATCHERS: tuple[TotalMatcher, ...] = (TOTAL_A_PAGAR,)


def parse_total(
    text: str, matchers: Sequence[TotalMatcher] | None = None
) -> float | None:
    """Return the first total found by the ordered matchers, or None."""
    if matchers is None:
        matchers = DEFAULT_TOTAL_MATCHERS

    for matcher in matchers:
        total = matcher.match(text)
        if total is not None:
            return total
    return None
