"""
Date extraction for receipt text.

Supports day-first and year-first numeric dates and "Month DD, YYYY".
"""

import logging
from datetime import date
from typing import Optional, Pattern, Sequence, Tuple

from ..patterns.extraction_patterns import DATE_PATTERNS, MONTH_PREFIXES
from .strategies import first_match

logger = logging.getLogger(__name__)


def _expand_year(year: str) -> int:
    """Two-digit years are taken as 20YY."""
    if len(year) == 2:
        return 2000 + int(year)
    return int(year)


def build_date(first: str, second: str, third: str) -> Optional[date]:
    """
    Build a date from three numeric parts.

    The order is inferred from the first part: four digits means
    year/month/day, anything else means day/month/year.

    Returns:
        date, or None if the parts do not form a valid calendar date
    """
    try:
        if len(first) == 4:
            return date(int(first), int(second), int(third))
        return date(_expand_year(third), int(second), int(first))
    except ValueError:
        logger.debug(f"Rejected invalid date parts: {first}/{second}/{third}")
        return None


def build_month_name_date(month: str, day: str, year: str) -> Optional[date]:
    """Build a date from a month name (matched by 3-letter prefix), day and year."""
    prefix = month[:3].lower()
    if prefix not in MONTH_PREFIXES:
        return None
    try:
        return date(int(year), MONTH_PREFIXES.index(prefix) + 1, int(day))
    except ValueError:
        logger.debug(f"Rejected invalid date: {month} {day}, {year}")
        return None


def _date_strategy(kind: str, pattern: Pattern):
    builder = build_month_name_date if kind == "month_name" else build_date

    def _strategy(text: str) -> Optional[date]:
        match = pattern.search(text)
        if not match:
            return None
        return builder(*match.groups())

    return _strategy


def extract_date(
    text: str,
    patterns: Sequence[Tuple[str, Pattern]] = DATE_PATTERNS
) -> Optional[date]:
    """
    Extract the first valid date found by an ordered pattern cascade.

    A pattern whose first match is not a real date (e.g. 31/02/2024) is
    skipped and the next pattern is tried.

    Args:
        text: Raw OCR text
        patterns: (kind, compiled pattern) pairs, kind is "numeric" or "month_name"

    Returns:
        date, or None if no pattern yields a valid date
    """
    strategies = [_date_strategy(kind, pattern) for kind, pattern in patterns]
    return first_match(strategies, text)
