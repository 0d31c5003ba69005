"""
Amount extraction shared by the message and receipt parsers.
"""

import logging
from typing import Optional, Pattern, Sequence

from .strategies import first_match, regex_strategy

logger = logging.getLogger(__name__)


def parse_amount_string(value: str) -> Optional[float]:
    """
    Parse a captured amount, dropping thousands separators.

    Args:
        value: Captured number such as "1,200.00"

    Returns:
        Positive float, or None for zero/unparseable values

    Example:
        >>> parse_amount_string("12,500")
        12500.0
    """
    cleaned = value.replace(",", "").strip()
    if not cleaned:
        return None
    try:
        amount = float(cleaned)
    except ValueError:
        logger.warning(f"Could not parse amount: {value}")
        return None
    if amount > 0:
        return amount
    return None


def extract_amount(text: str, patterns: Sequence[Pattern]) -> Optional[float]:
    """
    Extract the first positive amount found by an ordered pattern cascade.

    Args:
        text: Raw message or OCR text
        patterns: Compiled patterns whose first group captures the number

    Returns:
        Amount as float, or None if no pattern yields a positive number
    """
    strategies = [regex_strategy(pattern, parse_amount_string) for pattern in patterns]
    return first_match(strategies, text)
