"""
Extraction primitives shared by the message and receipt parsers.
"""

from .strategies import first_match, regex_strategy
from .amounts import parse_amount_string, extract_amount
from .dates import build_date, build_month_name_date, extract_date

__all__ = [
    "first_match",
    "regex_strategy",
    "parse_amount_string",
    "extract_amount",
    "build_date",
    "build_month_name_date",
    "extract_date",
]
