"""
Pattern Definitions for the financial text engine.

Contains all keyword and regex patterns for:
- Category rule tables (SMS merchants, receipt businesses, general titles)
- Field extraction (amounts, merchants, dates, line items)
- Message gating (financial keywords, debit/credit direction, payment method)
"""

from .category_patterns import (
    SMS_CATEGORY_PATTERNS,
    RECEIPT_CATEGORY_PATTERNS,
    GENERAL_CATEGORY_PATTERNS,
)
from .extraction_patterns import (
    FINANCIAL_KEYWORDS,
    DEBIT_KEYWORDS,
    CREDIT_KEYWORDS,
    PAYMENT_METHOD_KEYWORDS,
    MESSAGE_AMOUNT_PATTERNS,
    MERCHANT_PATTERNS,
    RECEIPT_AMOUNT_PATTERNS,
    RECEIPT_MERCHANT_EXCLUSIONS,
    RECEIPT_ITEM_EXCLUSIONS,
    ITEM_LINE_PATTERN,
    DATE_PATTERNS,
)

__all__ = [
    "SMS_CATEGORY_PATTERNS",
    "RECEIPT_CATEGORY_PATTERNS",
    "GENERAL_CATEGORY_PATTERNS",
    "FINANCIAL_KEYWORDS",
    "DEBIT_KEYWORDS",
    "CREDIT_KEYWORDS",
    "PAYMENT_METHOD_KEYWORDS",
    "MESSAGE_AMOUNT_PATTERNS",
    "MERCHANT_PATTERNS",
    "RECEIPT_AMOUNT_PATTERNS",
    "RECEIPT_MERCHANT_EXCLUSIONS",
    "RECEIPT_ITEM_EXCLUSIONS",
    "ITEM_LINE_PATTERN",
    "DATE_PATTERNS",
]
