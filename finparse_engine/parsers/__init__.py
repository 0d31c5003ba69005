"""
Parsers turning raw financial text into structured records.
"""

from .message_parser import (
    MessageTextParser,
    ParsedTransaction,
    TransactionType,
    PaymentMethod,
    sample_messages,
)
from .receipt_parser import (
    ReceiptTextParser,
    ParsedReceipt,
    ReceiptItem,
    ValidationResult,
    ProcessingStatus,
)

__all__ = [
    "MessageTextParser",
    "ParsedTransaction",
    "TransactionType",
    "PaymentMethod",
    "sample_messages",
    "ReceiptTextParser",
    "ParsedReceipt",
    "ReceiptItem",
    "ValidationResult",
    "ProcessingStatus",
]
