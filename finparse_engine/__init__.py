"""
FinParse Engine - Financial text parsing and auto-categorization.

Turns unstructured SMS/UPI notifications and receipt OCR text into
structured transaction records, and maps free text onto a fixed spending
category taxonomy.

Main Components:
    - patterns: Category rule tables and extraction regexes
    - config: Parser configuration and category taxonomy
    - categorisation: Keyword/regex category classifier
    - extraction: Shared amount and date extraction primitives
    - parsers: Message and receipt parsers
"""

from typing import Dict, List, Optional

# Categorisation
from .categorisation.engine import (
    CategoryClassifier,
    CategoryMatch,
    CategoryRule,
    CategoryRuleSet,
    CategorySuggestion,
    SMS_RULES,
    RECEIPT_RULES,
    GENERAL_RULES,
    classify,
    suggest,
)

# Parsers
from .parsers.message_parser import (
    MessageTextParser,
    ParsedTransaction,
    TransactionType,
    PaymentMethod,
    sample_messages,
)
from .parsers.receipt_parser import (
    ReceiptTextParser,
    ParsedReceipt,
    ReceiptItem,
    ValidationResult,
    ProcessingStatus,
)

# Configuration
from .config.parser_config import (
    PARSER_CONFIG,
    CATEGORY_TAXONOMY,
    DEFAULT_CATEGORY,
)
from .config.rules_loader import load_category_rules_csv


__version__ = "1.0.0"
__all__ = [
    # Categorisation
    "CategoryClassifier",
    "CategoryMatch",
    "CategoryRule",
    "CategoryRuleSet",
    "CategorySuggestion",
    "SMS_RULES",
    "RECEIPT_RULES",
    "GENERAL_RULES",
    "classify",
    "suggest",
    # Parsers
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
    # Configuration
    "PARSER_CONFIG",
    "CATEGORY_TAXONOMY",
    "DEFAULT_CATEGORY",
    "load_category_rules_csv",
    # Main functions
    "parse_sms_messages",
    "process_receipt_text",
]


def parse_sms_messages(messages: List[str]) -> Dict:
    """
    Parse a batch of pasted SMS/UPI notifications.

    Args:
        messages: Raw message strings, in the order they were received

    Returns:
        Dictionary containing:
            - count: Number of transactions found
            - transactions: List of transaction dicts (input order kept)

    Example:
        >>> result = parse_sms_messages([
        ...     "Rs.450 debited from your account to ZOMATO on 15-Dec-23.",
        ...     "Your OTP is 123456",
        ... ])
        >>> result["count"]
        1
        >>> result["transactions"][0]["category"]
        'Food'
    """
    parser = MessageTextParser()
    transactions = parser.parse_multiple(messages)
    return {
        "count": len(transactions),
        "transactions": [txn.to_dict() for txn in transactions],
    }


def process_receipt_text(raw_text: Optional[str]) -> Dict:
    """
    Parse receipt OCR text and check it for fields needing manual correction.

    Args:
        raw_text: Text recognized from a receipt image

    Returns:
        Dictionary containing:
            - success: False only if extraction failed unexpectedly
            - status: "completed" or "failed"
            - extractedData: Receipt fields (merchant, amount, date, items, category)
            - rawText: The OCR text that was parsed
            - isValid / errors: Result of the validation check
            - error: Failure message, if any
    """
    parser = ReceiptTextParser()
    receipt = parser.parse(raw_text)
    validation = parser.validate(receipt)

    extracted = receipt.to_dict()
    raw = extracted.pop("rawText")
    extracted.pop("success")
    extracted.pop("error")

    return {
        "success": receipt.success,
        "status": receipt.processing_status.value,
        "extractedData": extracted,
        "rawText": raw,
        "isValid": validation.is_valid,
        "errors": validation.errors,
        "error": receipt.error,
    }
