"""
Receipt Text Parser.
Extracts merchant, total, date and line items from receipt OCR text.
"""

import logging
import traceback
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from ..config.parser_config import PARSER_CONFIG
from ..patterns.extraction_patterns import (
    RECEIPT_AMOUNT_PATTERNS,
    RECEIPT_MERCHANT_EXCLUSIONS,
    RECEIPT_ITEM_EXCLUSIONS,
    ITEM_LINE_PATTERN,
)
from ..categorisation.engine import CategoryClassifier, RECEIPT_RULES
from ..categorisation.preprocess import contains_any, non_empty_lines
from ..extraction.amounts import extract_amount
from ..extraction.dates import extract_date

logger = logging.getLogger(__name__)


class ProcessingStatus(Enum):
    """Receipt processing lifecycle states."""
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass
class ReceiptItem:
    """Heuristic line item candidate."""
    name: str
    price: float
    quantity: int = 1

    def to_dict(self) -> Dict:
        return {"name": self.name, "price": self.price, "quantity": self.quantity}


@dataclass
class ParsedReceipt:
    """Best-effort receipt extraction result."""
    merchant: str
    amount: float = 0.0
    date: Optional[date] = None
    items: List[ReceiptItem] = field(default_factory=list)
    category: Optional[str] = None
    raw_text: str = ""
    success: bool = True
    error: Optional[str] = None

    @property
    def processing_status(self) -> ProcessingStatus:
        if self.success:
            return ProcessingStatus.COMPLETED
        return ProcessingStatus.FAILED

    def to_dict(self) -> Dict:
        return {
            "merchant": self.merchant,
            "amount": self.amount,
            "date": self.date.isoformat() if self.date else None,
            "items": [item.to_dict() for item in self.items],
            "category": self.category,
            "rawText": self.raw_text,
            "success": self.success,
            "error": self.error,
        }


@dataclass
class ValidationResult:
    """Outcome of checking a receipt for fields that need manual correction."""
    is_valid: bool
    errors: List[str] = field(default_factory=list)


class ReceiptTextParser:
    """Parses receipt OCR text into a structured receipt."""

    def __init__(
        self,
        classifier: Optional[CategoryClassifier] = None,
        today: Callable[[], date] = date.today
    ):
        """
        Initialize the parser.

        Args:
            classifier: Category classifier (defaults to the receipt rule set)
            today: Clock used when no date is printed on the receipt
        """
        self.classifier = classifier or CategoryClassifier(RECEIPT_RULES)
        self.today = today
        self.config = PARSER_CONFIG["receipt"]

    @property
    def unknown_merchant(self) -> str:
        return self.config["unknown_merchant"]

    def extract_merchant(self, text: str) -> Optional[str]:
        """
        Pick the merchant name from the top of the receipt.

        The first of the leading non-empty lines that has a sensible length,
        contains a capital letter and is not a receipt heading wins.
        """
        min_length = self.config["merchant_min_length"]
        max_length = self.config["merchant_max_length"]

        for line in non_empty_lines(text)[:self.config["merchant_scan_lines"]]:
            if not (min_length < len(line) < max_length):
                continue
            if not any(ch.isupper() for ch in line):
                continue
            if contains_any(line.lower(), RECEIPT_MERCHANT_EXCLUSIONS):
                continue
            return line
        return None

    def extract_amount(self, text: str) -> Optional[float]:
        return extract_amount(text, RECEIPT_AMOUNT_PATTERNS)

    def extract_date(self, text: str) -> Optional[date]:
        return extract_date(text)

    def extract_items(self, text: str) -> List[ReceiptItem]:
        """
        Collect "name ... price" lines as line item candidates.

        Summary lines (total, tax) and implausible prices are skipped.
        """
        max_price = self.config["max_item_price"]
        items = []

        for line in text.splitlines():
            match = ITEM_LINE_PATTERN.search(line)
            if not match:
                continue

            name = match.group(1).strip()
            price = float(match.group(2))

            if contains_any(name.lower(), RECEIPT_ITEM_EXCLUSIONS):
                continue
            if not (0 < price < max_price):
                continue

            items.append(ReceiptItem(
                name=name,
                price=price,
                quantity=self.config["default_quantity"],
            ))

        return items

    def _extract(self, text: str) -> ParsedReceipt:
        merchant = self.extract_merchant(text)
        amount = self.extract_amount(text)
        receipt_date = self.extract_date(text)

        return ParsedReceipt(
            merchant=merchant or self.unknown_merchant,
            amount=amount or 0.0,
            date=receipt_date or self.today(),
            items=self.extract_items(text),
            category=self.classifier.classify(merchant) if merchant else None,
            raw_text=text,
        )

    def _failed(self, error: str) -> ParsedReceipt:
        return ParsedReceipt(
            merchant=self.unknown_merchant,
            amount=0.0,
            date=self.today(),
            raw_text="",
            success=False,
            error=error,
        )

    def parse(self, raw_text: Optional[str]) -> ParsedReceipt:
        """
        Parse receipt OCR text.

        Never raises: an unexpected failure yields a record with sentinel
        values, empty raw text, success=False and the error message.

        Args:
            raw_text: Text produced by an OCR engine

        Returns:
            ParsedReceipt with whatever could be extracted
        """
        if raw_text is None:
            raw_text = ""

        try:
            receipt = self._extract(raw_text)
        except Exception as e:
            logger.error(f"Receipt text extraction failed: {traceback.format_exc()}")
            return self._failed(f"{type(e).__name__}: {e}")

        logger.debug(
            f"Parsed receipt: merchant='{receipt.merchant}' amount={receipt.amount} "
            f"date={receipt.date} items={len(receipt.items)}"
        )
        return receipt

    def process(self, source: Any, text_extractor: Callable[[Any], str]) -> ParsedReceipt:
        """
        Run an external OCR step and parse its output.

        Args:
            source: Whatever the extractor accepts (path, bytes, image)
            text_extractor: OCR callable returning the recognized text

        Returns:
            ParsedReceipt; OCR failures are reported through success/error
        """
        try:
            text = text_extractor(source)
        except Exception as e:
            logger.error(f"OCR processing failed: {traceback.format_exc()}")
            return self._failed(f"{type(e).__name__}: {e}")

        return self.parse(text)

    def validate(self, receipt: ParsedReceipt) -> ValidationResult:
        """
        Report fields that could not be detected.

        Used to decide whether a human should correct the receipt before it
        is turned into a transaction; the receipt itself is left unchanged.
        """
        errors = []

        if not receipt.merchant or receipt.merchant == self.unknown_merchant:
            errors.append("Merchant name could not be detected")

        if not receipt.amount or receipt.amount <= 0:
            errors.append("Amount could not be detected")

        if not receipt.date:
            errors.append("Date could not be detected")

        return ValidationResult(is_valid=len(errors) == 0, errors=errors)
