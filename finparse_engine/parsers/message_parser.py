"""
SMS/UPI Message Parser.
Extracts candidate transactions from bank and UPI notification text.
"""

import logging
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Callable, Dict, List, Optional

from ..config.parser_config import PARSER_CONFIG
from ..patterns.extraction_patterns import (
    FINANCIAL_KEYWORDS,
    DEBIT_KEYWORDS,
    CREDIT_KEYWORDS,
    PAYMENT_METHOD_KEYWORDS,
    MESSAGE_AMOUNT_PATTERNS,
    MERCHANT_PATTERNS,
)
from ..categorisation.engine import CategoryClassifier, SMS_RULES
from ..categorisation.preprocess import normalize_text, contains_any
from ..extraction.amounts import extract_amount
from ..extraction.strategies import first_match, regex_strategy

logger = logging.getLogger(__name__)


class TransactionType(Enum):
    """Direction of money movement."""
    INCOME = "income"
    EXPENSE = "expense"


class PaymentMethod(Enum):
    """Payment channels recognized in notifications."""
    CASH = "cash"
    CARD = "card"
    UPI = "upi"
    BANK_TRANSFER = "bank_transfer"
    OTHER = "other"


@dataclass
class ParsedTransaction:
    """Candidate transaction extracted from one message."""
    amount: float
    merchant: str
    date: date
    type: TransactionType = TransactionType.EXPENSE
    payment_method: PaymentMethod = PaymentMethod.OTHER
    category: Optional[str] = None
    raw_message: str = ""

    def to_dict(self) -> Dict:
        return {
            "amount": self.amount,
            "merchant": self.merchant,
            "date": self.date.isoformat(),
            "type": self.type.value,
            "paymentMethod": self.payment_method.value,
            "category": self.category,
            "rawMessage": self.raw_message,
        }


def _clean_merchant(value: str) -> Optional[str]:
    merchant = value.strip()
    return merchant or None


MERCHANT_STRATEGIES = [regex_strategy(pattern, _clean_merchant) for pattern in MERCHANT_PATTERNS]


class MessageTextParser:
    """Parses SMS/UPI notification text into transactions."""

    def __init__(
        self,
        classifier: Optional[CategoryClassifier] = None,
        today: Callable[[], date] = date.today
    ):
        """
        Initialize the parser.

        Args:
            classifier: Category classifier (defaults to the SMS rule set)
            today: Clock used for the transaction date
        """
        self.classifier = classifier or CategoryClassifier(SMS_RULES)
        self.today = today
        self.unknown_merchant = PARSER_CONFIG["message"]["unknown_merchant"]
        self.min_amount = PARSER_CONFIG["message"]["min_amount"]

    def is_financial_message(self, message: str) -> bool:
        """Check if lowercased message contains any financial keyword."""
        return contains_any(message, FINANCIAL_KEYWORDS)

    def extract_amount(self, message: str) -> Optional[float]:
        return extract_amount(message, MESSAGE_AMOUNT_PATTERNS)

    def extract_merchant(self, message: str) -> Optional[str]:
        return first_match(MERCHANT_STRATEGIES, message)

    def extract_transaction_type(self, message: str) -> TransactionType:
        """
        Determine direction from a lowercased message.

        Debit keywords are checked first, so "refund ... debited" is an expense.
        """
        if contains_any(message, DEBIT_KEYWORDS):
            return TransactionType.EXPENSE
        if contains_any(message, CREDIT_KEYWORDS):
            return TransactionType.INCOME
        return TransactionType.EXPENSE

    def extract_payment_method(self, message: str) -> PaymentMethod:
        """Determine payment channel from a lowercased message."""
        for method, keywords in PAYMENT_METHOD_KEYWORDS:
            if contains_any(message, keywords):
                return PaymentMethod(method)
        return PaymentMethod.OTHER

    def parse(self, message) -> Optional[ParsedTransaction]:
        """
        Parse a single notification.

        Args:
            message: Raw SMS/UPI text

        Returns:
            ParsedTransaction, or None if the text is not a financial
            message or no positive amount could be found
        """
        if not isinstance(message, str) or not message:
            return None

        normalized = normalize_text(message)

        if not self.is_financial_message(normalized):
            logger.debug("Message rejected: no financial keywords")
            return None

        amount = self.extract_amount(message)
        if amount is None or amount <= self.min_amount:
            logger.debug("Message rejected: no positive amount found")
            return None

        merchant = self.extract_merchant(message)
        category = self.classifier.classify(merchant) if merchant else None

        transaction = ParsedTransaction(
            amount=amount,
            merchant=merchant or self.unknown_merchant,
            date=self.today(),
            type=self.extract_transaction_type(normalized),
            payment_method=self.extract_payment_method(normalized),
            category=category,
            raw_message=message,
        )

        logger.debug(
            f"Parsed message: {transaction.type.value} {transaction.amount} "
            f"merchant='{transaction.merchant}' category={transaction.category}"
        )
        return transaction

    def parse_multiple(self, messages) -> List[ParsedTransaction]:
        """
        Parse many messages, keeping input order and dropping misses.

        Args:
            messages: List of raw message strings

        Returns:
            Parsed transactions in the order their messages appeared
        """
        if not isinstance(messages, (list, tuple)):
            return []

        transactions = []
        for message in messages:
            transaction = self.parse(message)
            if transaction is not None:
                transactions.append(transaction)
        return transactions


def sample_messages() -> List[str]:
    """Sample notifications for demos and tests."""
    return [
        "Rs.450 debited from your account to ZOMATO on 15-Dec-23. Available balance: Rs.12,500",
        "Your UPI payment of Rs.1,200.00 to Amazon Pay via Google Pay is successful",
        "Rs.5000 credited to your account. Salary payment received. Current balance: Rs.45,000",
        "You have paid Rs.350 to OLA via UPI. Transaction ID: 1234567890",
        "Rs.2,500 debited for FLIPKART purchase. Card ending 1234. Date: 15/12/2023",
    ]
