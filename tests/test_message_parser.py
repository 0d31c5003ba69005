"""
Test suite for SMS/UPI message parsing.

Tests cover:
- Financial keyword gate and amount gate
- Amount, merchant, direction and payment method extraction
- Category assignment from the SMS rule set
- Order-preserving batch parsing
"""

import unittest
from datetime import date

from finparse_engine.parsers.message_parser import (
    MessageTextParser,
    ParsedTransaction,
    PaymentMethod,
    TransactionType,
    sample_messages,
)

TODAY = date(2024, 1, 15)


class TestMessageScenarios(unittest.TestCase):
    """Test the canonical sample notifications."""

    def setUp(self):
        self.parser = MessageTextParser(today=lambda: TODAY)

    def test_debit_to_merchant(self):
        """Test a debit notification naming the merchant."""
        result = self.parser.parse(
            "Rs.450 debited from your account to ZOMATO on 15-Dec-23. "
            "Available balance: Rs.12,500"
        )
        self.assertIsNotNone(result)
        self.assertEqual(result.amount, 450.0)
        self.assertIn("ZOMATO", result.merchant)
        self.assertEqual(result.type, TransactionType.EXPENSE)
        self.assertEqual(result.payment_method, PaymentMethod.OTHER)
        self.assertEqual(result.category, "Food")
        self.assertEqual(result.date, TODAY)

    def test_upi_payment(self):
        """Test a UPI payment with thousands separators."""
        result = self.parser.parse(
            "Your UPI payment of Rs.1,200.00 to Amazon Pay via Google Pay is successful"
        )
        self.assertEqual(result.amount, 1200.0)
        self.assertEqual(result.merchant, "Amazon Pay")
        self.assertEqual(result.type, TransactionType.EXPENSE)
        self.assertEqual(result.payment_method, PaymentMethod.UPI)
        self.assertEqual(result.category, "Shopping")

    def test_salary_credit(self):
        """Test a credit notification is income."""
        result = self.parser.parse(
            "Rs.5000 credited to your account. Salary payment received. "
            "Current balance: Rs.45,000"
        )
        self.assertEqual(result.amount, 5000.0)
        self.assertEqual(result.type, TransactionType.INCOME)

    def test_paid_via_upi(self):
        """Test a 'paid to' notification via UPI."""
        result = self.parser.parse("You have paid Rs.350 to OLA via UPI. Transaction ID: 1234567890")
        self.assertEqual(result.amount, 350.0)
        self.assertEqual(result.merchant, "OLA")
        self.assertEqual(result.payment_method, PaymentMethod.UPI)
        self.assertEqual(result.category, "Travel")

    def test_unknown_merchant_has_no_category(self):
        """Test that the Unknown sentinel is not classified."""
        result = self.parser.parse(
            "Rs.2,500 debited for FLIPKART purchase. Card ending 1234. Date: 15/12/2023"
        )
        self.assertEqual(result.amount, 2500.0)
        self.assertEqual(result.merchant, "Unknown")
        self.assertIsNone(result.category)
        self.assertEqual(result.payment_method, PaymentMethod.CARD)

    def test_all_samples_parse(self):
        """Test that every bundled sample yields a transaction."""
        messages = sample_messages()
        self.assertEqual(len(self.parser.parse_multiple(messages)), len(messages))


class TestGates(unittest.TestCase):
    """Test input rejection."""

    def setUp(self):
        self.parser = MessageTextParser()

    def test_empty_message(self):
        self.assertIsNone(self.parser.parse(""))

    def test_non_string_input(self):
        self.assertIsNone(self.parser.parse(None))
        self.assertIsNone(self.parser.parse(450))
        self.assertIsNone(self.parser.parse(["Rs.450 debited"]))

    def test_non_financial_message(self):
        """Test that text without financial keywords is rejected."""
        self.assertIsNone(self.parser.parse("Your OTP is 123456. Do not share it with anyone. Rs.0"))
        self.assertIsNone(self.parser.parse("Meet me at 5 pm near the mall"))

    def test_financial_message_without_amount(self):
        """Test that a financial message without a positive amount is rejected."""
        self.assertIsNone(self.parser.parse("Your payment was successful"))
        self.assertIsNone(self.parser.parse("Rs.0 debited from your account"))


class TestFieldExtraction(unittest.TestCase):
    """Test individual field extraction."""

    def setUp(self):
        self.parser = MessageTextParser(today=lambda: TODAY)

    def test_inr_prefix(self):
        result = self.parser.parse("INR 2,350.50 debited from A/c XX1234")
        self.assertEqual(result.amount, 2350.5)

    def test_rupee_sign(self):
        result = self.parser.parse("₹99 paid to Spotify via UPI")
        self.assertEqual(result.amount, 99.0)
        self.assertEqual(result.merchant, "Spotify")
        self.assertEqual(result.category, "Entertainment")

    def test_mangled_rupee_sign(self):
        """Test the rupee sign as it appears after a cp1252 mis-decode."""
        result = self.parser.parse("â‚¹150 debited to SWIGGY on 01-01-24")
        self.assertEqual(result.amount, 150.0)
        self.assertEqual(result.merchant, "SWIGGY")
        self.assertEqual(result.category, "Food")

    def test_amount_suffixed_by_currency_word(self):
        result = self.parser.parse("250 rupees spent at DMART.")
        self.assertEqual(result.amount, 250.0)
        self.assertEqual(result.merchant, "DMART")
        self.assertEqual(result.category, "Other")

    def test_amount_keyword(self):
        """Test the amount keyword pattern and the 'paid to' merchant pattern."""
        result = self.parser.parse("Amount: 799 paid to RAHUL")
        self.assertEqual(result.amount, 799.0)
        self.assertEqual(result.merchant, "RAHUL")

    def test_bare_currency_symbol(self):
        result = self.parser.parse("Card payment of $45.00 at STARBUCKS on 2 Jan")
        self.assertEqual(result.amount, 45.0)
        self.assertEqual(result.merchant, "STARBUCKS")
        self.assertEqual(result.payment_method, PaymentMethod.CARD)
        self.assertEqual(result.category, "Food")

    def test_vpa_merchant(self):
        result = self.parser.parse("UPI txn: Rs 75 debited. VPA: chai@okaxis")
        self.assertEqual(result.merchant, "chai@okaxis")
        self.assertEqual(result.amount, 75.0)

    def test_debit_keyword_wins_over_credit_keyword(self):
        """Test that a refund message with a debit keyword is an expense."""
        result = self.parser.parse("Refund reversal: Rs.300 debited from your account")
        self.assertEqual(result.type, TransactionType.EXPENSE)

    def test_refund_is_income(self):
        result = self.parser.parse("Refund of Rs.300 processed to your card")
        self.assertEqual(result.type, TransactionType.INCOME)

    def test_atm_is_card(self):
        result = self.parser.parse("Rs.500 withdrawn at ATM")
        self.assertEqual(result.payment_method, PaymentMethod.CARD)
        self.assertEqual(result.type, TransactionType.EXPENSE)

    def test_cash_deposit(self):
        result = self.parser.parse("Cash deposited Rs.1000 in your account")
        self.assertEqual(result.payment_method, PaymentMethod.CASH)
        self.assertEqual(result.type, TransactionType.INCOME)

    def test_bank_transfer(self):
        result = self.parser.parse("Rs.5,000 sent via NEFT to HDFC on 02-02-24")
        self.assertEqual(result.payment_method, PaymentMethod.BANK_TRANSFER)

    def test_to_dict(self):
        result = self.parser.parse("Rs.450 debited to ZOMATO on 15-Dec-23")
        self.assertEqual(
            result.to_dict(),
            {
                "amount": 450.0,
                "merchant": "ZOMATO",
                "date": "2024-01-15",
                "type": "expense",
                "paymentMethod": "other",
                "category": "Food",
                "rawMessage": "Rs.450 debited to ZOMATO on 15-Dec-23",
            },
        )


class TestParseMultiple(unittest.TestCase):
    """Test batch parsing."""

    def setUp(self):
        self.parser = MessageTextParser()

    def test_order_preserved_and_misses_dropped(self):
        messages = [
            "Rs.100 debited to ZOMATO on 1 Jan",
            "Hello there",
            "",
            None,
            "Rs.200 credited to your account.",
            "Your payment was successful",
            "Rs.300 paid to OLA via UPI",
        ]
        results = self.parser.parse_multiple(messages)
        self.assertEqual([r.amount for r in results], [100.0, 200.0, 300.0])
        self.assertLessEqual(len(results), len(messages))
        for result in results:
            self.assertIsInstance(result, ParsedTransaction)
            self.assertGreater(result.amount, 0)

    def test_non_list_input(self):
        self.assertEqual(self.parser.parse_multiple("Rs.100 debited"), [])
        self.assertEqual(self.parser.parse_multiple(None), [])

    def test_tuple_input(self):
        results = self.parser.parse_multiple(("Rs.100 debited to ZOMATO on 1 Jan",))
        self.assertEqual(len(results), 1)


if __name__ == "__main__":
    unittest.main()
