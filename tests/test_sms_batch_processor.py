"""
Test suite for importing exported SMS/UPI notification files.

Tests cover:
- JSON, TXT and CSV exports and ZIP archives
- Typed error codes for bad files
- Running statistics and result merging
- DataFrame views of the imported transactions
"""

import io
import json
import unittest
import zipfile

from finparse_engine.parsers.message_parser import MessageTextParser
from sms_batch_processor import BatchResult, SMSBatchProcessor

ZOMATO = "Rs.450 debited from your account to ZOMATO on 15-Dec-23."
SALARY = "Rs.5000 credited to your account. Salary payment received."
OTP = "Your OTP is 123456"
FLIPKART = "Rs.2,500 debited for FLIPKART purchase. Card ending 1234."
OLA = "You have paid Rs.350 to OLA via UPI."


def _zip(entries):
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as zf:
        for name, content in entries:
            zf.writestr(name, content)
    return buffer.getvalue()


class ExplodingParser(MessageTextParser):
    """Parser that fails unexpectedly."""

    def parse_multiple(self, messages):
        raise RuntimeError("boom")


class TestFileFormats(unittest.TestCase):
    """Test each supported export format."""

    def setUp(self):
        self.processor = SMSBatchProcessor()

    def test_json_list_of_strings(self):
        """Test a root-level list of message strings."""
        result = self.processor.process_batch(
            [("export.json", json.dumps([ZOMATO, OTP]).encode("utf-8"))]
        )
        self.assertEqual(result.stats.successful, 1)
        self.assertEqual(result.stats.total_messages, 2)
        self.assertEqual(result.stats.parsed_transactions, 1)
        self.assertEqual(result.stats.skipped_messages, 1)
        self.assertEqual(result.transactions[0].transaction.category, "Food")
        self.assertEqual(result.transactions[0].source_file, "export.json")

    def test_json_messages_key_with_objects(self):
        """Test a dict export whose messages are objects."""
        data = {"messages": [{"body": ZOMATO, "sender": "HDFCBK"}, {"text": OLA}]}
        result = self.processor.process_batch(
            [("backup.json", json.dumps(data).encode("utf-8"))]
        )
        self.assertEqual(len(result.transactions), 2)
        self.assertEqual(
            [t.transaction.amount for t in result.transactions], [450.0, 350.0]
        )

    def test_txt_one_message_per_line(self):
        content = "\n".join([ZOMATO, "", SALARY]).encode("utf-8")
        result = self.processor.process_batch([("messages.txt", content)])
        self.assertEqual(result.stats.total_messages, 2)
        self.assertEqual(result.stats.parsed_transactions, 2)

    def test_csv_message_column(self):
        """Test that the message column is found case-insensitively."""
        content = f"date,Body\n2024-01-01,{ZOMATO}\n2024-01-02,{OLA}\n".encode("utf-8")
        result = self.processor.process_batch([("inbox.csv", content)])
        self.assertEqual(result.stats.successful, 1)
        self.assertEqual(len(result.transactions), 2)

    def test_cp1252_fallback(self):
        """Test that non UTF-8 exports are still decoded."""
        content = "Rs.120 paid to Café Mocha via UPI".encode("cp1252")
        result = self.processor.process_batch([("legacy.txt", content)])
        self.assertEqual(result.stats.successful, 1)
        self.assertEqual(result.transactions[0].transaction.amount, 120.0)

    def test_zip_archive_expanded(self):
        """Test that supported ZIP entries are processed as separate files."""
        archive = _zip([
            ("export/a.json", json.dumps([ZOMATO])),
            ("export/notes.md", "ignored"),
            ("b.txt", OLA),
        ])
        result = self.processor.process_batch([("exports.zip", archive)])
        self.assertEqual(result.stats.total_files, 2)
        self.assertEqual(result.stats.successful, 2)
        self.assertEqual(
            sorted(t.source_file for t in result.transactions), ["a.json", "b.txt"]
        )


class TestErrorHandling(unittest.TestCase):
    """Test typed error reporting."""

    def setUp(self):
        self.processor = SMSBatchProcessor()

    def _single_error(self, filename, content):
        result = self.processor.process_batch([(filename, content)])
        self.assertEqual(result.stats.failed, 1)
        self.assertEqual(len(result.errors), 1)
        return result.errors[0]

    def test_invalid_json(self):
        error = self._single_error("bad.json", b"{not json")
        self.assertEqual(error.error_type, "JSON_PARSE_ERROR")
        self.assertEqual(error.file_name, "bad.json")

    def test_json_root_type(self):
        error = self._single_error("number.json", b"42")
        self.assertEqual(error.error_type, "INVALID_MESSAGE_STRUCTURE")

    def test_json_dict_without_messages(self):
        error = self._single_error("dict.json", json.dumps({"sms": []}).encode("utf-8"))
        self.assertEqual(error.error_type, "INVALID_MESSAGE_STRUCTURE")

    def test_json_item_without_message_field(self):
        data = json.dumps([{"sender": "HDFCBK"}]).encode("utf-8")
        error = self._single_error("objects.json", data)
        self.assertEqual(error.error_type, "INVALID_MESSAGE_STRUCTURE")

    def test_csv_without_message_column(self):
        error = self._single_error("inbox.csv", b"date,amount\n2024-01-01,450\n")
        self.assertEqual(error.error_type, "INVALID_MESSAGE_STRUCTURE")

    def test_unsupported_file_type(self):
        error = self._single_error("receipt.png", b"\x89PNG")
        self.assertEqual(error.error_type, "UNSUPPORTED_FILE_TYPE")

    def test_empty_file(self):
        error = self._single_error("empty.txt", b"\n\n")
        self.assertEqual(error.error_type, "DATA_VALIDATION_ERROR")
        self.assertEqual(error.error_message, "No messages found in file")

    def test_unexpected_error(self):
        processor = SMSBatchProcessor(parser=ExplodingParser())
        result = processor.process_batch([("messages.txt", ZOMATO.encode("utf-8"))])
        self.assertEqual(result.errors[0].error_type, "PROCESSING_ERROR")
        self.assertEqual(result.errors[0].error_message, "RuntimeError: boom")

    def test_bad_file_does_not_stop_batch(self):
        """Test that later files are processed after a failure."""
        result = self.processor.process_batch([
            ("bad.json", b"[oops"),
            ("good.txt", OLA.encode("utf-8")),
        ])
        self.assertEqual(result.stats.processed, 2)
        self.assertEqual(result.stats.successful, 1)
        self.assertEqual(result.stats.failed, 1)
        self.assertEqual(result.error_summary, {"JSON_PARSE_ERROR": 1})
        self.assertEqual(len(result.transactions), 1)


class TestStatsAndResults(unittest.TestCase):
    """Test statistics, merging and DataFrame views."""

    def setUp(self):
        self.processor = SMSBatchProcessor()
        content = "\n".join([ZOMATO, SALARY, OTP, FLIPKART, OLA]).encode("utf-8")
        self.result = self.processor.process_batch([("inbox.txt", content)])

    def test_direction_totals(self):
        stats = self.result.stats
        self.assertEqual(stats.income_count, 1)
        self.assertEqual(stats.expense_count, 3)
        self.assertEqual(stats.total_income, 5000.0)
        self.assertEqual(stats.total_expense, 3300.0)
        self.assertEqual(stats.parse_rate, 80.0)
        self.assertGreaterEqual(stats.processing_time, 0.0)

    def test_progress_callback(self):
        calls = []
        self.processor.process_batch(
            [("a.txt", ZOMATO.encode("utf-8")), ("b.txt", OLA.encode("utf-8"))],
            progress_callback=lambda current, total, message: calls.append((current, total)),
        )
        self.assertEqual(calls, [(1, 2), (2, 2)])

    def test_to_dataframe(self):
        df = self.result.to_dataframe()
        self.assertEqual(len(df), 4)
        self.assertEqual(
            list(df.columns),
            ["Source File", "Date", "Type", "Amount", "Merchant",
             "Category", "Payment Method", "Message"],
        )
        self.assertEqual(df.iloc[0]["Merchant"], "your account to ZOMATO")
        self.assertEqual(df.iloc[0]["Category"], "Food")

    def test_category_summary(self):
        """Test that expenses are grouped by category, largest total first."""
        summary = self.result.category_summary()
        self.assertEqual(list(summary.index), ["Uncategorized", "Food", "Travel"])
        self.assertEqual(summary.loc["Food", "Total"], 450.0)
        self.assertEqual(summary.loc["Uncategorized", "Count"], 1)

    def test_errors_to_dataframe(self):
        result = self.processor.process_batch([("bad.json", b"{")])
        df = result.errors_to_dataframe()
        self.assertEqual(list(df.columns), ["File", "Error Type", "Error Message", "Timestamp"])
        self.assertEqual(df.iloc[0]["Error Type"], "JSON_PARSE_ERROR")

    def test_merge_results(self):
        other = self.processor.process_batch([
            ("more.txt", OLA.encode("utf-8")),
            ("bad.json", b"{"),
        ])
        merged = BatchResult.merge_results(self.result, other)

        self.assertEqual(merged.stats.total_files, 3)
        self.assertEqual(merged.stats.successful, 2)
        self.assertEqual(merged.stats.failed, 1)
        self.assertEqual(merged.stats.parsed_transactions, 5)
        self.assertEqual(merged.stats.total_expense, 3650.0)
        self.assertEqual(len(merged.transactions), 5)
        self.assertEqual(merged.error_summary, {"JSON_PARSE_ERROR": 1})
        self.assertLessEqual(merged.stats.start_time, merged.stats.end_time)


if __name__ == "__main__":
    unittest.main()
