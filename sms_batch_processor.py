"""
SMS Batch Processor for importing exported notification messages.
Handles JSON, TXT and CSV exports and ZIP archives with comprehensive error handling.
"""

import json
import logging
import zipfile
import io
import os
from typing import Dict, List, Optional, Tuple, Callable
from dataclasses import dataclass, field
from datetime import datetime
import traceback

from finparse_engine.parsers.message_parser import (
    MessageTextParser,
    ParsedTransaction,
    TransactionType,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = (".json", ".txt", ".csv")

# Field names that may hold the message body in JSON objects / CSV columns
MESSAGE_FIELDS = ("message", "body", "text")


class InvalidMessageStructureError(Exception):
    """Raised when a file's content cannot be normalized to a list of messages."""
    pass


class UnsupportedFileTypeError(Exception):
    """Raised when a file extension is not one of the supported exports."""
    pass


@dataclass
class ProcessingError:
    """Details of a processing error."""
    file_name: str
    error_type: str
    error_message: str
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())


@dataclass
class BatchStats:
    """Statistics for batch processing."""
    total_files: int = 0
    processed: int = 0
    successful: int = 0
    failed: int = 0

    # Message counts
    total_messages: int = 0
    parsed_transactions: int = 0
    skipped_messages: int = 0

    # Direction counts
    income_count: int = 0
    expense_count: int = 0
    total_income: float = 0.0
    total_expense: float = 0.0

    # Timing
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None

    @property
    def processing_time(self) -> float:
        """Calculate total processing time in seconds."""
        if self.start_time and self.end_time:
            return (self.end_time - self.start_time).total_seconds()
        return 0.0

    @property
    def parse_rate(self) -> float:
        """Share of messages that produced a transaction, as percentage."""
        if self.total_messages == 0:
            return 0.0
        return (self.parsed_transactions / self.total_messages) * 100

    def record(self, transaction: ParsedTransaction) -> None:
        """Add one parsed transaction to the running totals."""
        self.parsed_transactions += 1
        if transaction.type == TransactionType.INCOME:
            self.income_count += 1
            self.total_income += transaction.amount
        else:
            self.expense_count += 1
            self.total_expense += transaction.amount


@dataclass
class ImportedTransaction:
    """A parsed transaction together with the file it came from."""
    source_file: str
    transaction: ParsedTransaction


@dataclass
class BatchResult:
    """Complete result of batch processing."""
    stats: BatchStats
    transactions: List[ImportedTransaction]
    errors: List[ProcessingError]
    error_summary: Dict[str, int] = field(default_factory=dict)

    @staticmethod
    def merge_results(result1: 'BatchResult', result2: 'BatchResult') -> 'BatchResult':
        """
        Merge two BatchResult objects into a single combined result.

        Used when several uploads are imported one after another.

        Args:
            result1: First batch result (typically the existing cumulative result)
            result2: Second batch result (typically the new batch to add)

        Returns:
            New BatchResult with merged data
        """
        merged_stats = BatchStats()

        for name in (
            "total_files", "processed", "successful", "failed",
            "total_messages", "parsed_transactions", "skipped_messages",
            "income_count", "expense_count", "total_income", "total_expense",
        ):
            setattr(merged_stats, name, getattr(result1.stats, name) + getattr(result2.stats, name))

        # Use earliest start time and latest end time
        if result1.stats.start_time and result2.stats.start_time:
            merged_stats.start_time = min(result1.stats.start_time, result2.stats.start_time)
        else:
            merged_stats.start_time = result1.stats.start_time or result2.stats.start_time

        if result1.stats.end_time and result2.stats.end_time:
            merged_stats.end_time = max(result1.stats.end_time, result2.stats.end_time)
        else:
            merged_stats.end_time = result1.stats.end_time or result2.stats.end_time

        merged_error_summary = dict(result1.error_summary)
        for error_type, count in result2.error_summary.items():
            merged_error_summary[error_type] = merged_error_summary.get(error_type, 0) + count

        return BatchResult(
            stats=merged_stats,
            transactions=result1.transactions + result2.transactions,
            errors=result1.errors + result2.errors,
            error_summary=merged_error_summary
        )

    def to_dataframe(self):
        """
        Convert imported transactions to a pandas DataFrame.

        Returns:
            pandas DataFrame with one row per transaction
        """
        import pandas as pd

        rows = []
        for imported in self.transactions:
            txn = imported.transaction
            rows.append({
                "Source File": imported.source_file,
                "Date": txn.date,
                "Type": txn.type.value,
                "Amount": txn.amount,
                "Merchant": txn.merchant,
                "Category": txn.category or "",
                "Payment Method": txn.payment_method.value,
                "Message": txn.raw_message,
            })

        columns = [
            "Source File", "Date", "Type", "Amount", "Merchant",
            "Category", "Payment Method", "Message",
        ]
        return pd.DataFrame(rows, columns=columns)

    def errors_to_dataframe(self):
        """Convert processing errors to a pandas DataFrame."""
        import pandas as pd

        return pd.DataFrame(
            [
                {
                    "File": error.file_name,
                    "Error Type": error.error_type,
                    "Error Message": error.error_message,
                    "Timestamp": error.timestamp,
                }
                for error in self.errors
            ],
            columns=["File", "Error Type", "Error Message", "Timestamp"],
        )

    def category_summary(self):
        """
        Summarize imported expenses by category.

        Returns:
            pandas DataFrame indexed by category with Count and Total columns,
            sorted by Total descending
        """
        df = self.to_dataframe()
        expenses = df[df["Type"] == TransactionType.EXPENSE.value].copy()
        expenses["Category"] = expenses["Category"].replace("", "Uncategorized")

        summary = expenses.groupby("Category")["Amount"].agg(["count", "sum"])
        summary.columns = ["Count", "Total"]
        return summary.sort_values("Total", ascending=False)


class SMSBatchProcessor:
    """Batch processor for exported SMS/UPI notifications."""

    def __init__(self, parser: Optional[MessageTextParser] = None):
        """
        Initialize the batch processor.

        Args:
            parser: Message parser to use (a default MessageTextParser if omitted)
        """
        self.parser = parser or MessageTextParser()

    def process_batch(
        self,
        files: List[Tuple[str, bytes]],
        progress_callback: Optional[Callable[[int, int, str], None]] = None
    ) -> BatchResult:
        """
        Process a batch of exported message files.

        ZIP archives are expanded first; every supported entry counts as
        its own file.

        Args:
            files: List of (filename, content) tuples
            progress_callback: Optional callback(current, total, message)

        Returns:
            BatchResult with all processing results
        """
        files = self.expand_archives(files)

        stats = BatchStats(
            total_files=len(files),
            start_time=datetime.now()
        )

        transactions = []
        errors = []
        error_types = {}

        logger.info(f"Starting batch processing of {len(files)} files")

        for idx, (filename, content) in enumerate(files):
            try:
                if progress_callback:
                    progress_callback(idx + 1, len(files), f"Processing: {filename}")

                logger.debug(f"Processing file {idx + 1}/{len(files)}: {filename}")

                messages = self._load_messages(filename, content)
                if not messages:
                    raise ValueError("No messages found in file")

                stats.total_messages += len(messages)
                for txn in self.parser.parse_multiple(messages):
                    transactions.append(ImportedTransaction(source_file=filename, transaction=txn))
                    stats.record(txn)

                stats.processed += 1
                stats.successful += 1

            except json.JSONDecodeError as e:
                self._record_error(errors, error_types, stats, filename,
                                   "JSON_PARSE_ERROR", f"Invalid JSON: {str(e)}")

            except InvalidMessageStructureError as e:
                self._record_error(errors, error_types, stats, filename,
                                   "INVALID_MESSAGE_STRUCTURE", str(e))

            except UnsupportedFileTypeError as e:
                self._record_error(errors, error_types, stats, filename,
                                   "UNSUPPORTED_FILE_TYPE", str(e))

            except ValueError as e:
                self._record_error(errors, error_types, stats, filename,
                                   "DATA_VALIDATION_ERROR", str(e))

            except Exception as e:
                logger.error(f"Processing error in {filename}: {traceback.format_exc()}")
                self._record_error(errors, error_types, stats, filename,
                                   "PROCESSING_ERROR", f"{type(e).__name__}: {str(e)}")

        stats.end_time = datetime.now()
        stats.skipped_messages = stats.total_messages - stats.parsed_transactions

        logger.info(
            f"Batch processing complete: {stats.successful}/{stats.total_files} files, "
            f"{stats.parsed_transactions}/{stats.total_messages} messages parsed, "
            f"time: {stats.processing_time:.1f}s"
        )

        return BatchResult(
            stats=stats,
            transactions=transactions,
            errors=errors,
            error_summary=error_types
        )

    def _record_error(
        self,
        errors: List[ProcessingError],
        error_types: Dict[str, int],
        stats: BatchStats,
        filename: str,
        error_type: str,
        message: str
    ) -> None:
        errors.append(ProcessingError(
            file_name=filename,
            error_type=error_type,
            error_message=message
        ))
        stats.failed += 1
        stats.processed += 1
        error_types[error_type] = error_types.get(error_type, 0) + 1
        logger.error(f"{error_type} in {filename}: {message}")

    def _decode(self, content: bytes) -> str:
        """Decode file bytes with fallback encodings."""
        try:
            return content.decode("utf-8")
        except UnicodeDecodeError:
            # Fallback to cp1252 for Windows-encoded exports
            try:
                return content.decode("cp1252")
            except UnicodeDecodeError:
                # latin-1 accepts all byte values
                return content.decode("latin-1")

    def _load_messages(self, filename: str, content: bytes) -> List[str]:
        """Read the list of message strings from one file."""
        extension = os.path.splitext(filename)[1].lower()
        if extension not in SUPPORTED_EXTENSIONS:
            raise UnsupportedFileTypeError(f"Unsupported file type: {filename}")

        text = self._decode(content)

        if extension == ".json":
            return self._normalize_json_structure(json.loads(text), filename)
        if extension == ".csv":
            return self._read_csv_messages(text, filename)
        return [line.strip() for line in text.splitlines() if line.strip()]

    def _message_from_object(self, item: Dict) -> Optional[str]:
        for key in MESSAGE_FIELDS:
            value = item.get(key)
            if isinstance(value, str):
                return value
        return None

    def _normalize_json_structure(self, data, filename: str) -> List[str]:
        """
        Normalize different export structures to a list of messages.

        Handles:
        - Root-level list of strings
        - Root-level list of objects with 'message', 'body' or 'text'
        - Dictionary with a 'messages' list of either of the above

        Raises:
            InvalidMessageStructureError: If structure cannot be normalized
        """
        if isinstance(data, dict):
            if "messages" not in data:
                raise InvalidMessageStructureError(
                    f"Expected a 'messages' key in {filename}, "
                    f"found keys: {list(data.keys())}"
                )
            data = data["messages"]

        if not isinstance(data, list):
            raise InvalidMessageStructureError(
                f"Unexpected JSON root type in {filename}: {type(data).__name__}. "
                f"Expected list or dict."
            )

        messages = []
        for idx, item in enumerate(data):
            if isinstance(item, str):
                messages.append(item)
            elif isinstance(item, dict):
                message = self._message_from_object(item)
                if message is None:
                    raise InvalidMessageStructureError(
                        f"Item {idx} in {filename} has none of the fields {MESSAGE_FIELDS}"
                    )
                messages.append(message)
            else:
                raise InvalidMessageStructureError(
                    f"Item {idx} in {filename} is a {type(item).__name__}, "
                    f"expected string or object"
                )

        logger.debug(f"{filename}: found {len(messages)} messages")
        return messages

    def _read_csv_messages(self, text: str, filename: str) -> List[str]:
        """Read the message column of a CSV export."""
        import pandas as pd

        df = pd.read_csv(io.StringIO(text), dtype=str)
        columns = {str(col).strip().lower(): col for col in df.columns}
        column = next((columns[name] for name in MESSAGE_FIELDS if name in columns), None)
        if column is None:
            raise InvalidMessageStructureError(
                f"No message column in {filename}. Expected one of {MESSAGE_FIELDS}, "
                f"found {list(df.columns)}"
            )
        return df[column].dropna().astype(str).tolist()

    def expand_archives(self, files: List[Tuple[str, bytes]]) -> List[Tuple[str, bytes]]:
        """Replace ZIP archives in the file list with their entries."""
        all_files = []

        for filename, content in files:
            if filename.lower().endswith(".zip"):
                logger.info(f"Extracting ZIP archive: {filename}")
                zip_files = self._extract_zip(content)
                all_files.extend(zip_files)
                logger.info(f"Extracted {len(zip_files)} files from {filename}")
            else:
                all_files.append((filename, content))

        return all_files

    def _extract_zip(self, content: bytes) -> List[Tuple[str, bytes]]:
        """Extract supported export files from a ZIP archive."""
        files = []

        with zipfile.ZipFile(io.BytesIO(content), "r") as zf:
            for name in zf.namelist():
                # Skip directories and unsupported files
                if name.endswith("/"):
                    continue
                if not name.lower().endswith(SUPPORTED_EXTENSIONS):
                    continue

                # Use just the filename without path
                files.append((os.path.basename(name), zf.read(name)))

        return files
