"""
Keyword sets and regex tables used to pull transaction fields out of
SMS/UPI notifications and receipt OCR text.

Pattern lists are ordered: extractors try them in sequence and keep the
first usable match.
"""

import re

# Number with optional thousands separators and optional paise/cents
_NUMBER = r"(\d+(?:,\d+)*(?:\.\d{2})?)"

# Rupee sign as sent, and as it arrives when UTF-8 is decoded as cp1252
RUPEE_SIGNS = ("₹", "â‚¹")

_RUPEE = "|".join(re.escape(sign) for sign in RUPEE_SIGNS)


# ---------------------------------------------------------------------------
# SMS / UPI notifications
# ---------------------------------------------------------------------------

# A message must contain at least one of these to be treated as financial
FINANCIAL_KEYWORDS = [
    "debited", "credited", "paid", "received", "sent",
    "upi", "transaction", "payment", "transfer",
    "withdrawn", "deposited", "spent", "refund",
]

# Checked before CREDIT_KEYWORDS; a debit keyword wins on conflict
DEBIT_KEYWORDS = ["debited", "paid", "sent", "withdrawn", "spent"]

CREDIT_KEYWORDS = ["credited", "received", "deposit", "refund"]

# (payment_method, substrings) in priority order
PAYMENT_METHOD_KEYWORDS = [
    ("upi", ["upi"]),
    ("card", ["card", "atm"]),
    ("cash", ["cash"]),
    ("bank_transfer", ["transfer", "neft", "imps"]),
]

MESSAGE_AMOUNT_PATTERNS = [
    # Rs.450 / INR 1,200.00 / ₹99
    re.compile(rf"(?:rs\.?|inr|{_RUPEE})\s*{_NUMBER}", re.IGNORECASE),
    # 450 Rs / 1,200 rupees
    re.compile(rf"{_NUMBER}\s*(?:rs\.?|inr|rupees)", re.IGNORECASE),
    # Amount: 450 / Amt 450
    re.compile(rf"(?:amount|amt)\D*{_NUMBER}", re.IGNORECASE),
    # Bare currency symbol
    re.compile(rf"(?:{_RUPEE}|\$|£|€)\s*{_NUMBER}"),
]

MERCHANT_PATTERNS = [
    # "to ZOMATO on", "at STARBUCKS.", "from ACME via"
    re.compile(
        r"\b(?:to|at|from)\s+([A-Za-z0-9\s]{1,60}?)(?:\s+on|\s+via|\s+for|\.|\s+rs)",
        re.IGNORECASE,
    ),
    # "paid to RAHUL", "received from ACME"
    re.compile(
        r"(?:paid to|sent to|received from)\s+([A-Za-z0-9\s]+?)(?:\s|$)",
        re.IGNORECASE,
    ),
    # "VPA: merchant@okbank"
    re.compile(r"vpa:\s*(\S+)", re.IGNORECASE),
]


# ---------------------------------------------------------------------------
# Receipt OCR text
# ---------------------------------------------------------------------------

_CURRENCY_OPT = rf"(?:rs\.?|{_RUPEE})?"

RECEIPT_AMOUNT_PATTERNS = [
    re.compile(rf"total[:\s]*{_CURRENCY_OPT}\s*{_NUMBER}", re.IGNORECASE),
    re.compile(rf"grand\s*total[:\s]*{_CURRENCY_OPT}\s*{_NUMBER}", re.IGNORECASE),
    re.compile(rf"amount[:\s]*{_CURRENCY_OPT}\s*{_NUMBER}", re.IGNORECASE),
    re.compile(rf"(?:rs\.?|{_RUPEE})\s*{_NUMBER}", re.IGNORECASE),
]

# Lines containing any of these are never taken as the merchant name
RECEIPT_MERCHANT_EXCLUSIONS = ["receipt", "invoice", "bill", "tax", "total", "date"]

# Item names containing any of these are summary lines, not purchases
RECEIPT_ITEM_EXCLUSIONS = ["total", "tax"]

ITEM_LINE_PATTERN = re.compile(
    rf"(.+?)\s+{_CURRENCY_OPT}\s*(\d+(?:\.\d{{2}})?)",
    re.IGNORECASE,
)

MONTH_PREFIXES = [
    "jan", "feb", "mar", "apr", "may", "jun",
    "jul", "aug", "sep", "oct", "nov", "dec",
]

# (kind, pattern) pairs; "numeric" groups are (a, b, c) parts, "month_name"
# groups are (month, day, year)
DATE_PATTERNS = [
    # DD/MM/YYYY or DD-MM-YYYY
    ("numeric", re.compile(r"(?<!\d)(\d{1,2})[/\-](\d{1,2})[/\-](\d{4})(?!\d)")),
    # DD/MM/YY or DD-MM-YY
    ("numeric", re.compile(r"(?<!\d)(\d{1,2})[/\-](\d{1,2})[/\-](\d{2})(?!\d)")),
    # YYYY/MM/DD or YYYY-MM-DD
    ("numeric", re.compile(r"(?<!\d)(\d{4})[/\-](\d{1,2})[/\-](\d{1,2})(?!\d)")),
    # Month DD, YYYY
    (
        "month_name",
        re.compile(
            r"\b(" + "|".join(MONTH_PREFIXES) + r")[a-z]*\.?\s+(\d{1,2}),?\s+(\d{4})\b",
            re.IGNORECASE,
        ),
    ),
]
