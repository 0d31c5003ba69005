"""
Parser configuration for the financial text engine.
Contains sentinels, extraction bounds, and suggestion scoring weights.
"""

# Closed set of labels the classifier may return
CATEGORY_TAXONOMY = [
    "Food",
    "Shopping",
    "Travel",
    "Entertainment",
    "Bills",
    "Healthcare",
    "Education",
    "Groceries",
    "Transport",
    "Other",
]

# Returned when no rule matches
DEFAULT_CATEGORY = "Other"


PARSER_CONFIG = {
    # SMS / UPI notification parsing
    "message": {
        "unknown_merchant": "Unknown",
        # Records at or below this amount are treated as "not found"
        "min_amount": 0.0,
    },

    # Receipt OCR parsing
    "receipt": {
        "unknown_merchant": "Unknown Merchant",
        # Merchant name is looked for in the first N non-empty lines
        "merchant_scan_lines": 5,
        # Exclusive bounds on merchant line length
        "merchant_min_length": 3,
        "merchant_max_length": 50,
        # Exclusive upper bound on a line item price
        "max_item_price": 10000.0,
        "default_quantity": 1,
    },

    # Ranked suggestion scoring
    "suggestion": {
        "keyword_weight": 10,
        "pattern_weight": 5,
        "normalizer": 20,
        "max_confidence": 1.0,
        "default_top_n": 3,
    },

    # Short keywords ("ola", "jio") produce noisy partial ratios
    "fuzzy_min_keyword_length": 4,
}
