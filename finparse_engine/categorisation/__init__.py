"""
Categorisation Module for the financial text engine.

Maps free text onto the spending category taxonomy through:
- Preprocessing (normalization, label formatting)
- Pattern matching (keyword, regex and fuzzy)
- Rule sets per consuming context (SMS, receipt, general)
"""

from .engine import (
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
from .preprocess import (
    normalize_text,
    capitalize_label,
    contains_any,
    non_empty_lines,
)
from .pattern_matching import (
    match_keywords,
    match_regex_patterns,
    fuzzy_match_keywords,
    count_keyword_hits,
    count_regex_hits,
)

__all__ = [
    # Main classifier
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
    # Preprocessing utilities
    "normalize_text",
    "capitalize_label",
    "contains_any",
    "non_empty_lines",
    # Pattern matching utilities
    "match_keywords",
    "match_regex_patterns",
    "fuzzy_match_keywords",
    "count_keyword_hits",
    "count_regex_hits",
]
