"""
Generic Pattern Matching for Text Categorization.

Provides reusable pattern matching logic for keyword and regex-based categorization.
"""

import re
from typing import List, Optional, Pattern, Sequence, Tuple

from rapidfuzz import fuzz


def match_keywords(
    text: str,
    keywords: Sequence[str],
) -> Optional[str]:
    """
    Find the first keyword that occurs in text.

    Args:
        text: Normalized text to match
        keywords: Lowercase keyword strings

    Returns:
        The matched keyword or None

    Example:
        >>> match_keywords("zomato order", ["swiggy", "zomato"])
        'zomato'
    """
    for keyword in keywords:
        if keyword in text:
            return keyword
    return None


def match_regex_patterns(
    text: str,
    patterns: Sequence[Pattern],
) -> Optional[str]:
    """
    Find the first compiled pattern that matches text.

    Args:
        text: Text to match
        patterns: Compiled regex patterns

    Returns:
        The matched pattern source or None
    """
    for pattern in patterns:
        if pattern.search(text):
            return pattern.pattern
    return None


def fuzzy_match_keywords(
    text: str,
    keywords: Sequence[str],
    threshold: int,
    min_keyword_length: int = 0,
) -> Optional[Tuple[str, float]]:
    """
    Fuzzy-match keywords against text using rapidfuzz partial ratio.

    Args:
        text: Normalized text to match
        keywords: Lowercase keyword strings
        threshold: Minimum score (0-100) to accept a match
        min_keyword_length: Keywords shorter than this are ignored

    Returns:
        Tuple of (best_keyword, confidence) or None
    """
    best_score = 0.0
    best_match = None
    for keyword in keywords:
        if len(keyword) < min_keyword_length:
            continue
        score = fuzz.partial_ratio(keyword, text)
        if score > best_score and score >= threshold:
            best_score = score
            best_match = keyword

    if best_match:
        return (best_match, best_score / 100.0)
    return None


def count_keyword_hits(text: str, keywords: Sequence[str]) -> int:
    """Count how many distinct keywords occur in text."""
    return sum(1 for keyword in keywords if keyword in text)


def count_regex_hits(text: str, patterns: Sequence[Pattern]) -> int:
    """Count how many patterns match text."""
    return sum(1 for pattern in patterns if pattern.search(text))


def compile_patterns(patterns: Sequence[str]) -> List[Pattern]:
    """
    Compile regex pattern strings.

    Raises:
        ValueError: If a pattern is not a valid regex
    """
    compiled = []
    for pattern in patterns:
        try:
            compiled.append(re.compile(pattern))
        except re.error as e:
            raise ValueError(f"Invalid regex pattern '{pattern}': {e}")
    return compiled
