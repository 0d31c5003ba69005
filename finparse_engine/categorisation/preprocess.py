"""
Preprocessing utilities for text categorization and extraction.
Handles text normalization, label formatting, and keyword gates.
"""

from typing import Iterable, List, Optional


def normalize_text(text: Optional[str]) -> str:
    """
    Normalize text for matching.

    Args:
        text: Raw text to normalize

    Returns:
        Normalized lowercase text
    """
    if not text:
        return ""
    return text.lower().strip()


def capitalize_label(name: str) -> str:
    """
    Turn a rule key into a category label.

    Only the first character is changed; the remainder is kept as given.

    Example:
        >>> capitalize_label("food")
        'Food'
    """
    if not name:
        return name
    return name[0].upper() + name[1:]


def contains_any(text: str, keywords: Iterable[str]) -> bool:
    """
    Check if text contains any of the keywords as a substring.

    Args:
        text: Normalized text
        keywords: Lowercase keywords to look for

    Returns:
        True if at least one keyword is present
    """
    for keyword in keywords:
        if keyword in text:
            return True
    return False


def non_empty_lines(text: str) -> List[str]:
    """Split text into trimmed lines, dropping blank ones."""
    return [line.strip() for line in text.splitlines() if line.strip()]
