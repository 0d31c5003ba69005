"""
Category rules loader.
Loads CSV files containing custom keyword and regex rules for categorization.
"""

import csv
import logging
import re
from typing import Dict
from pathlib import Path

from .parser_config import CATEGORY_TAXONOMY

logger = logging.getLogger(__name__)

VALID_RULE_KINDS = ("keyword", "regex")


def load_category_rules_csv(csv_path: str) -> Dict[str, Dict]:
    """
    Load a category pattern dictionary from a CSV file.

    Rows are kept in file order, so the first category to appear in the file
    is the first one checked by the classifier.

    Args:
        csv_path: Path to CSV file containing category rules

    Returns:
        Pattern dictionary in the same shape as the built-in tables

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If a row names an unknown category, kind, or bad regex

    Example CSV format:
        category,kind,value
        food,keyword,zomato
        food,regex,(?i)restaurant
        groceries,keyword,kirana
    """
    csv_file = Path(csv_path)
    if not csv_file.exists():
        raise FileNotFoundError(f"Category rules file not found: {csv_path}")

    allowed = {label.lower() for label in CATEGORY_TAXONOMY}
    patterns: Dict[str, Dict] = {}

    with open(csv_path, 'r', encoding='utf-8') as f:
        reader = csv.DictReader(f)
        for line_num, row in enumerate(reader, start=2):
            category = (row.get('category') or '').strip().lower()
            kind = (row.get('kind') or '').strip().lower()
            value = (row.get('value') or '').strip()

            if not category or not value:
                logger.warning(f"{csv_path}:{line_num}: skipping incomplete row")
                continue

            if category not in allowed:
                raise ValueError(
                    f"{csv_path}:{line_num}: unknown category '{category}'"
                )
            if kind not in VALID_RULE_KINDS:
                raise ValueError(
                    f"{csv_path}:{line_num}: rule kind must be one of "
                    f"{VALID_RULE_KINDS}, got '{kind}'"
                )

            entry = patterns.setdefault(category, {
                "keywords": [],
                "regex_patterns": [],
                "description": category.capitalize(),
            })

            if kind == "keyword":
                entry["keywords"].append(value.lower())
            else:
                try:
                    re.compile(value)
                except re.error as e:
                    raise ValueError(
                        f"{csv_path}:{line_num}: invalid regex '{value}': {e}"
                    )
                entry["regex_patterns"].append(value)

    logger.info(f"Loaded {len(patterns)} category rules from {csv_path}")
    return patterns
