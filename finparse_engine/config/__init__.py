"""
Configuration module for the financial text engine.

This module contains parser configuration and the category taxonomy.
"""

from .parser_config import PARSER_CONFIG, CATEGORY_TAXONOMY, DEFAULT_CATEGORY
from .rules_loader import load_category_rules_csv

__all__ = [
    "PARSER_CONFIG",
    "CATEGORY_TAXONOMY",
    "DEFAULT_CATEGORY",
    "load_category_rules_csv",
]
