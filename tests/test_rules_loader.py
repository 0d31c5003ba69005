"""
Tests for loading custom category rules from CSV.
"""

import os
import tempfile
import unittest

from finparse_engine.categorisation.engine import CategoryClassifier, CategoryRuleSet
from finparse_engine.config.rules_loader import load_category_rules_csv


class TestLoadCategoryRulesCsv(unittest.TestCase):
    """Test CSV rule loading."""

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.tmpdir.cleanup()

    def _write(self, content: str) -> str:
        path = os.path.join(self.tmpdir.name, "rules.csv")
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
        return path

    def test_loads_rules_in_file_order(self):
        """Test that categories keep the order they first appear in."""
        path = self._write(
            "category,kind,value\n"
            "groceries,keyword,Kirana\n"
            "food,keyword,dhaba\n"
            "food,regex,(?i)tiffin\n"
        )
        patterns = load_category_rules_csv(path)

        self.assertEqual(list(patterns), ["groceries", "food"])
        self.assertEqual(patterns["groceries"]["keywords"], ["kirana"])
        self.assertEqual(patterns["food"]["keywords"], ["dhaba"])
        self.assertEqual(patterns["food"]["regex_patterns"], ["(?i)tiffin"])

    def test_loaded_rules_drive_classifier(self):
        path = self._write(
            "category,kind,value\n"
            "groceries,keyword,kirana\n"
            "food,regex,(?i)tiffin\n"
        )
        rule_set = CategoryRuleSet.from_pattern_dict("custom", load_category_rules_csv(path))
        classifier = CategoryClassifier(rule_set)

        self.assertEqual(classifier.classify("Sharma Kirana"), "Groceries")
        self.assertEqual(classifier.classify("TIFFIN CENTRE"), "Food")
        self.assertEqual(classifier.classify("something else"), "Other")

    def test_incomplete_rows_skipped(self):
        path = self._write(
            "category,kind,value\n"
            "food,keyword,\n"
            ",keyword,zomato\n"
            "food,keyword,swiggy\n"
        )
        patterns = load_category_rules_csv(path)
        self.assertEqual(patterns["food"]["keywords"], ["swiggy"])

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            load_category_rules_csv(os.path.join(self.tmpdir.name, "missing.csv"))

    def test_unknown_category(self):
        path = self._write("category,kind,value\nsalary,keyword,payroll\n")
        with self.assertRaises(ValueError):
            load_category_rules_csv(path)

    def test_unknown_kind(self):
        path = self._write("category,kind,value\nfood,fuzzy,zomato\n")
        with self.assertRaises(ValueError):
            load_category_rules_csv(path)

    def test_invalid_regex(self):
        path = self._write("category,kind,value\nfood,regex,([\n")
        with self.assertRaises(ValueError):
            load_category_rules_csv(path)


if __name__ == "__main__":
    unittest.main()
