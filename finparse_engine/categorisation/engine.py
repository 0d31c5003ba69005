"""
Category Classifier for free-text financial descriptions.
Maps merchant names, titles, and messages onto the spending taxonomy.
"""

import logging
from typing import Dict, List, Optional, Pattern, Tuple
from dataclasses import dataclass, field

from ..config.parser_config import PARSER_CONFIG, CATEGORY_TAXONOMY, DEFAULT_CATEGORY
from ..patterns.category_patterns import (
    SMS_CATEGORY_PATTERNS,
    RECEIPT_CATEGORY_PATTERNS,
    GENERAL_CATEGORY_PATTERNS,
)
from .pattern_matching import (
    match_keywords,
    match_regex_patterns,
    fuzzy_match_keywords,
    count_keyword_hits,
    count_regex_hits,
    compile_patterns,
)
from .preprocess import normalize_text, capitalize_label

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CategoryRule:
    """Keywords and regex patterns that identify one category."""
    name: str
    keywords: Tuple[str, ...] = ()
    regex_patterns: Tuple[str, ...] = ()
    description: str = ""
    compiled_patterns: Tuple[Pattern, ...] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self):
        if capitalize_label(self.name) not in CATEGORY_TAXONOMY:
            raise ValueError(
                f"Rule '{self.name}' is not in the category taxonomy: {CATEGORY_TAXONOMY}"
            )
        object.__setattr__(self, "keywords", tuple(k.lower() for k in self.keywords))
        object.__setattr__(self, "regex_patterns", tuple(self.regex_patterns))
        object.__setattr__(
            self, "compiled_patterns", tuple(compile_patterns(self.regex_patterns))
        )

    @property
    def label(self) -> str:
        """Capitalized category label returned to callers."""
        return capitalize_label(self.name)


@dataclass(frozen=True)
class CategoryRuleSet:
    """Ordered collection of category rules; earlier rules win ties."""
    name: str
    rules: Tuple[CategoryRule, ...]

    @classmethod
    def from_pattern_dict(cls, name: str, pattern_dict: Dict[str, Dict]) -> "CategoryRuleSet":
        """
        Build a rule set from a pattern dictionary.

        Pattern dict format:
        {
            "category_name": {
                "keywords": ["keyword1", "keyword2"],
                "regex_patterns": [r"(?i)pattern1"],
                "description": "Category Description",
            }
        }

        Dictionary order is kept as rule order.

        Raises:
            ValueError: If a category is outside the taxonomy or a regex is invalid
        """
        rules = tuple(
            CategoryRule(
                name=category_name,
                keywords=tuple(info.get("keywords", [])),
                regex_patterns=tuple(info.get("regex_patterns", [])),
                description=info.get("description", ""),
            )
            for category_name, info in pattern_dict.items()
        )
        return cls(name=name, rules=rules)

    @property
    def labels(self) -> List[str]:
        return [rule.label for rule in self.rules]


SMS_RULES = CategoryRuleSet.from_pattern_dict("sms", SMS_CATEGORY_PATTERNS)
RECEIPT_RULES = CategoryRuleSet.from_pattern_dict("receipt", RECEIPT_CATEGORY_PATTERNS)
GENERAL_RULES = CategoryRuleSet.from_pattern_dict("general", GENERAL_CATEGORY_PATTERNS)


@dataclass
class CategoryMatch:
    """Result of text categorization."""
    category: str
    confidence: float
    match_method: str  # 'keyword', 'regex', 'fuzzy', 'default'
    matched_term: Optional[str] = None
    rule_set: str = ""
    debug_rationale: Optional[str] = None  # Optional debug information


@dataclass
class CategorySuggestion:
    """One ranked category suggestion."""
    category: str
    confidence: float

    def to_dict(self) -> Dict:
        return {"category": self.category, "confidence": self.confidence}


class CategoryClassifier:
    """Classifies free text into the spending category taxonomy."""

    def __init__(
        self,
        rule_set: Optional[CategoryRuleSet] = None,
        fuzzy_threshold: Optional[int] = None,
        debug_mode: bool = False
    ):
        """Initialize the classifier with a rule set.

        Args:
            rule_set: Ordered category rules (defaults to GENERAL_RULES)
            fuzzy_threshold: If set (0-100), fall back to fuzzy keyword
                matching when no exact rule matches
            debug_mode: If True, emit detailed rationale for categorization decisions
        """
        self.rule_set = rule_set or GENERAL_RULES
        self.fuzzy_threshold = fuzzy_threshold
        self.debug_mode = debug_mode

    def _build_debug_rationale(self, match_type: str, details: str = "") -> Optional[str]:
        """Build debug rationale string if debug mode is enabled."""
        if not self.debug_mode:
            return None

        if details:
            return f"{match_type}: {details}"
        return match_type

    def _default_match(self, reason: str) -> CategoryMatch:
        return CategoryMatch(
            category=DEFAULT_CATEGORY,
            confidence=0.0,
            match_method="default",
            rule_set=self.rule_set.name,
            debug_rationale=self._build_debug_rationale("default", reason),
        )

    def match(self, text: Optional[str]) -> CategoryMatch:
        """
        Categorize text, reporting how the category was found.

        Rules are checked in declaration order and the first rule whose
        keywords or patterns match wins.

        Args:
            text: Merchant name, title, or message

        Returns:
            CategoryMatch with the winning category
        """
        normalized = normalize_text(text)
        if not normalized:
            return self._default_match("empty text")

        for rule in self.rule_set.rules:
            keyword = match_keywords(normalized, rule.keywords)
            if keyword:
                return CategoryMatch(
                    category=rule.label,
                    confidence=1.0,
                    match_method="keyword",
                    matched_term=keyword,
                    rule_set=self.rule_set.name,
                    debug_rationale=self._build_debug_rationale(
                        "keyword", f"'{keyword}' -> {rule.label}"
                    ),
                )

            pattern = match_regex_patterns(normalized, rule.compiled_patterns)
            if pattern:
                return CategoryMatch(
                    category=rule.label,
                    confidence=1.0,
                    match_method="regex",
                    matched_term=pattern,
                    rule_set=self.rule_set.name,
                    debug_rationale=self._build_debug_rationale(
                        "regex", f"/{pattern}/ -> {rule.label}"
                    ),
                )

        if self.fuzzy_threshold is not None:
            min_length = PARSER_CONFIG["fuzzy_min_keyword_length"]
            for rule in self.rule_set.rules:
                fuzzy = fuzzy_match_keywords(
                    normalized, rule.keywords, self.fuzzy_threshold, min_length
                )
                if fuzzy:
                    keyword, confidence = fuzzy
                    return CategoryMatch(
                        category=rule.label,
                        confidence=confidence,
                        match_method="fuzzy",
                        matched_term=keyword,
                        rule_set=self.rule_set.name,
                        debug_rationale=self._build_debug_rationale(
                            "fuzzy", f"'{keyword}' ({confidence:.2f}) -> {rule.label}"
                        ),
                    )

        logger.debug(f"No {self.rule_set.name} rule matched '{normalized}'")
        return self._default_match("no rule matched")

    def classify(self, text: Optional[str]) -> str:
        """
        Categorize text into a single taxonomy label.

        Args:
            text: Merchant name, title, or message

        Returns:
            Capitalized category label, "Other" when nothing matches
        """
        return self.match(text).category

    def suggest(self, text: Optional[str], top_n: Optional[int] = None) -> List[CategorySuggestion]:
        """
        Rank categories by how strongly text matches them.

        Every rule is scored independently: each keyword hit and each
        pattern hit adds its weight, and the total is normalized into a
        0-1 confidence.

        Args:
            text: Merchant name, title, or message
            top_n: Maximum number of suggestions (default 3)

        Returns:
            Suggestions sorted by descending confidence, rule order on ties
        """
        weights = PARSER_CONFIG["suggestion"]
        if top_n is None:
            top_n = weights["default_top_n"]

        normalized = normalize_text(text)
        if not normalized or top_n <= 0:
            return []

        suggestions = []
        for rule in self.rule_set.rules:
            score = (
                count_keyword_hits(normalized, rule.keywords) * weights["keyword_weight"]
                + count_regex_hits(normalized, rule.compiled_patterns) * weights["pattern_weight"]
            )
            if score > 0:
                confidence = min(score / weights["normalizer"], weights["max_confidence"])
                suggestions.append(CategorySuggestion(category=rule.label, confidence=confidence))

        # sorted() is stable, so equal confidences keep rule order
        suggestions = sorted(suggestions, key=lambda s: s.confidence, reverse=True)
        return suggestions[:top_n]


_default_classifiers: Dict[str, CategoryClassifier] = {}


def _classifier_for(rule_set: CategoryRuleSet) -> CategoryClassifier:
    classifier = _default_classifiers.get(rule_set.name)
    if classifier is None or classifier.rule_set is not rule_set:
        classifier = CategoryClassifier(rule_set)
        _default_classifiers[rule_set.name] = classifier
    return classifier


def classify(text: Optional[str], rule_set: CategoryRuleSet = GENERAL_RULES) -> str:
    """Categorize text with a shared classifier for the given rule set."""
    return _classifier_for(rule_set).classify(text)


def suggest(
    text: Optional[str],
    top_n: Optional[int] = None,
    rule_set: CategoryRuleSet = GENERAL_RULES
) -> List[CategorySuggestion]:
    """Rank categories for text with a shared classifier for the given rule set."""
    return _classifier_for(rule_set).suggest(text, top_n)
