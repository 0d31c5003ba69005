"""
Ordered extraction strategies.

An extractor is a list of strategies tried in sequence; the first one that
produces a value wins.
"""

from typing import Callable, Optional, Pattern, Sequence, TypeVar

T = TypeVar("T")

Strategy = Callable[[str], Optional[T]]


def first_match(strategies: Sequence[Strategy], text: str) -> Optional[T]:
    """
    Run strategies in order and return the first non-None result.

    Args:
        strategies: Callables taking the text and returning a value or None
        text: Text to extract from

    Returns:
        First value produced, or None if every strategy misses
    """
    for strategy in strategies:
        result = strategy(text)
        if result is not None:
            return result
    return None


def regex_strategy(
    pattern: Pattern,
    convert: Callable[[str], Optional[T]],
    group: int = 1
) -> Strategy:
    """
    Build a strategy from a compiled pattern.

    Only the first match of the pattern is considered. The converter may
    return None to reject it, which hands over to the next strategy.
    """
    def _strategy(text: str) -> Optional[T]:
        match = pattern.search(text)
        if not match or not match.group(group):
            return None
        return convert(match.group(group))

    return _strategy
