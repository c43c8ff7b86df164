"""Matching of exact words and wildcard patterns used for dictionary exclusions."""

from collections.abc import Iterable
from re import Pattern

from ladderpy.utils import compile_wildcard_regex


class PatternMatcher:
    """Matcher for exact strings and wildcard patterns.

    Patterns containing '*' are treated as wildcards (e.g., '*og', 'co*', '*o*').
    All other patterns are treated as exact matches. Wildcards are compiled once.
    """

    def __init__(self, patterns: Iterable[str]):
        self.exact_patterns: set[str] = set()
        self.wildcard_regexes: list[Pattern] = []

        for pattern in patterns:
            if "*" in pattern:
                self.wildcard_regexes.append(compile_wildcard_regex(pattern))
            else:
                self.exact_patterns.add(pattern)

    def matches(self, text: str) -> bool:
        """Check if text matches any pattern (exact or wildcard)."""
        if text in self.exact_patterns:
            return True
        return any(regex.match(text) for regex in self.wildcard_regexes)

    def filter_set(self, items: Iterable[str]) -> set[str]:
        """Return items that do NOT match any pattern."""
        return {item for item in items if not self.matches(item)}
