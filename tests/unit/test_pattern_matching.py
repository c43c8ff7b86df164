"""Unit tests for the pattern matching module.

Each test has a single assertion and uses type hints.
"""

from ladderpy.matching import PatternMatcher

# pylint: disable=missing-function-docstring


class TestPatternMatcherMatches:
    """Test the matches() method with various patterns and text."""

    def test_empty_matcher_matches_nothing(self) -> None:
        assert PatternMatcher(set()).matches("anything") is False

    def test_matches_exact_pattern(self) -> None:
        assert PatternMatcher({"dog"}).matches("dog") is True

    def test_does_not_match_different_exact(self) -> None:
        assert PatternMatcher({"dog"}).matches("dot") is False

    def test_matches_prefix_wildcard(self) -> None:
        assert PatternMatcher({"*og"}).matches("cog") is True

    def test_matches_suffix_wildcard(self) -> None:
        assert PatternMatcher({"co*"}).matches("cold") is True

    def test_matches_middle_wildcard(self) -> None:
        assert PatternMatcher({"*o*"}).matches("hot") is True

    def test_wildcard_does_not_match_partial(self) -> None:
        assert PatternMatcher({"*og"}).matches("cot") is False

    def test_escapes_regex_characters(self) -> None:
        assert PatternMatcher({"a.c*"}).matches("abcd") is False

    def test_accepts_list_input(self) -> None:
        assert PatternMatcher(["dog", "*at"]).matches("cat") is True


class TestPatternMatcherFilterSet:
    """Test the filter_set() method."""

    def test_removes_matching_words(self) -> None:
        matcher = PatternMatcher({"*og", "hit"})
        assert matcher.filter_set({"hit", "hot", "dog", "cog"}) == {"hot"}

    def test_keeps_everything_without_patterns(self) -> None:
        assert PatternMatcher([]).filter_set({"hit", "hot"}) == {"hit", "hot"}
