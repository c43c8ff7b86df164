"""Unit tests for the end-to-end shortest ladder search.

Each test has exactly one assertion.
"""

import pytest

from ladderpy.core import InvalidInputError, find_ladders, is_adjacent


def _count_shortest_paths(start: str, end: str, words: set[str]) -> int:
    """Reference count of shortest paths using breadth-first path counting."""
    counts = {start: 1}
    frontier = {start}
    while frontier and end not in counts:
        next_counts: dict[str, int] = {}
        for word in frontier:
            for candidate in words:
                if candidate not in counts and is_adjacent(word, candidate):
                    next_counts[candidate] = next_counts.get(candidate, 0) + counts[word]
        counts.update(next_counts)
        frontier = set(next_counts)
    return counts.get(end, 0)


class TestFindLaddersExamples:
    """Test the documented example searches."""

    def test_classic_case_returns_both_ladders(self, classic_words: set[str]) -> None:
        """'hit' to 'cog' has exactly two shortest ladders."""
        assert find_ladders("hit", "cog", classic_words) == {
            ("hit", "hot", "dot", "dog", "cog"),
            ("hit", "hot", "lot", "log", "cog"),
        }

    def test_off_ladder_words_do_not_change_result(self, noisy_words: set[str]) -> None:
        """Extra dictionary words on no shortest ladder are ignored."""
        assert find_ladders("hit", "cog", noisy_words) == {
            ("hit", "hot", "dot", "dog", "cog"),
            ("hit", "hot", "lot", "log", "cog"),
        }

    def test_same_start_and_end_gives_single_word_ladder(self) -> None:
        """A word transforms into itself with a one-word ladder."""
        assert find_ladders("same", "same", {"same"}) == {("same",)}

    def test_unreachable_end_gives_empty_result(self) -> None:
        """Two words two letters apart with no bridge have no ladder."""
        assert find_ladders("hot", "dog", {"hot", "dog"}) == set()

    def test_absent_endpoints_give_empty_result(self) -> None:
        """Start and end must both be dictionary members."""
        assert find_ladders("hit", "cog", {"hot", "dot", "dog"}) == set()

    def test_absent_start_gives_empty_result(self, classic_words: set[str]) -> None:
        """A start missing from the dictionary yields no ladder."""
        assert find_ladders("hat", "cog", classic_words) == set()

    def test_same_word_absent_from_dictionary_gives_empty_result(self) -> None:
        """Membership is checked before the trivial case."""
        assert find_ladders("same", "same", set()) == set()

    def test_adjacent_endpoints_give_two_word_ladder(self) -> None:
        """Words one letter apart form a direct ladder."""
        assert find_ladders("hot", "hit", {"hot", "hit"}) == {("hot", "hit")}

    def test_reversed_search_mirrors_ladders(self, classic_words: set[str]) -> None:
        """Searching from the other end returns the same ladders reversed."""
        forward = find_ladders("hit", "cog", classic_words)
        assert find_ladders("cog", "hit", classic_words) == {
            tuple(reversed(ladder)) for ladder in forward
        }


class TestFindLaddersProperties:
    """Test ladder validity, minimality and completeness on a larger dictionary."""

    def test_every_ladder_starts_at_start(self, four_letter_words: set[str]) -> None:
        """Each ladder begins with the start word."""
        ladders = find_ladders("cold", "warm", four_letter_words)
        assert all(ladder[0] == "cold" for ladder in ladders)

    def test_every_ladder_ends_at_end(self, four_letter_words: set[str]) -> None:
        """Each ladder finishes with the end word."""
        ladders = find_ladders("cold", "warm", four_letter_words)
        assert all(ladder[-1] == "warm" for ladder in ladders)

    def test_consecutive_words_are_adjacent(self, four_letter_words: set[str]) -> None:
        """Every step changes exactly one letter."""
        ladders = find_ladders("cold", "warm", four_letter_words)
        assert all(
            is_adjacent(ladder[i], ladder[i + 1])
            for ladder in ladders
            for i in range(len(ladder) - 1)
        )

    def test_every_word_is_in_dictionary(self, four_letter_words: set[str]) -> None:
        """Intermediate words all come from the dictionary."""
        ladders = find_ladders("cold", "warm", four_letter_words)
        assert all(set(ladder) <= four_letter_words for ladder in ladders)

    def test_all_ladders_have_shortest_length(self, four_letter_words: set[str]) -> None:
        """Every ladder has 1 + shortest distance words."""
        ladders = find_ladders("cold", "warm", four_letter_words)
        assert {len(ladder) for ladder in ladders} == {5}

    def test_finds_every_shortest_ladder(self, four_letter_words: set[str]) -> None:
        """The number of ladders equals the reference shortest path count."""
        ladders = find_ladders("cold", "warm", four_letter_words)
        assert len(ladders) == _count_shortest_paths("cold", "warm", four_letter_words)

    def test_finds_more_than_one_ladder(self, four_letter_words: set[str]) -> None:
        """Several distinct routes connect 'cold' and 'warm'."""
        assert len(find_ladders("cold", "warm", four_letter_words)) > 1

    def test_ignores_words_of_other_lengths(self, classic_words: set[str]) -> None:
        """Without strict mode, words of other lengths are simply never reached."""
        assert len(find_ladders("hit", "cog", classic_words | {"hits", "cogs"})) == 2


class TestFindLaddersStrict:
    """Test opt-in input validation."""

    def test_strict_accepts_well_formed_input(self, classic_words: set[str]) -> None:
        """Well-formed input searches normally in strict mode."""
        assert len(find_ladders("hit", "cog", classic_words, strict=True)) == 2

    def test_strict_rejects_mixed_length_dictionary(self, classic_words: set[str]) -> None:
        """Dictionary words of another length are rejected."""
        with pytest.raises(InvalidInputError, match="not 3 letters long"):
            find_ladders("hit", "cog", classic_words | {"hits"}, strict=True)

    def test_strict_rejects_uppercase_endpoint(self, classic_words: set[str]) -> None:
        """Endpoints with characters outside a-z are rejected."""
        with pytest.raises(InvalidInputError, match="outside the alphabet"):
            find_ladders("Hit", "cog", classic_words, strict=True)

    def test_strict_still_returns_empty_for_absent_endpoint(self) -> None:
        """Missing endpoints are not errors, even in strict mode."""
        assert find_ladders("hit", "cog", {"hot", "dot", "dog"}, strict=True) == set()
