"""Single-letter substitution variants of a word.

Variants are produced position-major: every other letter of the alphabet at
position 0 in increasing order, then position 1, and so on. The original
letter at a position is skipped, so a word of length L over a 26-letter
alphabet yields exactly L * 25 variants.
"""

from collections.abc import Iterator

from ladderpy.utils.constants import Constants


class WordNeighbors:
    """Lazy, single-use sequence of the one-letter variants of a word.

    Create a new instance to restart the enumeration. Each call to
    :meth:`next_word` builds a fresh string; the source word is never mutated.
    """

    def __init__(self, word: str, alphabet: str = Constants.ALPHABET):
        self.word = word
        self.alphabet = alphabet
        self._index = 0
        self._letter = -1

    def next_word(self) -> str | None:
        """Return the next variant, or None once all variants have been produced."""
        while self._index < len(self.word):
            self._letter += 1
            if self._letter == len(self.alphabet):
                self._index += 1
                self._letter = -1
                continue

            replacement = self.alphabet[self._letter]
            if replacement == self.word[self._index]:
                continue
            return self.word[: self._index] + replacement + self.word[self._index + 1 :]
        return None

    def __iter__(self) -> Iterator[str]:
        while (next_word := self.next_word()) is not None:
            yield next_word

