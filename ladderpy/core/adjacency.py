"""Word adjacency test."""


def is_adjacent(word1: str, word2: str) -> bool:
    """Return True if the words have equal length and differ in exactly one position."""
    if len(word1) != len(word2):
        return False

    num_diff = 0
    for char1, char2 in zip(word1, word2):
        if char1 != char2:
            num_diff += 1
            if num_diff >= 2:
                return False
    return num_diff == 1
