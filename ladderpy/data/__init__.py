"""Data loading for LadderPy."""

from ladderpy.data.dictionary import (
    load_base_words,
    load_dictionary,
    load_exclusions,
    load_pairs,
    load_word_list,
)

__all__ = [
    "load_base_words",
    "load_dictionary",
    "load_exclusions",
    "load_pairs",
    "load_word_list",
]
