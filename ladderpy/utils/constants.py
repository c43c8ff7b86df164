"""Shared constants for LadderPy."""

import string


class Constants:
    """Project-wide constants."""

    # Alphabet the neighbor generator substitutes from
    ALPHABET = string.ascii_lowercase

    # Word lists shipped by the english-words package
    ENGLISH_WORDS_SOURCES = ("web2", "gcide")

    # Separator used when rendering a ladder as text
    LADDER_SEPARATOR = " -> "

    # Maximum number of offending words quoted in a validation error
    MAX_REPORTED_WORDS = 5

    # Characters never accepted inside a word list entry
    INVALID_WORD_CHARS = "\n\r\t\\ "
