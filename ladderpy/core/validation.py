"""Input validation for ladder searches."""

from collections.abc import Collection

from ladderpy.utils.constants import Constants


class InvalidInputError(ValueError):
    """Raised when words do not share one length or leave the alphabet."""


def _format_words(words: Collection[str]) -> str:
    shown = sorted(words)[: Constants.MAX_REPORTED_WORDS]
    suffix = ", ..." if len(words) > len(shown) else ""
    return ", ".join(repr(word) for word in shown) + suffix


def validate_inputs(
    start: str,
    end: str,
    dictionary: Collection[str],
    alphabet: str = Constants.ALPHABET,
) -> None:
    """Check that start, end and every dictionary word fit one length and alphabet.

    Raises:
        InvalidInputError: If any word has the wrong length or a character outside alphabet
    """
    allowed = set(alphabet)

    if len(start) != len(end):
        raise InvalidInputError(
            f"start '{start}' and end '{end}' differ in length ({len(start)} != {len(end)})"
        )

    for endpoint in (start, end):
        if not set(endpoint) <= allowed:
            raise InvalidInputError(f"'{endpoint}' contains characters outside the alphabet")

    wrong_length = {word for word in dictionary if len(word) != len(start)}
    if wrong_length:
        raise InvalidInputError(
            f"{len(wrong_length)} dictionary words are not {len(start)} letters long: "
            f"{_format_words(wrong_length)}"
        )

    bad_chars = {word for word in dictionary if not set(word) <= allowed}
    if bad_chars:
        raise InvalidInputError(
            f"{len(bad_chars)} dictionary words contain characters outside the alphabet: "
            f"{_format_words(bad_chars)}"
        )
