"""Find all shortest word ladders between two words."""

from collections.abc import Collection

from loguru import logger

from ladderpy.core.levels import build_levels, trim_levels
from ladderpy.core.paths import enumerate_paths
from ladderpy.core.types import Ladder
from ladderpy.core.validation import validate_inputs


def find_ladders(
    start: str, end: str, dictionary: Collection[str], *, strict: bool = False
) -> set[Ladder]:
    """Return every shortest ladder from start to end through dictionary words.

    Levels are built breadth-first from end toward start, reversed, then
    trimmed from start so only words on a valid chain from start survive.

    Args:
        start: First word of every ladder
        end: Last word of every ladder
        dictionary: Allowed words; start and end must both be members
        strict: Validate word lengths and alphabet before searching

    Returns:
        Set of ladders of equal, minimal length; empty if either endpoint is
        missing from dictionary or end is unreachable

    Raises:
        InvalidInputError: If strict is set and the inputs are malformed
    """
    if strict:
        validate_inputs(start, end, dictionary)

    if start not in dictionary or end not in dictionary:
        logger.debug(f"'{start}' or '{end}' not in dictionary")
        return set()

    if start == end:
        return {(start,)}

    levels = build_levels(end, start, dictionary)
    if levels is None:
        return set()

    levels.reverse()
    levels = trim_levels(levels)
    return enumerate_paths(levels)
