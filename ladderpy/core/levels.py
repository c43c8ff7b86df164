"""Breadth-first layering of the word graph and level trimming."""

from collections.abc import Collection

from loguru import logger

from ladderpy.core.adjacency import is_adjacent
from ladderpy.core.neighbors import WordNeighbors
from ladderpy.core.types import Level, LevelSequence, Word


def _next_level(
    current_level: Level,
    previous_level: Level,
    target: Word,
    dictionary: Collection[Word],
) -> tuple[Level, bool]:
    """Collect the words one step beyond current_level.

    Returns:
        Tuple of (new level, whether target was reached). When the target is
        reached the new level holds only the target.
    """
    new_level: Level = set()
    for word in current_level:
        neighbors = WordNeighbors(word)
        next_word = neighbors.next_word()
        while next_word is not None:
            if (
                next_word in dictionary
                and next_word not in current_level
                and next_word not in previous_level
            ):
                if next_word == target:
                    return {target}, True
                new_level.add(next_word)
            next_word = neighbors.next_word()
    return new_level, False


def build_levels(
    source: Word, target: Word, dictionary: Collection[Word]
) -> LevelSequence | None:
    """Layer the dictionary by breadth-first distance from source until target is found.

    A candidate is admitted to the next level only if it is in the dictionary
    and absent from the current and previous levels. Adjacency is symmetric,
    so a neighbor of a word at distance k sits at distance k-1, k or k+1 and
    the two-level look-back is enough to keep levels disjoint.

    Args:
        source: Word placed alone in level 0
        target: Word that ends the search; the final level is exactly {target}
        dictionary: Words that may appear in any level

    Returns:
        The list of levels from {source} to {target}, or None if target is unreachable
    """
    levels: LevelSequence = [{source}]
    current_level: Level = levels[0]
    previous_level: Level = set()

    while True:
        new_level, reached = _next_level(current_level, previous_level, target, dictionary)
        if not new_level:
            logger.debug(f"'{target}' unreachable from '{source}' after {len(levels)} levels")
            return None

        levels.append(new_level)
        if reached:
            logger.debug(f"Reached '{target}' from '{source}' in {len(levels) - 1} steps")
            return levels

        logger.debug(f"Level {len(levels) - 1}: {len(new_level)} words")
        previous_level, current_level = current_level, new_level


def trim_levels(levels: LevelSequence) -> LevelSequence:
    """Keep only words that chain back to the first level.

    The first level is kept as is. Every later level keeps the words adjacent
    to at least one kept word of the level before it. The sequence stops at
    the first level that trims to nothing.
    """
    if not levels:
        return []

    trimmed: LevelSequence = [levels[0]]
    for level in levels[1:]:
        previous_level = trimmed[-1]
        new_level = {
            word
            for word in level
            if any(is_adjacent(word, previous) for previous in previous_level)
        }
        if not new_level:
            logger.debug(f"Trimming stopped at level {len(trimmed)}")
            break

        removed = len(level) - len(new_level)
        if removed:
            logger.debug(f"Trimmed {removed} words from level {len(trimmed)}")
        trimmed.append(new_level)
    return trimmed
