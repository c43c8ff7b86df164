"""Backtracking enumeration of ladders through a level sequence."""

from loguru import logger

from ladderpy.core.adjacency import is_adjacent
from ladderpy.core.types import Ladder, LevelSequence, Word


def _extend_paths(
    partial_path: list[Word],
    levels: LevelSequence,
    start_index: int,
    paths: set[Ladder],
) -> None:
    """Extend partial_path with one word from each level from start_index onward.

    Consecutive words in partial_path are assumed to be adjacent already.
    Complete paths are added to paths.
    """
    last_word = partial_path[-1] if partial_path else None
    is_last_level = start_index + 1 == len(levels)

    for next_word in levels[start_index]:
        if last_word is not None and not is_adjacent(last_word, next_word):
            continue
        partial_path.append(next_word)
        if is_last_level:
            paths.add(tuple(partial_path))
        else:
            _extend_paths(partial_path, levels, start_index + 1, paths)
        partial_path.pop()


def enumerate_paths(levels: LevelSequence) -> set[Ladder]:
    """Return every path that takes one word per level with adjacent neighbors.

    Args:
        levels: Level sequence, typically trimmed, whose first level holds the start word

    Returns:
        Set of ladders, each as long as levels; empty if levels is empty
    """
    paths: set[Ladder] = set()
    if levels:
        _extend_paths([], levels, 0, paths)
    logger.debug(f"Enumerated {len(paths)} paths across {len(levels)} levels")
    return paths
