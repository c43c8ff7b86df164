"""Stage 1: Dictionary and pair loading."""

import time

from loguru import logger

from ladderpy.core import Config
from ladderpy.data import load_dictionary, load_pairs
from ladderpy.processing.stages.data_models import DictionaryData


def _collect_pairs(config: Config, verbose: bool) -> list[tuple[str, str]]:
    """Return the single configured pair or the pairs file contents."""
    if config.start is not None and config.end is not None:
        return [(config.start, config.end)]
    return load_pairs(config.pairs, verbose)


def load_dictionaries(config: Config, verbose: bool = False) -> DictionaryData:
    """Load the word pairs and the dictionary restricted to their word lengths.

    Args:
        config: Configuration object
        verbose: Whether to print verbose output

    Returns:
        DictionaryData containing the dictionary and pairs to solve
    """
    start_time = time.time()

    pairs = _collect_pairs(config, verbose)
    lengths = {len(word) for pair in pairs for word in pair}

    if pairs:
        words = load_dictionary(config, lengths, verbose)
    else:
        logger.warning("No word pairs to solve")
        words = set()

    return DictionaryData(
        words=words,
        pairs=pairs,
        elapsed_time=time.time() - start_time,
    )
