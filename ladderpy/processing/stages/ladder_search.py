"""Stage 2: Ladder search with multiprocessing support."""

from collections.abc import Collection
from multiprocessing import Pool
import time
from typing import Any

from loguru import logger
from tqdm import tqdm

from ladderpy.core import Config, find_ladders
from ladderpy.processing.stages.data_models import (
    DictionaryData,
    LadderResult,
    LadderSearchResult,
)
from ladderpy.processing.stages.worker_context import (
    WorkerContext,
    get_worker_context,
    init_worker,
)


def words_of_length(dictionary: Collection[str], length: int) -> set[str]:
    """Return the dictionary words with exactly length letters."""
    return {word for word in dictionary if len(word) == length}


def solve_pair(
    pair: tuple[str, str], dictionary: Collection[str], strict: bool = False
) -> LadderResult:
    """Find all shortest ladders for one pair, sorted for stable output.

    Only dictionary words as long as the start word take part, so one
    dictionary can serve pairs of several lengths.
    """
    start, end = pair
    words = words_of_length(dictionary, len(start))
    ladders = sorted(list(ladder) for ladder in find_ladders(start, end, words, strict=strict))
    result = LadderResult(start=start, end=end, ladders=ladders)
    logger.debug(f"{start} -> {end}: {len(ladders)} ladders")
    return result


def solve_pair_worker(indexed_pair: tuple[int, tuple[str, str]]) -> tuple[int, LadderResult]:
    """Worker function for multiprocessing.

    Returns:
        Tuple of (input position, result) so results can be put back in order
    """
    context = get_worker_context()
    index, pair = indexed_pair
    return index, solve_pair(pair, context.dictionary, context.strict)


def _process_multiprocessing(
    dict_data: DictionaryData, config: Config, verbose: bool
) -> list[LadderResult]:
    """Solve pairs using a worker pool."""
    if verbose:
        logger.info(f"  Using {config.jobs} parallel workers")

    context = WorkerContext.from_dict_data(dict_data, config)
    results: list[LadderResult | None] = [None] * len(dict_data.pairs)

    with Pool(
        processes=config.jobs,
        initializer=init_worker,
        initargs=(context,),
    ) as pool:
        solved = pool.imap_unordered(solve_pair_worker, enumerate(dict_data.pairs))

        if verbose:
            solved_iter: Any = tqdm(
                solved, total=len(dict_data.pairs), desc="Solving pairs", unit="pair"
            )
        else:
            solved_iter = solved

        for index, result in solved_iter:
            results[index] = result

    return [result for result in results if result is not None]


def _process_single_threaded(
    dict_data: DictionaryData, config: Config, verbose: bool
) -> list[LadderResult]:
    """Solve pairs in the current process."""
    if verbose:
        pairs_iter: Any = tqdm(dict_data.pairs, desc="Solving pairs", unit="pair")
    else:
        pairs_iter = dict_data.pairs

    return [solve_pair(pair, dict_data.words, config.strict) for pair in pairs_iter]


def solve_pairs(
    dict_data: DictionaryData, config: Config, verbose: bool = False
) -> LadderSearchResult:
    """Find all shortest ladders for every loaded pair, in input order.

    Args:
        dict_data: Dictionary data from loading stage
        config: Configuration object
        verbose: Whether to print verbose output

    Returns:
        LadderSearchResult with one LadderResult per pair
    """
    start_time = time.time()

    if verbose:
        logger.info(f"  Solving {len(dict_data.pairs)} pairs...")

    if config.jobs > 1 and len(dict_data.pairs) > 1:
        results = _process_multiprocessing(dict_data, config, verbose)
    else:
        results = _process_single_threaded(dict_data, config, verbose)

    return LadderSearchResult(results=results, elapsed_time=time.time() - start_time)
