"""Main processing pipeline orchestration."""

import time

from loguru import logger

from ladderpy.core import Config
from ladderpy.processing.stages import (
    LadderResult,
    load_dictionaries,
    solve_pairs,
    write_results,
)
from ladderpy.utils import format_time


def run_pipeline(config: Config) -> list[LadderResult]:
    """Load the dictionary, solve every pair and write the ladders.

    Args:
        config: Configuration object containing all settings

    Returns:
        One LadderResult per pair, in input order
    """
    start_time = time.time()
    verbose = config.verbose

    # Stage 1: Load dictionary and pairs
    if verbose:
        logger.info("Stage 1: Loading dictionary...")
    dict_data = load_dictionaries(config, verbose)
    if verbose:
        logger.info(f"  Completed in {format_time(dict_data.elapsed_time)}")
        logger.info("")

    # Stage 2: Search
    if verbose:
        logger.info("Stage 2: Searching for ladders...")
    search_result = solve_pairs(dict_data, config, verbose)
    if verbose:
        solved = sum(1 for result in search_result.results if result.ladders)
        logger.info(f"  Found ladders for {solved}/{len(search_result.results)} pairs")
        logger.info(f"  Completed in {format_time(search_result.elapsed_time)}")
        logger.info("")

    # Stage 3: Output
    write_results(search_result.results, config, verbose)

    if verbose:
        logger.info(f"Total processing time: {format_time(time.time() - start_time)}")

    return search_result.results
