"""Pipeline stages for solving word ladders."""

from .data_models import DictionaryData, LadderResult, LadderSearchResult
from .dictionary_loading import load_dictionaries
from .ladder_search import solve_pair, solve_pairs
from .output_generation import format_text, results_to_records, write_results

__all__ = [
    # Data models
    "DictionaryData",
    "LadderResult",
    "LadderSearchResult",
    # Stage functions
    "load_dictionaries",
    "solve_pair",
    "solve_pairs",
    "write_results",
    # Rendering
    "format_text",
    "results_to_records",
]
