"""Core domain logic for LadderPy."""

from .adjacency import is_adjacent
from .config import Config, load_config
from .ladders import find_ladders
from .levels import build_levels, trim_levels
from .neighbors import WordNeighbors
from .paths import enumerate_paths
from .types import Ladder, Level, LevelSequence, Word
from .validation import InvalidInputError, validate_inputs

__all__ = [
    "Config",
    "InvalidInputError",
    "Ladder",
    "Level",
    "LevelSequence",
    "Word",
    "WordNeighbors",
    "build_levels",
    "enumerate_paths",
    "find_ladders",
    "is_adjacent",
    "load_config",
    "trim_levels",
    "validate_inputs",
]
