"""LadderPy - Shortest word ladder finder.

Find every shortest sequence of dictionary words that turns one word into
another by changing a single letter at a time.
"""

from ladderpy.core import Config, InvalidInputError, find_ladders, load_config
from ladderpy.processing import run_pipeline
from ladderpy.utils.logging import setup_logger

__version__ = "0.1.0"
__all__ = [
    "Config",
    "InvalidInputError",
    "find_ladders",
    "load_config",
    "run_pipeline",
    "setup_logger",
]
