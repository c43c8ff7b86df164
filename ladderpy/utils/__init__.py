"""Utility functions for LadderPy."""

from ladderpy.utils.constants import Constants
from ladderpy.utils.helpers import (
    compile_wildcard_regex,
    expand_file_path,
    format_time,
    write_output_file,
)
from ladderpy.utils.logging import add_log_file_handler, setup_logger

__all__ = [
    "Constants",
    "add_log_file_handler",
    "compile_wildcard_regex",
    "expand_file_path",
    "format_time",
    "setup_logger",
    "write_output_file",
]
