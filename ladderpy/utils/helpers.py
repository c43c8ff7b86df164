"""Shared utility functions for LadderPy."""

import os
from pathlib import Path
import re
from re import Pattern
from typing import Callable, TextIO

from loguru import logger


def compile_wildcard_regex(pattern: str) -> Pattern:
    """Converts a simple wildcard pattern (* syntax) to a compiled regex object.

    e.g., 'co*' -> '^co.*$', '*og' -> '^.*og$', '*o*' -> '^.*o.*$'
    """
    parts = [re.escape(part) for part in pattern.split("*")]
    regex_str = ".*".join(parts)
    return re.compile(f"^{regex_str}$")


def expand_file_path(filepath: str | None) -> str | None:
    """Expand user home directory in file path.

    Args:
        filepath: File path (may contain ~)

    Returns:
        Expanded file path string, or None if filepath is None
    """
    if not filepath:
        return None
    return os.path.expanduser(filepath)


def format_time(seconds: float) -> str:
    """Format time in seconds to human-readable string."""
    if seconds < 1:
        return f"{seconds * 1000:.1f}ms"
    if seconds < 60:
        return f"{seconds:.2f}s"
    minutes = int(seconds // 60)
    secs = seconds % 60
    return f"{minutes}m {secs:.2f}s"


def write_output_file(file_path: str | Path, content_writer: Callable[[TextIO], None]) -> None:
    """Open file_path for writing, creating missing parent directories, and fill it.

    Raises:
        OSError: If the directory or file cannot be written; PermissionError included
    """
    path = Path(file_path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            content_writer(f)
    except PermissionError:
        logger.error(f"✗ Permission denied writing ladders to {path}")
        raise
    except OSError as e:
        logger.error(f"✗ Could not write ladders to {path}: {e}")
        raise
