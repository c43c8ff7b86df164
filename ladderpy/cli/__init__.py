"""Command-line interface for LadderPy."""

from ladderpy.cli.parser import create_parser

__all__ = ["create_parser"]
