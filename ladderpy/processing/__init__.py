"""Processing pipeline for LadderPy."""

from ladderpy.processing.pipeline import run_pipeline

__all__ = ["run_pipeline"]
