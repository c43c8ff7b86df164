"""Pattern matching for LadderPy."""

from ladderpy.matching.pattern_matcher import PatternMatcher

__all__ = ["PatternMatcher"]
