"""Data models for passing information between pipeline stages."""

from pydantic import BaseModel, Field


class StageResult(BaseModel):
    """Base class for stage results with timing."""

    elapsed_time: float = Field(0.0, ge=0)


class DictionaryData(StageResult):
    """Output from dictionary loading stage."""

    words: set[str] = Field(default_factory=set)
    pairs: list[tuple[str, str]] = Field(default_factory=list)


class LadderResult(BaseModel):
    """All shortest ladders found for one start/end pair."""

    start: str
    end: str
    ladders: list[list[str]] = Field(default_factory=list)

    @property
    def distance(self) -> int | None:
        """Number of steps in each ladder, or None if no ladder exists."""
        if not self.ladders:
            return None
        return len(self.ladders[0]) - 1


class LadderSearchResult(StageResult):
    """Output from ladder search stage."""

    results: list[LadderResult] = Field(default_factory=list)
