"""Type definitions for LadderPy."""

# A word is a fixed-length lowercase string
Word = str

# Words first discovered at the same breadth-first distance
Level = set[Word]

# Index is the distance from the sequence's start word
LevelSequence = list[Level]

# A ladder from start to end, consecutive words adjacent
Ladder = tuple[Word, ...]
