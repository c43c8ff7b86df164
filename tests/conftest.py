"""Shared fixtures for LadderPy tests."""

import pytest


@pytest.fixture
def classic_words() -> set[str]:
    """Dictionary with exactly two shortest ladders from 'hit' to 'cog'."""
    return {"hit", "hot", "dot", "dog", "lot", "log", "cog"}


@pytest.fixture
def noisy_words(classic_words: set[str]) -> set[str]:
    """Classic dictionary plus words that sit at the right distance but on no ladder."""
    return classic_words | {"bot", "cig", "dut"}


@pytest.fixture
def four_letter_words() -> set[str]:
    """Four-letter dictionary connecting 'cold' and 'warm' through several routes."""
    return {
        "cold", "cord", "card", "ward", "warm", "corm", "worm", "word", "wore", "core",
        "care", "ware", "wart", "cart", "curd", "bold", "bolt", "boat", "coat", "cost",
        "most", "mist", "colt", "wold", "wald", "walm", "gold", "golf",
    }  # fmt: skip
