"""Dictionary, word list and pair file loading."""

from collections.abc import Collection, Iterator

from english_words import get_english_words_set  # type: ignore[import-untyped]
from loguru import logger
from wordfreq import top_n_list

from ladderpy.core import Config
from ladderpy.matching import PatternMatcher
from ladderpy.utils import Constants, expand_file_path


def _iter_lines(filepath: str, description: str) -> Iterator[str]:
    """Yield stripped, non-empty, non-comment lines of a UTF-8 file."""
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith("#"):
                    yield line
    except FileNotFoundError:
        logger.error(f"✗ {description} not found: {filepath}")
        logger.error("  Please check the file path and try again")
        raise
    except PermissionError:
        logger.error(f"✗ Permission denied reading file: {filepath}")
        logger.error("  Please check file permissions and try again")
        raise
    except UnicodeDecodeError as e:
        logger.error(f"✗ Encoding error reading {filepath}: {e}")
        logger.error("  Please ensure the file is UTF-8 encoded")
        raise


def load_word_list(filepath: str | None, verbose: bool = False) -> list[str]:
    """Load custom word list from file."""
    filepath = expand_file_path(filepath)
    if not filepath:
        return []

    words = []
    invalid_count = 0
    for line in _iter_lines(filepath, "Word list file"):
        line = line.lower()
        if any(c in line for c in Constants.INVALID_WORD_CHARS):
            invalid_count += 1
            continue
        words.append(line)

    if verbose and invalid_count > 0:
        logger.info(f"  Skipped {invalid_count} words with invalid characters")

    return words


def load_exclusions(filepath: str | None, verbose: bool = False) -> set[str]:
    """Load exclusion patterns from file."""
    filepath = expand_file_path(filepath)
    if not filepath:
        return set()

    exclusions = set(_iter_lines(filepath, "Exclusions file"))

    if verbose:
        logger.info(f"  Loaded {len(exclusions)} exclusion patterns")

    return exclusions


def load_pairs(filepath: str | None, verbose: bool = False) -> list[tuple[str, str]]:
    """Load (start, end) word pairs, one whitespace-separated pair per line."""
    filepath = expand_file_path(filepath)
    if not filepath:
        return []

    pairs = []
    for line in _iter_lines(filepath, "Pairs file"):
        parts = line.lower().split()
        if len(parts) != 2:
            logger.warning(f"Skipping malformed line in {filepath}: {line}")
            continue
        pairs.append((parts[0], parts[1]))

    if verbose:
        logger.info(f"  Loaded {len(pairs)} word pairs")

    return pairs


def load_base_words(config: Config, verbose: bool = False) -> set[str]:
    """Load the base dictionary selected by config.source."""
    if config.source == "file":
        return set()

    if config.source == "wordfreq":
        if verbose:
            logger.info(f"  Loading top {config.top_n} words from wordfreq...")
        try:
            return {word.lower() for word in top_n_list("en", config.top_n)}
        except Exception as e:
            logger.error(f"✗ Failed to load words from wordfreq: {e}")
            logger.error("  This may indicate a problem with the 'wordfreq' package")
            raise RuntimeError("Failed to load words from wordfreq") from e

    if verbose:
        logger.info("  Loading English words dictionary...")
    try:
        words: set[str] = get_english_words_set(
            list(Constants.ENGLISH_WORDS_SOURCES), lower=True
        )
    except Exception as e:
        logger.error(f"✗ Failed to load English words dictionary: {e}")
        logger.error("  This may indicate a problem with the 'english-words' package")
        logger.error("  Try reinstalling: pip install english-words")
        raise RuntimeError("Failed to load english-words dictionary") from e
    return words


def load_dictionary(
    config: Config, lengths: Collection[int], verbose: bool = False
) -> set[str]:
    """Build the search dictionary for the given word lengths.

    Combines the base dictionary with the include file, removes words matching
    the exclude patterns, and keeps only lowercase a-z words whose length is in
    lengths.
    """
    words = load_base_words(config, verbose)
    original_count = len(words)

    custom_words = load_word_list(config.include, verbose)
    words.update(custom_words)
    added_count = len(words) - original_count

    exclusion_patterns = load_exclusions(config.exclude, verbose)
    if exclusion_patterns:
        words = PatternMatcher(exclusion_patterns).filter_set(words)

    alphabet = set(Constants.ALPHABET)
    dictionary = {
        word for word in words if len(word) in lengths and set(word) <= alphabet
    }

    if verbose:
        logger.info(f"  Loaded {len(dictionary)} words of length {sorted(lengths)}")
        if added_count > 0:
            logger.info(f"  Added {added_count} custom words from include file")

    return dictionary
