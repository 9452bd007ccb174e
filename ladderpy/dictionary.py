"""Dictionary and word list loading."""

from english_words import get_english_words_set
from loguru import logger
from wordfreq import top_n_list

from ladderpy.core import Config
from ladderpy.utils.constants import Constants
from ladderpy.utils.helpers import compile_wildcard_regex, expand_file_path


def load_word_list(filepath: str, lowercase: bool = True) -> set[str]:
    """Load a word list file, one word per line.

    Blank lines and lines starting with '#' are skipped, as are lines
    containing whitespace or backslashes.

    Args:
        filepath: Path to the word list
        lowercase: Fold words to lowercase

    Returns:
        Set of words

    Raises:
        FileNotFoundError: If the file does not exist
    """
    filepath = expand_file_path(filepath)
    words = set()
    invalid_count = 0

    with open(filepath, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            if any(c in line for c in Constants.INVALID_WORD_CHARACTERS):
                invalid_count += 1
                continue
            words.add(line.lower() if lowercase else line)

    if invalid_count > 0:
        logger.debug(f"  Skipped {invalid_count} words with invalid characters")

    return words


def load_english_words(lowercase: bool = True) -> set[str]:
    """Load the english-words dictionary."""
    return set(get_english_words_set(Constants.ENGLISH_WORDS_LISTS, lower=lowercase))


def load_frequent_words(top_n: int, lowercase: bool = True) -> set[str]:
    """Load the top N most frequent English words from wordfreq."""
    words = top_n_list("en", top_n)
    return {word.lower() if lowercase else word for word in words}


def load_exclusions(filepath: str | None) -> set[str]:
    """Load exclusion patterns from file."""
    if not filepath:
        return set()

    filepath = expand_file_path(filepath)
    exclusions = set()
    with open(filepath, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith("#"):
                exclusions.add(line)

    return exclusions


def apply_exclusions(words: set[str], patterns: set[str]) -> set[str]:
    """Remove excluded words from a word set.

    Handles exact words and wildcard (*) patterns.

    Args:
        words: Words to filter
        patterns: Exact words and wildcard patterns

    Returns:
        Filtered set of words
    """
    exact_matches = {p for p in patterns if "*" not in p}
    wildcard_patterns = {p for p in patterns if "*" in p}

    # Exact matches first, using fast set difference
    remaining = words - exact_matches

    if wildcard_patterns:
        compiled_patterns = [compile_wildcard_regex(p) for p in wildcard_patterns]
        remaining = {
            word for word in remaining if not any(pat.match(word) for pat in compiled_patterns)
        }

    return remaining


def _load_source_words(config: Config) -> set[str]:
    if config.dictionary == "english-words":
        logger.info("Loading English words dictionary...")
        return load_english_words(config.lowercase)
    if config.dictionary == "wordfreq":
        logger.info(f"Loading top {config.top_n} words from wordfreq...")
        return load_frequent_words(config.top_n, config.lowercase)
    logger.info(f"Loading word list from {config.wordlist}...")
    return load_word_list(config.wordlist, config.lowercase)


def load_dictionary(config: Config) -> frozenset[str]:
    """Load the dictionary for a run.

    Only words with the same length as the source word are kept.

    Args:
        config: Configuration object

    Returns:
        Frozen set of same-length words (may be empty)
    """
    words = _load_source_words(config)
    logger.info(f"  Loaded {len(words)} words")

    exclusions = load_exclusions(config.exclude)
    if exclusions:
        filtered = apply_exclusions(words, exclusions)
        removed_count = len(words) - len(filtered)
        logger.info(
            f"  Removed {removed_count} words based on the exclude file (including wildcards)"
        )
        words = filtered

    word_length = len(config.source)
    same_length = frozenset(word for word in words if len(word) == word_length)
    logger.info(f"  Kept {len(same_length)} words of length {word_length}")

    return same_length
