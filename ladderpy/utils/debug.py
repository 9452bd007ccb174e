"""Debug tracing for individual words during a ladder search."""

from loguru import logger


def is_debug_word(word: str, debug_words: frozenset[str] | set[str]) -> bool:
    """Check if a word is being traced.

    Args:
        word: The word to check
        debug_words: Set of traced words

    Returns:
        True if the word is traced
    """
    return word in debug_words


def format_debug_word(word: str, depth: int, message: str) -> str:
    """Format a debug-word trace message."""
    return f"[DEBUG WORD: '{word}'] [Round {depth}] {message}"


def log_debug_word(word: str, depth: int, message: str) -> None:
    """Log a debug-word trace message at DEBUG level."""
    logger.debug(format_debug_word(word, depth, message))


def log_reservation(
    word: str,
    parent: str | None,
    depth: int,
    debug_words: frozenset[str],
) -> None:
    """Log that a traced word has been reserved.

    Args:
        word: The reserved word
        parent: Frontier word that claimed it (None for the source)
        depth: Round in which it was reserved
        debug_words: Set of traced words
    """
    if not is_debug_word(word, debug_words):
        return
    if parent is None:
        log_debug_word(word, depth, "Reserved as search source")
    else:
        log_debug_word(word, depth, f"Reserved by '{parent}'")


def log_already_reserved(
    word: str,
    candidate_of: str,
    owner: str | None,
    depth: int,
    debug_words: frozenset[str],
) -> None:
    """Log that a traced word was offered again after being reserved.

    Args:
        word: The candidate word
        candidate_of: Frontier word that offered it this round
        owner: Parent recorded in the existing reservation
        depth: Current round
        debug_words: Set of traced words
    """
    if not is_debug_word(word, debug_words):
        return
    owner_display = f"'{owner}'" if owner is not None else "the source"
    log_debug_word(
        word,
        depth,
        f"Skipped as neighbor of '{candidate_of}' (already reserved by {owner_display})",
    )
