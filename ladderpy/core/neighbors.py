"""Hamming-distance-1 neighbor index over a fixed-length word set."""

from collections import defaultdict
from collections.abc import Iterable, Iterator

from ladderpy.core.errors import EmptyDictionary, InconsistentWordLength, InvalidWordLength

# Pattern key: (wildcard position, word with that position removed)
PatternKey = tuple[int, str]


def pattern_keys(word: str) -> list[PatternKey]:
    """Get the pattern keys of a word, one per position.

    e.g., 'dog' -> [(0, 'og'), (1, 'dg'), (2, 'do')]

    Keeping the position in the key means no symbol in the dictionary can be
    mistaken for the wildcard.
    """
    return [(i, word[:i] + word[i + 1 :]) for i in range(len(word))]


def hamming_distance(first: str, second: str) -> int:
    """Count the positions at which two equal-length words differ.

    Raises:
        ValueError: If the words differ in length
    """
    if len(first) != len(second):
        raise ValueError(
            f"Hamming distance needs equal lengths ({len(first)} != {len(second)})"
        )
    return sum(1 for a, b in zip(first, second) if a != b)


class NeighborIndex:
    """Index answering "which dictionary words differ from W in one position?".

    Every word is filed under each of its pattern keys, so a lookup is the
    union of L buckets instead of a scan over the whole dictionary. Words are
    indexed in sorted order, which fixes the order of every bucket and
    therefore of every neighbor lookup.
    """

    def __init__(self, words: Iterable[str]) -> None:
        unique_words = sorted(set(words))
        if not unique_words:
            raise EmptyDictionary()

        lengths = {len(word) for word in unique_words}
        if len(lengths) > 1:
            raise InconsistentWordLength(lengths)

        self._word_length = lengths.pop()
        self._words = tuple(unique_words)
        self._word_set = frozenset(unique_words)

        buckets: dict[PatternKey, list[str]] = defaultdict(list)
        for word in self._words:
            for key in pattern_keys(word):
                buckets[key].append(word)
        self._buckets: dict[PatternKey, tuple[str, ...]] = {
            key: tuple(bucket) for key, bucket in buckets.items()
        }

    @property
    def word_length(self) -> int:
        """Length shared by every word in the index."""
        return self._word_length

    @property
    def pattern_count(self) -> int:
        """Number of distinct pattern keys."""
        return len(self._buckets)

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._word_set

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __repr__(self) -> str:
        return f"NeighborIndex(words={len(self._words)}, word_length={self._word_length})"

    def neighbors(self, word: str) -> tuple[str, ...]:
        """Get the dictionary words at Hamming distance 1 from a word.

        The word itself need not be in the dictionary. Neighbors come in
        position order, then bucket order.

        Args:
            word: Word to look up

        Returns:
            Tuple of neighboring words, excluding the word itself

        Raises:
            InvalidWordLength: If the word's length differs from the index's
        """
        if len(word) != self._word_length:
            raise InvalidWordLength(word, self._word_length)

        result: list[str] = []
        seen = {word}
        for key in pattern_keys(word):
            for candidate in self._buckets.get(key, ()):
                if candidate not in seen:
                    seen.add(candidate)
                    result.append(candidate)
        return tuple(result)


def build_index(words: Iterable[str]) -> NeighborIndex:
    """Build a neighbor index over a word set.

    Args:
        words: Words of one fixed length (duplicates are ignored)

    Returns:
        NeighborIndex over the words

    Raises:
        EmptyDictionary: If no words are given
        InconsistentWordLength: If words of more than one length are given
    """
    return NeighborIndex(words)
