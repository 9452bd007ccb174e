"""Exception types raised by the ladder core."""


class LadderError(Exception):
    """Base class for all LadderPy errors."""


class EmptyDictionary(LadderError):
    """Raised when an index is built from zero words."""

    def __init__(self) -> None:
        super().__init__("Cannot build a neighbor index from an empty dictionary")


class InconsistentWordLength(LadderError):
    """Raised when an index is built from words of more than one length."""

    def __init__(self, lengths: set[int]) -> None:
        self.lengths = frozenset(lengths)
        found = ", ".join(str(length) for length in sorted(self.lengths))
        super().__init__(f"Dictionary words must share one length (found lengths: {found})")


class InvalidWordLength(LadderError):
    """Raised when a neighbor query uses a word of the wrong length."""

    def __init__(self, word: str, expected: int) -> None:
        self.word = word
        self.expected = expected
        super().__init__(
            f"Word '{word}' has length {len(word)}, index holds words of length {expected}"
        )


class InvalidInput(LadderError):
    """Raised when search endpoints violate a precondition.

    Attributes:
        constraint: Name of the violated rule: "empty", "length_mismatch"
            or "dictionary_length"
    """

    EMPTY = "empty"
    LENGTH_MISMATCH = "length_mismatch"
    DICTIONARY_LENGTH = "dictionary_length"

    def __init__(self, constraint: str, message: str) -> None:
        self.constraint = constraint
        super().__init__(message)


class NoPathFound(LadderError):
    """Raised when a caller demands a path that does not exist."""

    def __init__(self, source: str, target: str) -> None:
        self.source = source
        self.target = target
        super().__init__(f"No path from {source} to {target}.")
