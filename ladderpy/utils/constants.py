"""Constants used throughout the LadderPy codebase."""


class Constants:
    """Centralized constants to avoid magic numbers and strings."""

    # Dictionary sources
    DEFAULT_WORDLIST = "/usr/share/dict/words"
    """Unix words file, the default word list."""

    DICTIONARY_SOURCES = ("file", "english-words", "wordfreq")
    """Supported dictionary sources."""

    ENGLISH_WORDS_LISTS = ["web2", "gcide"]
    """Word lists pulled from the english-words package."""

    INVALID_WORD_CHARACTERS = " \n\r\t\\"
    """Characters that disqualify a line in a word list file."""

    # Output
    OUTPUT_FORMATS = ("path", "lines", "json", "yaml")
    """Supported output formats."""

    PATH_SEPARATOR = "/"
    """Separator used for the slash-joined ladder output."""

    # Parallel search
    PARALLEL_FRONTIER_THRESHOLD = 256
    """Smallest frontier expanded in worker processes when jobs > 1."""

    # Reports
    REPORT_FILENAME = "search_report.txt"
    """Name of the search report written into the report directory."""
