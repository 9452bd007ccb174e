"""Utility functions for LadderPy."""

from ladderpy.utils.constants import Constants
from ladderpy.utils.debug import (
    format_debug_word,
    is_debug_word,
    log_already_reserved,
    log_debug_word,
    log_reservation,
)
from ladderpy.utils.helpers import compile_wildcard_regex, expand_file_path
from ladderpy.utils.logging import setup_logger

__all__ = [
    "Constants",
    "format_debug_word",
    "is_debug_word",
    "log_already_reserved",
    "log_debug_word",
    "log_reservation",
    "compile_wildcard_regex",
    "expand_file_path",
    "setup_logger",
]
