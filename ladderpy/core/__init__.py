"""Core domain logic for LadderPy."""

from .config import Config, load_config
from .errors import (
    EmptyDictionary,
    InconsistentWordLength,
    InvalidInput,
    InvalidWordLength,
    LadderError,
    NoPathFound,
)
from .neighbors import NeighborIndex, build_index, hamming_distance
from .search import LadderSearch, find_ladder, is_valid_ladder
from .types import LadderResult, Reservation, RoundSummary

__all__ = [
    "Config",
    "load_config",
    "EmptyDictionary",
    "InconsistentWordLength",
    "InvalidInput",
    "InvalidWordLength",
    "LadderError",
    "NoPathFound",
    "NeighborIndex",
    "build_index",
    "hamming_distance",
    "LadderSearch",
    "find_ladder",
    "is_valid_ladder",
    "LadderResult",
    "Reservation",
    "RoundSummary",
]
