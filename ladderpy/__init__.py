"""LadderPy - Shortest word ladder finder.

Find a shortest chain of dictionary words between two words of equal length,
changing one letter at a time.
"""

from loguru import logger

from .core import (
    Config,
    EmptyDictionary,
    InconsistentWordLength,
    InvalidInput,
    InvalidWordLength,
    LadderError,
    LadderResult,
    NeighborIndex,
    NoPathFound,
    build_index,
    find_ladder,
    load_config,
)

# Library callers stay silent until setup_logger enables logging
logger.disable("ladderpy")

__version__ = "0.1.0"
__all__ = [
    "Config",
    "EmptyDictionary",
    "InconsistentWordLength",
    "InvalidInput",
    "InvalidWordLength",
    "LadderError",
    "LadderResult",
    "NeighborIndex",
    "NoPathFound",
    "build_index",
    "find_ladder",
    "load_config",
]
