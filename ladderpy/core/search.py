"""Breadth-first ladder search with a global reservation map.

Each round looks up the neighbors of every frontier word, drops words that
are already reserved, and reserves the rest for the frontier word that
offered them first. Because a word is reserved exactly once, at the round
it is first reached, every reserved word has a single shortest path back to
the source and the search ends when a round reserves nothing.
"""

from collections.abc import Callable, Sequence

from loguru import logger
from tqdm import tqdm

from ladderpy.core.errors import InvalidInput
from ladderpy.core.neighbors import NeighborIndex, hamming_distance
from ladderpy.core.parallel import FrontierPool
from ladderpy.core.types import LadderResult, Reservation, RoundSummary
from ladderpy.utils.debug import log_already_reserved, log_reservation

# Looks up the neighbors of a frontier, returning them in frontier order
NeighborLookup = Callable[[list[str]], list[tuple[str, ...]]]


def validate_endpoints(index: NeighborIndex, source: str, target: str) -> None:
    """Check the search preconditions.

    Raises:
        InvalidInput: If either word is empty, the words differ in length,
            or their length differs from the index's word length
    """
    if not source or not target:
        raise InvalidInput(InvalidInput.EMPTY, "Source and target words must be non-empty")
    if len(source) != len(target):
        raise InvalidInput(
            InvalidInput.LENGTH_MISMATCH,
            f"Source '{source}' and target '{target}' must have the same length "
            f"({len(source)} != {len(target)})",
        )
    if len(source) != index.word_length:
        raise InvalidInput(
            InvalidInput.DICTIONARY_LENGTH,
            f"Words of length {len(source)} cannot be searched in a dictionary "
            f"of {index.word_length}-letter words",
        )


class LadderSearch:
    """State of one level-synchronous search from source to target.

    Attributes:
        reservations: Word -> Reservation for every word claimed so far
        frontier: Words reserved in the latest round, in reservation order
        depth: Depth of the current frontier
        rounds: Summary of every completed round
    """

    def __init__(
        self,
        index: NeighborIndex,
        source: str,
        target: str,
        debug_words: frozenset[str] = frozenset(),
    ) -> None:
        validate_endpoints(index, source, target)
        self.index = index
        self.source = source
        self.target = target
        self.debug_words = debug_words

        # The source is reservable even when it is not a dictionary word
        self.reservations: dict[str, Reservation] = {source: Reservation(parent=None, depth=0)}
        self.frontier: list[str] = [source]
        self.depth = 0
        self.rounds: list[RoundSummary] = []
        log_reservation(source, None, 0, debug_words)

    @property
    def succeeded(self) -> bool:
        """True once the target has been reserved."""
        return self.target in self.reservations

    @property
    def exhausted(self) -> bool:
        """True once a round reserved nothing without reaching the target."""
        return not self.frontier and not self.succeeded

    def _lookup_serial(self, frontier: list[str], show_progress: bool) -> list[tuple[str, ...]]:
        words: Sequence[str] = frontier
        if show_progress:
            words = tqdm(
                frontier,
                desc=f"Round {self.depth + 1}",
                unit="word",
                leave=False,
            )
        return [self.index.neighbors(word) for word in words]

    def expand_round(
        self,
        lookup: NeighborLookup | None = None,
        show_progress: bool = False,
    ) -> list[str]:
        """Reserve the unclaimed neighbors of the current frontier.

        Reservations are made in frontier order, so a word reachable from
        several frontier words belongs to the first of them.

        Args:
            lookup: Optional neighbor lookup (e.g. a FrontierPool); defaults
                to looking up in this process
            show_progress: Show a tqdm progress bar over the frontier

        Returns:
            The new frontier
        """
        if lookup is None:
            neighbor_lists = self._lookup_serial(self.frontier, show_progress)
        else:
            neighbor_lists = lookup(self.frontier)

        next_depth = self.depth + 1
        new_frontier: list[str] = []
        candidates = 0

        for word, neighbors in zip(self.frontier, neighbor_lists):
            for candidate in neighbors:
                candidates += 1
                existing = self.reservations.get(candidate)
                if existing is not None:
                    log_already_reserved(
                        candidate, word, existing.parent, next_depth, self.debug_words
                    )
                    continue
                self.reservations[candidate] = Reservation(parent=word, depth=next_depth)
                log_reservation(candidate, word, next_depth, self.debug_words)
                new_frontier.append(candidate)

        summary = RoundSummary(
            depth=next_depth,
            frontier_size=len(self.frontier),
            candidates=candidates,
            reserved=len(new_frontier),
        )
        self.rounds.append(summary)
        logger.debug(
            f"  Round {next_depth}: expanded {summary.frontier_size} words, "
            f"examined {summary.candidates} neighbors, reserved {summary.reserved}"
        )

        self.depth = next_depth
        self.frontier = new_frontier
        return new_frontier

    def run(self, lookup: NeighborLookup | None = None, show_progress: bool = False) -> LadderResult:
        """Expand rounds until the target is reserved or a round reserves nothing.

        Args:
            lookup: Optional neighbor lookup passed to every round
            show_progress: Show a progress bar for each round

        Returns:
            LadderResult for this search
        """
        while not self.succeeded and self.frontier:
            self.expand_round(lookup, show_progress)
        return self.result()

    def path_to(self, word: str) -> tuple[str, ...]:
        """Follow parent links from a reserved word back to the source.

        Args:
            word: A reserved word

        Returns:
            Tuple of words from the source to the word

        Raises:
            KeyError: If the word has not been reserved
        """
        path = [word]
        reservation = self.reservations[word]
        while reservation.parent is not None:
            path.append(reservation.parent)
            reservation = self.reservations[reservation.parent]
        path.reverse()
        return tuple(path)

    def result(self) -> LadderResult:
        """Build the result for the current state."""
        path = self.path_to(self.target) if self.succeeded else None
        return LadderResult(
            source=self.source,
            target=self.target,
            path=path,
            depth=self.reservations[self.target].depth if path is not None else None,
            rounds=tuple(self.rounds),
            reserved_count=len(self.reservations),
        )


def find_ladder(
    index: NeighborIndex,
    source: str,
    target: str,
    *,
    jobs: int = 1,
    debug_words: frozenset[str] = frozenset(),
    show_progress: bool = False,
) -> LadderResult:
    """Find a shortest word ladder from source to target.

    Args:
        index: Neighbor index over the dictionary
        source: First word of the ladder (need not be in the dictionary)
        target: Last word of the ladder
        jobs: Worker processes for neighbor lookups; 1 searches in-process
        debug_words: Words whose reservations are traced at DEBUG level
        show_progress: Show a progress bar for each round

    Returns:
        LadderResult; `path` is None when the target cannot be reached

    Raises:
        InvalidInput: If the endpoints violate a precondition
    """
    search = LadderSearch(index, source, target, debug_words=debug_words)

    if search.succeeded:
        logger.debug(f"  Source and target are both '{source}', nothing to search")
        return search.result()

    if jobs > 1:
        with FrontierPool(index, jobs) as pool:
            result = search.run(pool.lookup)
    else:
        result = search.run(show_progress=show_progress)

    if result.found:
        logger.debug(
            f"  Reached '{target}' at depth {result.depth} after reserving "
            f"{result.reserved_count} words"
        )
    else:
        logger.debug(
            f"  Search exhausted after {len(result.rounds)} rounds and "
            f"{result.reserved_count} reserved words"
        )
    return result


def is_valid_ladder(path: Sequence[str], index: NeighborIndex) -> bool:
    """Check that a path is a word ladder over the index.

    Consecutive words must differ in exactly one position and every word
    between the endpoints must be in the dictionary. The endpoints may be
    absent from the dictionary.

    Args:
        path: Sequence of words from source to target
        index: Neighbor index over the dictionary

    Returns:
        True if the path is a valid ladder
    """
    if not path:
        return False
    for first, second in zip(path, path[1:]):
        if len(first) != len(second) or hamming_distance(first, second) != 1:
            return False
    return all(word in index for word in path[1:-1])
