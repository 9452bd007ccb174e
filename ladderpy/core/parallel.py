"""Process pool for parallel frontier expansion.

Neighbor lookups are read-only, so the words of a frontier can be looked up
in worker processes. Only the lookups run in parallel: results come back in
frontier order and reservations are merged serially by the search, so the
outcome is identical to a single-process search.
"""

import threading
from multiprocessing import Pool

from ladderpy.core.neighbors import NeighborIndex
from ladderpy.utils.constants import Constants

# Thread-local storage for the index (set once per worker)
_worker_context = threading.local()


def init_frontier_worker(index: NeighborIndex) -> None:
    """Initialize worker process with the neighbor index.

    Args:
        index: NeighborIndex to store in thread-local storage
    """
    _worker_context.index = index


def lookup_chunk_worker(words: list[str]) -> list[tuple[str, ...]]:
    """Worker function to look up the neighbors of a chunk of words.

    Args:
        words: Chunk of frontier words

    Returns:
        Neighbor tuples in the same order as the words
    """
    index = _worker_context.index
    return [index.neighbors(word) for word in words]


def divide_into_chunks(items: list[str], num_chunks: int) -> list[list[str]]:
    """Divide a list into approximately equal, order-preserving chunks.

    Args:
        items: List of items to divide
        num_chunks: Number of chunks to create

    Returns:
        List of chunks
    """
    if num_chunks <= 1:
        return [items]

    chunk_size = max(1, len(items) // num_chunks)
    chunks = []
    for i in range(0, len(items), chunk_size):
        chunks.append(items[i : i + chunk_size])
    return chunks


class FrontierPool:
    """Pool of workers holding a copy of the neighbor index.

    Use as a context manager; the pool lives for one search. Frontiers
    smaller than `threshold` are looked up in the calling process, where
    the cost of shipping words to workers would outweigh the lookups.
    """

    def __init__(
        self,
        index: NeighborIndex,
        jobs: int,
        threshold: int = Constants.PARALLEL_FRONTIER_THRESHOLD,
    ) -> None:
        self.index = index
        self.jobs = jobs
        self.threshold = threshold
        self._pool = None

    def __enter__(self) -> "FrontierPool":
        self._pool = Pool(
            processes=self.jobs,
            initializer=init_frontier_worker,
            initargs=(self.index,),
        )
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._pool is not None:
            self._pool.terminate()
            self._pool.join()
            self._pool = None

    def lookup(self, frontier: list[str]) -> list[tuple[str, ...]]:
        """Look up the neighbors of every frontier word.

        Args:
            frontier: Frontier words in their iteration order

        Returns:
            Neighbor tuples in frontier order
        """
        if self._pool is None or len(frontier) < self.threshold:
            return [self.index.neighbors(word) for word in frontier]

        chunks = divide_into_chunks(frontier, self.jobs * 4)
        results: list[tuple[str, ...]] = []
        # Pool.map returns chunk results in submission order
        for chunk_result in self._pool.map(lookup_chunk_worker, chunks):
            results.extend(chunk_result)
        return results
