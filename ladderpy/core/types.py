"""Type definitions for the ladder search."""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict

from ladderpy.core.errors import NoPathFound


@dataclass(frozen=True)
class Reservation:
    """Claim on a word made during the search.

    Attributes:
        parent: Frontier word that first discovered it (None for the source)
        depth: Round in which it was reserved
    """

    parent: str | None
    depth: int


class RoundSummary(BaseModel):
    """Counts recorded for one expansion round."""

    model_config = ConfigDict(frozen=True)

    depth: int  # depth of the words reserved in this round
    frontier_size: int
    candidates: int  # neighbors examined, including already-reserved ones
    reserved: int


class LadderResult(BaseModel):
    """Outcome of a ladder search.

    A search that finds no path is a normal outcome: `path` and `depth` are
    None. Use `require_path()` to turn that outcome into an exception.
    """

    model_config = ConfigDict(frozen=True)

    source: str
    target: str
    path: tuple[str, ...] | None = None
    depth: int | None = None
    rounds: tuple[RoundSummary, ...] = ()
    reserved_count: int = 0

    @property
    def found(self) -> bool:
        """True if a ladder was found."""
        return self.path is not None

    def require_path(self) -> tuple[str, ...]:
        """Return the ladder or raise NoPathFound."""
        if self.path is None:
            raise NoPathFound(self.source, self.target)
        return self.path
