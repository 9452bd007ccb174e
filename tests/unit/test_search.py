"""Unit tests for the ladder search.

Tests cover the concrete dog/cat scenarios, the reservation rules, and the
shortest-path guarantee against a plain breadth-first distance.
"""

from collections import deque

import pytest

from ladderpy.core import (
    InvalidInput,
    LadderSearch,
    NoPathFound,
    build_index,
    find_ladder,
    hamming_distance,
    is_valid_ladder,
)

WORDS = {"dog", "dig", "dug", "dag", "dot", "cot", "cat", "cog", "cag"}


def _shortest_distance(words: set[str], source: str, target: str) -> int | None:
    """Plain BFS over pairwise Hamming checks, for comparison."""
    distances = {source: 0}
    queue = deque([source])
    while queue:
        word = queue.popleft()
        if word == target:
            return distances[word]
        for other in words:
            if other not in distances and hamming_distance(word, other) == 1:
                distances[other] = distances[word] + 1
                queue.append(other)
    return None


@pytest.fixture
def index():
    return build_index(WORDS)


class TestConcreteLadders:
    """Test the documented example ladders."""

    def test_single_edit_to_dig(self, index) -> None:
        """dog -> dig is one step."""
        assert find_ladder(index, "dog", "dig").path == ("dog", "dig")

    def test_direct_edge_to_dag(self, index) -> None:
        """dog -> dag uses the direct edge."""
        assert find_ladder(index, "dog", "dag").path == ("dog", "dag")

    def test_three_steps_to_cat(self, index) -> None:
        """dog -> cat goes through cog and cag."""
        assert find_ladder(index, "dog", "cat").path == ("dog", "cog", "cag", "cat")

    def test_reports_depth(self, index) -> None:
        """Depth is the number of edges in the ladder."""
        result = find_ladder(index, "dog", "cat")
        assert result.depth == len(result.path) - 1 == 3

    def test_unreachable_target(self, index) -> None:
        """An unreachable target gives a result without a path."""
        result = find_ladder(index, "dog", "xyz")
        assert not result.found
        assert result.path is None
        assert result.depth is None

    def test_unreachable_target_reserves_component(self, index) -> None:
        """An exhausted search has reserved the whole connected component."""
        result = find_ladder(index, "dog", "xyz")
        assert result.reserved_count == len(WORDS)
        assert result.rounds[-1].reserved == 0


class TestSameWord:
    """Test searches where source equals target."""

    def test_returns_single_word(self, index) -> None:
        """Source equal to target returns a one-word ladder."""
        assert find_ladder(index, "dog", "dog").path == ("dog",)

    def test_returns_single_word_outside_dictionary(self, index) -> None:
        """A word missing from the dictionary still reaches itself."""
        assert find_ladder(index, "zzz", "zzz").path == ("zzz",)

    def test_runs_no_rounds(self, index) -> None:
        """No round is expanded when source equals target."""
        result = find_ladder(index, "dog", "dog")
        assert result.rounds == ()
        assert result.depth == 0


class TestInvalidInput:
    """Test precondition checks."""

    def test_rejects_mismatched_lengths(self, index) -> None:
        """Source and target of different lengths raise InvalidInput."""
        with pytest.raises(InvalidInput) as exc_info:
            find_ladder(index, "abc", "de")
        assert exc_info.value.constraint == InvalidInput.LENGTH_MISMATCH

    def test_rejects_empty_source(self, index) -> None:
        """An empty source raises InvalidInput."""
        with pytest.raises(InvalidInput) as exc_info:
            find_ladder(index, "", "dog")
        assert exc_info.value.constraint == InvalidInput.EMPTY

    def test_rejects_empty_target(self, index) -> None:
        """An empty target raises InvalidInput."""
        with pytest.raises(InvalidInput) as exc_info:
            find_ladder(index, "dog", "")
        assert exc_info.value.constraint == InvalidInput.EMPTY

    def test_rejects_length_other_than_dictionary(self, index) -> None:
        """Endpoints longer than the dictionary words raise InvalidInput."""
        with pytest.raises(InvalidInput) as exc_info:
            find_ladder(index, "door", "dear")
        assert exc_info.value.constraint == InvalidInput.DICTIONARY_LENGTH


class TestDictionaryMembership:
    """Test endpoints missing from the dictionary."""

    def test_source_outside_dictionary(self, index) -> None:
        """A source missing from the dictionary can still start a ladder."""
        assert find_ladder(index, "dox", "dig").path == ("dox", "dog", "dig")

    def test_target_outside_dictionary(self, index) -> None:
        """A target missing from the dictionary is never reached."""
        assert not find_ladder(index, "dog", "dox").found


class TestReservations:
    """Test the reservation rules of LadderSearch."""

    def test_source_reserved_at_depth_zero(self, index) -> None:
        """The source starts reserved with no parent."""
        search = LadderSearch(index, "dog", "cat")
        assert search.reservations["dog"].parent is None
        assert search.reservations["dog"].depth == 0

    def test_first_frontier_word_wins_contested_candidate(self) -> None:
        """A word reachable from two frontier words belongs to the first."""
        search = LadderSearch(build_index({"aa", "ab", "ba", "bb"}), "aa", "bb")
        search.expand_round()
        assert search.frontier == ["ba", "ab"]
        search.expand_round()
        assert search.reservations["bb"].parent == "ba"

    def test_cag_claimed_by_cog_before_dag(self, index) -> None:
        """cag is reserved by cog, which precedes dag in the frontier."""
        search = LadderSearch(index, "dog", "cat")
        search.run()
        assert search.reservations["cag"].parent == "cog"

    def test_words_never_rereserved(self, index) -> None:
        """Each reserved word keeps the depth of its first reservation."""
        search = LadderSearch(index, "dog", "xyz")
        search.run()
        assert search.reservations["cat"].depth == 3
        assert search.reservations["dig"].depth == 1

    def test_round_reserves_only_new_words(self, index) -> None:
        """A round never returns a word that was already reserved."""
        search = LadderSearch(index, "dog", "xyz")
        first = search.expand_round()
        second = search.expand_round()
        assert not set(first) & set(second)
        assert "dog" not in second

    def test_exhausted_after_empty_round(self, index) -> None:
        """The search is exhausted once a round reserves nothing."""
        search = LadderSearch(index, "dog", "xyz")
        search.run()
        assert search.exhausted
        assert not search.succeeded

    def test_round_summaries(self, index) -> None:
        """Each round records frontier size and reservations."""
        result = find_ladder(index, "dog", "cat")
        assert [(r.depth, r.frontier_size, r.reserved) for r in result.rounds] == [
            (1, 1, 5),
            (2, 5, 2),
            (3, 2, 1),
        ]


class TestProperties:
    """Test properties that hold for every pair of words."""

    def test_paths_are_valid_ladders(self, index) -> None:
        """Every returned path is a valid ladder over the dictionary."""
        for source in WORDS:
            for target in WORDS:
                result = find_ladder(index, source, target)
                assert result.found
                assert is_valid_ladder(result.path, index)

    def test_paths_are_shortest(self) -> None:
        """Returned ladders match the plain BFS distance."""
        words = {"cold", "cord", "card", "ward", "warm", "word", "worm", "corm", "wore", "core"}
        index = build_index(words)
        for source in words:
            for target in words:
                result = find_ladder(index, source, target)
                expected = _shortest_distance(words, source, target)
                assert result.depth == expected

    def test_repeated_searches_are_identical(self, index) -> None:
        """Searching twice gives equal results."""
        assert find_ladder(index, "dog", "cat") == find_ladder(index, "dog", "cat")

    def test_repeated_failures_are_identical(self, index) -> None:
        """A failed search fails the same way twice."""
        assert find_ladder(index, "dog", "xyz") == find_ladder(index, "dog", "xyz")


class TestRequirePath:
    """Test LadderResult.require_path behavior."""

    def test_returns_path(self, index) -> None:
        """A found ladder is returned."""
        assert find_ladder(index, "dog", "dig").require_path() == ("dog", "dig")

    def test_raises_no_path_found(self, index) -> None:
        """A missing ladder raises NoPathFound."""
        with pytest.raises(NoPathFound, match="No path from dog to xyz."):
            find_ladder(index, "dog", "xyz").require_path()


class TestIsValidLadder:
    """Test is_valid_ladder behavior."""

    def test_rejects_empty_path(self, index) -> None:
        """An empty path is not a ladder."""
        assert not is_valid_ladder([], index)

    def test_rejects_two_letter_jump(self, index) -> None:
        """Consecutive words differing in two positions are rejected."""
        assert not is_valid_ladder(["dog", "cot"], index)

    def test_rejects_interior_word_outside_dictionary(self, index) -> None:
        """Interior words must be dictionary words."""
        assert not is_valid_ladder(["dog", "dox", "dot"], index)

    def test_allows_endpoints_outside_dictionary(self, index) -> None:
        """Endpoints may be missing from the dictionary."""
        assert is_valid_ladder(["dox", "dog", "cog"], index)
