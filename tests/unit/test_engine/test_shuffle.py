"""Unit tests for the fair shuffle."""

import random
from collections import Counter
from itertools import permutations

from pairrank.engine.shuffle import fair_shuffle
from tests.helpers.rng import ScriptedRandom, picks_for


class TestFairShuffle:
    """Tests for fair_shuffle."""

    def test_is_permutation(self) -> None:
        """Output holds exactly the input items."""
        items = ["a", "b", "c", "d", "e"]
        result = fair_shuffle(items, random.Random(1))
        assert sorted(result) == items

    def test_input_not_modified(self) -> None:
        """The caller's sequence is left alone."""
        items = ["a", "b", "c"]
        fair_shuffle(items, random.Random(2))
        assert items == ["a", "b", "c"]

    def test_same_seed_same_order(self) -> None:
        """Equal seeds give equal permutations."""
        items = [str(i) for i in range(20)]
        assert fair_shuffle(items, random.Random(9)) == fair_shuffle(
            items, random.Random(9)
        )

    def test_swaps_from_the_end(self) -> None:
        """Each step swaps slot i with the drawn slot j <= i."""
        rng = ScriptedRandom([2, 0])
        assert fair_shuffle(["A", "B", "C"], rng) == ["B", "A", "C"]

    def test_draws_one_index_per_slot(self) -> None:
        """n items need n - 1 draws, each bounded by the slot index."""
        draws: list[int] = []

        class RecordingRandom(random.Random):
            def randrange(self, start, stop=None, step=1):  # type: ignore[no-untyped-def, override]
                draws.append(start)
                return start - 1

        fair_shuffle(["a", "b", "c", "d"], RecordingRandom(0))
        assert draws == [4, 3, 2]

    def test_short_inputs(self) -> None:
        """Empty and single-item inputs need no randomness."""
        rng = ScriptedRandom([])
        assert fair_shuffle([], rng) == []
        assert fair_shuffle(["only"], rng) == ["only"]

    def test_picks_helper_reaches_target(self) -> None:
        """Scripted picks reproduce any requested permutation."""
        items = ["a", "b", "c", "d"]
        for target in permutations(items):
            rng = ScriptedRandom(picks_for(items, target))
            assert fair_shuffle(items, rng) == list(target)

    def test_uniform_over_permutations(self) -> None:
        """Every permutation of three items shows up about equally often."""
        rng = random.Random(20240101)
        counts = Counter(tuple(fair_shuffle("abc", rng)) for _ in range(6000))
        assert len(counts) == 6
        for count in counts.values():
            assert 800 < count < 1200
