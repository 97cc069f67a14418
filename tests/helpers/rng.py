"""Deterministic randomness sources for tests."""

import random
from collections.abc import Sequence


class ScriptedRandom(random.Random):
    """Random whose randrange returns a fixed script of values."""

    def __init__(self, picks: Sequence[int]) -> None:
        self._picks = list(picks)
        super().__init__(0)

    def randrange(self, start, stop=None, step=1):  # type: ignore[no-untyped-def, override]
        if not self._picks:
            msg = "ScriptedRandom ran out of picks"
            raise AssertionError(msg)
        return self._picks.pop(0)


def picks_for(items: Sequence[str], target: Sequence[str]) -> list[int]:
    """Compute the randrange script that shuffles items into target."""
    current = list(items)
    picks: list[int] = []
    for i in range(len(current) - 1, 0, -1):
        j = current.index(target[i], 0, i + 1)
        picks.append(j)
        current[i], current[j] = current[j], current[i]
    return picks


def shuffled_as(items: Sequence[str], target: Sequence[str]) -> ScriptedRandom:
    """Build a ScriptedRandom that shuffles items into target order."""
    return ScriptedRandom(picks_for(items, target))
