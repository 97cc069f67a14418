"""Uniform shuffling with an injectable randomness source."""

import random
from collections.abc import Sequence


def fair_shuffle(items: Sequence[str], rng: random.Random | None = None) -> list[str]:
    """Return a uniformly random permutation of items.

    Fisher-Yates: walks from the end, swapping each slot with a uniformly
    chosen slot at or before it. The input is not modified.

    Args:
        items: Items to permute.
        rng: Randomness source. A fresh unseeded generator if omitted.

    Returns:
        New list holding the permuted items.
    """
    if rng is None:
        rng = random.Random()

    shuffled = list(items)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randrange(i + 1)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled
