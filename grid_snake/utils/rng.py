"""Random source factories.

The engine only ever calls ``state.rng()``; these helpers build suitable
callables. ``seeded_rng`` is what sessions use, ``sequence_rng`` replays a
fixed list of samples so tests can pin food placement exactly.
"""

import random
from itertools import cycle
from typing import Iterable, Optional

from grid_snake.types import RandomSource


def seeded_rng(seed: Optional[int] = None) -> RandomSource:
    """Return ``random.Random(seed).random`` (non-deterministic if seed is None)."""
    return random.Random(seed).random


def sequence_rng(samples: Iterable[float]) -> RandomSource:
    """Replay ``samples`` in order, cycling when exhausted.

    Raises:
        ValueError: If no samples are given or a sample lies outside ``[0, 1)``.
    """
    values = list(samples)
    if not values:
        raise ValueError("sequence_rng needs at least one sample")
    for value in values:
        if not 0.0 <= value < 1.0:
            raise ValueError(f"Sample {value!r} is outside [0, 1)")
    it = cycle(values)
    return lambda: next(it)
