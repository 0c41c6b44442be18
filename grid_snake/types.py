"""Common type aliases and enumerations.

``RandomSource`` is the central extension point stored in the ``State`` to
allow pluggable (and, in tests, fully deterministic) food placement.
"""

from enum import StrEnum, auto
from typing import Callable


RandomSource = Callable[[], float]
"""Zero-argument callable producing the next sample in ``[0, 1)``."""


class GameStatus(StrEnum):
    """Lifecycle phase of a game session.

    Members:
        READY: Before the first move; accepts direction input but does not advance.
        PLAYING: Advances once per tick.
        PAUSED: Frozen until resumed.
        OVER: Terminal (collision or no room left for food).
    """

    READY = auto()
    PLAYING = auto()
    PAUSED = auto()
    OVER = auto()
