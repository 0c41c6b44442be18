"""Direction enumerations.

Defines the human readable :class:`Direction` (string enum) used by the
engine and a stable integer :class:`GymAction` mapping for Gymnasium
compatibility.

``MOVE_DIRECTIONS`` is the canonical ordered list of directions; vector
lookups go through ``DIRECTION_VECTORS`` rather than ad hoc coordinate pairs.
"""

from enum import IntEnum, StrEnum, auto
from typing import Dict, Tuple


class Direction(StrEnum):
    """String enum of snake headings."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()


MOVE_DIRECTIONS = [Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT]

DIRECTION_VECTORS: Dict[Direction, Tuple[int, int]] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


def is_opposite(a: Direction, b: Direction) -> bool:
    """Return True if the two directions cancel out (vector sum is zero)."""
    ax, ay = DIRECTION_VECTORS[a]
    bx, by = DIRECTION_VECTORS[b]
    return ax + bx == 0 and ay + by == 0


class GymAction(IntEnum):
    """Stable integer mapping for integration with Gymnasium ``Discrete`` spaces."""

    UP = 0  # start at 0 for explicitness
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
