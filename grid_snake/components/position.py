"""Position component.

Immutable integer grid coordinates. The snake body is a persistent vector of
these, head first.
"""

from dataclasses import dataclass

from grid_snake.actions import DIRECTION_VECTORS, Direction


@dataclass(frozen=True)
class Position:
    """Grid coordinate.

    Attributes:
        x: Column index (0 at left).
        y: Row index (0 at top).
    """

    x: int
    y: int

    def moved(self, direction: Direction) -> "Position":
        """Return the adjacent position one step towards ``direction``."""
        dx, dy = DIRECTION_VECTORS[direction]
        return Position(self.x + dx, self.y + dy)
