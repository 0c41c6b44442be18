"""Grid math helpers.

Utility predicates used by the movement and food systems. Functions here are
pure and intentionally lightweight to keep inner loops fast.
"""

from typing import Iterator, List
from grid_snake.components import Position
from grid_snake.state import State


def is_in_bounds(state: State, pos: Position) -> bool:
    """Return True if ``pos`` lies within the square grid."""
    return 0 <= pos.x < state.grid_size and 0 <= pos.y < state.grid_size


def iter_cells(grid_size: int) -> Iterator[Position]:
    """Yield every cell row by row (``y`` outer, ``x`` inner)."""
    for y in range(grid_size):
        for x in range(grid_size):
            yield Position(x, y)


def empty_cells(state: State) -> List[Position]:
    """Return the cells not covered by any snake segment, in row-major order."""
    occupied = set(state.snake)
    return [pos for pos in iter_cells(state.grid_size) if pos not in occupied]
