"""Snake body helpers.

The body is stored on :class:`grid_snake.state.State` as a
``PVector[Position]`` ordered head first, tail last. These helpers build and
reshape that vector without mutating it.
"""

from typing import Iterable

from pyrsistent import pvector
from pyrsistent.typing import PVector

from grid_snake.components.position import Position

Snake = PVector[Position]

INITIAL_SNAKE_LENGTH = 3


def make_snake(positions: Iterable[Position]) -> Snake:
    """Build a snake body from head-first positions."""
    return pvector(positions)


def head_of(snake: Snake) -> Position:
    return snake[0]


def grow(snake: Snake, new_head: Position) -> Snake:
    """Prepend ``new_head`` keeping the tail (length + 1)."""
    return pvector([new_head]).extend(snake)


def advance(snake: Snake, new_head: Position) -> Snake:
    """Prepend ``new_head`` and drop the tail (length unchanged)."""
    return grow(snake, new_head).delete(len(snake))
