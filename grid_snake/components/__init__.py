"""grid_snake.components
=======================

Aggregate import surface for the value objects the engine is built from.

All classes are simple frozen ``@dataclass`` values (or persistent vectors of
them); they carry no game rules. See the ``systems`` package for the
transformations applied during a tick::

    from grid_snake.components import Position, make_snake
"""

from .position import Position
from .snake import (
    INITIAL_SNAKE_LENGTH,
    Snake,
    advance,
    grow,
    head_of,
    make_snake,
)

__all__ = [
    "INITIAL_SNAKE_LENGTH",
    "Position",
    "Snake",
    "advance",
    "grow",
    "head_of",
    "make_snake",
]
