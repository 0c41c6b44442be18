"""Board encoding.

``board_array`` returns a ``(grid_size, grid_size)`` ``int8`` array indexed
``[y, x]`` with one code per cell. The head is encoded apart from the body so
renderers can draw it distinctly.
"""

import numpy as np
import numpy.typing as npt

from grid_snake.state import State

EMPTY = 0
BODY = 1
HEAD = 2
FOOD = 3


def board_array(state: State) -> npt.NDArray[np.int8]:
    """Encode food and snake cells of ``state`` into a grid of cell codes."""
    board = np.full((state.grid_size, state.grid_size), EMPTY, dtype=np.int8)
    if state.food is not None:
        board[state.food.y, state.food.x] = FOOD
    for segment in state.snake[1:]:
        board[segment.y, segment.x] = BODY
    if len(state.snake) > 0:
        board[state.head.y, state.head.x] = HEAD
    return board
