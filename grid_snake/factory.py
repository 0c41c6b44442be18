"""Initial state construction.

:func:`create_initial_state` is the only way a session obtains a fresh
:class:`grid_snake.state.State`; restarting a game means calling it again.
"""

from dataclasses import replace

from grid_snake.actions import Direction
from grid_snake.components import INITIAL_SNAKE_LENGTH, Position, make_snake
from grid_snake.state import State
from grid_snake.systems.food import spawn_food
from grid_snake.types import GameStatus, RandomSource

# The head sits at grid_size // 2 with the body trailing left, so the tail
# needs grid_size // 2 >= INITIAL_SNAKE_LENGTH - 1 to stay on the board.
MIN_GRID_SIZE = 2 * (INITIAL_SNAKE_LENGTH - 1)


def validate_grid_size(grid_size: int) -> int:
    """Return ``grid_size`` or raise ``ValueError`` if it cannot hold the snake."""
    if isinstance(grid_size, bool) or not isinstance(grid_size, int):
        raise ValueError(f"grid_size must be an int, got {grid_size!r}")
    if grid_size < MIN_GRID_SIZE:
        raise ValueError(
            f"grid_size must be at least {MIN_GRID_SIZE}, got {grid_size}"
        )
    return grid_size


def create_initial_state(grid_size: int, rng: RandomSource) -> State:
    """Build the opening state for a ``grid_size`` x ``grid_size`` board.

    The snake starts horizontally centred, heading right, with its head at
    ``(grid_size // 2, grid_size // 2)`` and two segments trailing to the left.
    Food is placed with one sample from ``rng``.

    Args:
        grid_size (int): Side length of the square grid (at least ``MIN_GRID_SIZE``).
        rng (RandomSource): Sample source used for this and every later food placement.

    Returns:
        State: ``READY`` state with score 0.

    Raises:
        ValueError: If ``grid_size`` is not an int or too small for the snake.
    """
    validate_grid_size(grid_size)

    mid = grid_size // 2
    snake = make_snake(Position(mid - i, mid) for i in range(INITIAL_SNAKE_LENGTH))
    state = State(
        grid_size=grid_size,
        rng=rng,
        snake=snake,
        direction=Direction.RIGHT,
        pending_direction=Direction.RIGHT,
        status=GameStatus.READY,
    )
    return replace(state, food=spawn_food(state))
