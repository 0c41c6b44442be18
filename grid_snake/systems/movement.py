"""Snake movement system.

Moves the head one cell along the committed direction:

1. A destination outside the grid ends the game (snake left as is).
2. A destination on any segment of the *pre-move* body ends the game, the
    tail cell included even though it would be vacated this tick.
3. Otherwise the head is prepended. The tail is kept when the destination
    holds food (growth) and dropped otherwise.

Scoring and respawning are left to :mod:`grid_snake.systems.food`.
"""

from dataclasses import replace
from typing import Optional

from grid_snake.components import Position, advance, grow
from grid_snake.state import State
from grid_snake.systems.terminal import SELF_COLLISION, WALL_COLLISION, game_over_system
from grid_snake.utils.grid import is_in_bounds


def next_head_position(state: State) -> Position:
    """Cell the head would enter this tick with ``state.direction``."""
    return state.head.moved(state.direction)


def collision_reason(state: State, pos: Position) -> Optional[str]:
    """Return why entering ``pos`` would end the game, or ``None`` if safe."""
    if not is_in_bounds(state, pos):
        return WALL_COLLISION
    if pos in state.snake:
        return SELF_COLLISION
    return None


def movement_system(state: State) -> State:
    """Advance the snake one cell.

    Args:
        state (State): State whose ``direction`` has already been committed.

    Returns:
        State: Game-over state with the body untouched on collision, otherwise
            a state with the moved (or grown) body and ``turn`` bumped.
    """
    next_pos = next_head_position(state)

    reason = collision_reason(state, next_pos)
    if reason is not None:
        return game_over_system(state, reason)

    if next_pos == state.food:
        snake = grow(state.snake, next_pos)
    else:
        snake = advance(state.snake, next_pos)
    return replace(state, snake=snake, turn=state.turn + 1)
