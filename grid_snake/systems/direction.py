"""Direction input system.

Records the requested heading as ``pending_direction``; the tick reducer
commits it. Requests that would reverse the snake onto its neck are compared
against the *current* heading (not the pending one) and silently dropped.
"""

from dataclasses import replace

from grid_snake.actions import Direction, is_opposite
from grid_snake.state import State
from grid_snake.types import GameStatus


def direction_system(state: State, direction: Direction) -> State:
    """Accept or ignore a direction request.

    Args:
        state (State): Current state.
        direction (Direction): Requested heading.

    Returns:
        State: The same object if the request is the reverse of
            ``state.direction``; otherwise a state with the new pending
            direction. A ``READY`` game switches to ``PLAYING``. Paused and
            finished games keep their status but still queue the request.
    """
    if is_opposite(state.direction, direction):
        return state

    status = state.status
    if status == GameStatus.READY:
        status = GameStatus.PLAYING
    return replace(state, pending_direction=direction, status=status)
