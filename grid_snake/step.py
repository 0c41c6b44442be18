"""State reducer and input entry points.

This module wires together the systems that implement a single *tick* and
exposes the input transitions the embedding application calls between ticks.
Every function here is pure: it returns a *new*
:class:`grid_snake.state.State` (or the same object when nothing changes).

Tick ordering:

1. Short-circuit unless the game is ``PLAYING``.
2. Commit ``pending_direction`` as ``direction``.
3. ``movement_system`` checks wall then self collision against the pre-move
    body, then moves or grows the snake.
4. ``food_system`` scores, respawns food and ends the game on a full board.
"""

from dataclasses import replace

from grid_snake.actions import Direction
from grid_snake.state import State
from grid_snake.systems.direction import direction_system
from grid_snake.systems.food import food_system
from grid_snake.systems.movement import movement_system
from grid_snake.systems.status import start_system, toggle_pause_system
from grid_snake.utils.terminal import is_running_state, is_terminal_state


def step(state: State) -> State:
    """Advance the simulation by one tick.

    Args:
        state (State): Previous immutable game state.

    Returns:
        State: Next state snapshot. Non-``PLAYING`` states are returned
            unchanged (same object).
    """
    if not is_running_state(state):
        return state

    state = replace(state, direction=state.pending_direction)
    state = movement_system(state)
    if is_terminal_state(state):
        return state
    return food_system(state)


def set_direction(state: State, direction: Direction) -> State:
    """Queue ``direction`` for the next tick (reversals are ignored)."""
    return direction_system(state, direction)


def toggle_pause(state: State) -> State:
    """Pause a running or ready game, resume a paused one."""
    return toggle_pause_system(state)


def start(state: State) -> State:
    """Begin a ``READY`` game explicitly."""
    return start_system(state)
