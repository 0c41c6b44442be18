"""Lifecycle helper predicates."""

from grid_snake.state import State
from grid_snake.types import GameStatus


def is_terminal_state(state: State) -> bool:
    """Return True if the game is over."""
    return state.status == GameStatus.OVER


def is_running_state(state: State) -> bool:
    """Return True if ticks currently advance the snake."""
    return state.status == GameStatus.PLAYING
