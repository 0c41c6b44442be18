"""Lifecycle toggles driven by external controls (pause button, start)."""

from dataclasses import replace

from grid_snake.state import State
from grid_snake.types import GameStatus


def toggle_pause_system(state: State) -> State:
    """Flip between paused and running.

    ``PAUSED`` resumes to ``PLAYING``; ``PLAYING`` and ``READY`` pause.
    A finished game is returned unchanged.
    """
    if state.status == GameStatus.OVER:
        return state
    if state.status == GameStatus.PAUSED:
        return replace(state, status=GameStatus.PLAYING)
    return replace(state, status=GameStatus.PAUSED)


def start_system(state: State) -> State:
    """Start a ``READY`` game without waiting for a direction change."""
    if state.status != GameStatus.READY:
        return state
    return replace(state, status=GameStatus.PLAYING)
