"""Food placement and consumption.

Placement picks uniformly among empty cells using the state's injected random
source: one sample ``s`` in ``[0, 1)`` selects index ``floor(s * n)`` of the
row-major list of ``n`` empty cells. A full board yields ``None``, which the
consumption system turns into the terminal ``OVER`` status.
"""

import math
from dataclasses import replace
from typing import Optional
from grid_snake.components import Position
from grid_snake.state import State
from grid_snake.systems.terminal import BOARD_FULL, game_over_system
from grid_snake.utils.grid import empty_cells


def spawn_food(state: State) -> Optional[Position]:
    """Choose a food cell not covered by the snake, or ``None`` if none remain."""
    candidates = empty_cells(state)
    if not candidates:
        return None
    idx = math.floor(state.rng() * len(candidates))
    return candidates[min(idx, len(candidates) - 1)]


def food_system(state: State) -> State:
    """Score and respawn food if the head sits on it.

    Runs after the snake has moved. The snake has already grown (the movement
    system kept the tail), so respawning sees the new body.
    """
    if state.food is None or state.head != state.food:
        return state

    state = replace(state, score=state.score + 1)
    food = spawn_food(state)
    state = replace(state, food=food)
    if food is None:
        return game_over_system(state, BOARD_FULL)
    return state
