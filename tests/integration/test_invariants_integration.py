import random

import pytest

from grid_snake.actions import MOVE_DIRECTIONS
from grid_snake.factory import create_initial_state
from grid_snake.step import set_direction, step, toggle_pause
from grid_snake.types import GameStatus
from grid_snake.utils.rng import seeded_rng
from tests.test_utils import assert_state_invariants


@pytest.mark.parametrize("seed", range(20))
def test_random_play_preserves_invariants(seed: int) -> None:
    chooser = random.Random(seed)
    state = create_initial_state(6, seeded_rng(seed))
    assert_state_invariants(state)
    eaten = 0

    for _ in range(300):
        roll = chooser.random()
        if roll < 0.3:
            state = set_direction(state, chooser.choice(MOVE_DIRECTIONS))
        elif roll < 0.33:
            state = toggle_pause(state)

        prev = state
        state = step(state)
        assert_state_invariants(state)

        if prev.status != GameStatus.PLAYING:
            assert state is prev
            continue
        if state.status == GameStatus.OVER and state.snake == prev.snake:
            # Collision: nothing else changed.
            assert state.score == prev.score
            break
        if state.score == prev.score + 1:
            eaten += 1
            assert len(state.snake) == len(prev.snake) + 1
        else:
            assert state.score == prev.score
            assert len(state.snake) == len(prev.snake)
        assert state.score == eaten
        if state.status == GameStatus.OVER:
            break
