import pytest

from grid_snake.actions import Direction
from grid_snake.systems.direction import direction_system
from grid_snake.types import GameStatus
from tests.test_utils import make_snake_state


@pytest.mark.parametrize(
    "current, reverse",
    [
        (Direction.RIGHT, Direction.LEFT),
        (Direction.LEFT, Direction.RIGHT),
        (Direction.UP, Direction.DOWN),
        (Direction.DOWN, Direction.UP),
    ],
)
def test_reversal_is_ignored(current: Direction, reverse: Direction) -> None:
    state = make_snake_state(direction=current)
    new_state = direction_system(state, reverse)
    assert new_state is state
    assert new_state.pending_direction == current


def test_reversal_rejection_is_idempotent() -> None:
    state = make_snake_state(direction=Direction.RIGHT)
    once = direction_system(state, Direction.LEFT)
    twice = direction_system(once, Direction.LEFT)
    assert twice.pending_direction == Direction.RIGHT


def test_turn_is_queued_not_applied() -> None:
    state = make_snake_state(direction=Direction.RIGHT)
    new_state = direction_system(state, Direction.UP)
    assert new_state.pending_direction == Direction.UP
    assert new_state.direction == Direction.RIGHT
    assert new_state.snake == state.snake


def test_latest_valid_request_wins() -> None:
    state = make_snake_state(direction=Direction.RIGHT)
    state = direction_system(state, Direction.UP)
    state = direction_system(state, Direction.DOWN)
    assert state.pending_direction == Direction.DOWN


def test_reversal_is_checked_against_current_not_pending() -> None:
    # Pending UP then LEFT: LEFT reverses the current heading (RIGHT) and is dropped.
    state = make_snake_state(direction=Direction.RIGHT)
    state = direction_system(state, Direction.UP)
    state = direction_system(state, Direction.LEFT)
    assert state.pending_direction == Direction.UP


def test_ready_becomes_playing_on_first_accepted_direction() -> None:
    state = make_snake_state(status=GameStatus.READY)
    new_state = direction_system(state, Direction.UP)
    assert new_state.status == GameStatus.PLAYING


def test_same_direction_also_starts_ready_game() -> None:
    state = make_snake_state(status=GameStatus.READY)
    new_state = direction_system(state, Direction.RIGHT)
    assert new_state.status == GameStatus.PLAYING


def test_rejected_direction_does_not_start_ready_game() -> None:
    state = make_snake_state(status=GameStatus.READY)
    new_state = direction_system(state, Direction.LEFT)
    assert new_state.status == GameStatus.READY


@pytest.mark.parametrize("status", [GameStatus.PAUSED, GameStatus.OVER])
def test_direction_queued_without_status_change(status: GameStatus) -> None:
    state = make_snake_state(status=status)
    new_state = direction_system(state, Direction.DOWN)
    assert new_state.pending_direction == Direction.DOWN
    assert new_state.status == status
