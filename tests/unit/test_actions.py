import pytest

from grid_snake.actions import (
    DIRECTION_VECTORS,
    MOVE_DIRECTIONS,
    Direction,
    GymAction,
    is_opposite,
)
from grid_snake.components import Position


@pytest.mark.parametrize(
    "a, b",
    [
        (Direction.UP, Direction.DOWN),
        (Direction.DOWN, Direction.UP),
        (Direction.LEFT, Direction.RIGHT),
        (Direction.RIGHT, Direction.LEFT),
    ],
)
def test_opposite_pairs(a: Direction, b: Direction) -> None:
    assert is_opposite(a, b)


@pytest.mark.parametrize("direction", MOVE_DIRECTIONS)
def test_direction_is_not_opposite_to_itself(direction: Direction) -> None:
    assert not is_opposite(direction, direction)


def test_perpendicular_directions_are_not_opposite() -> None:
    assert not is_opposite(Direction.UP, Direction.LEFT)
    assert not is_opposite(Direction.RIGHT, Direction.DOWN)


def test_vectors_are_unit_steps() -> None:
    assert DIRECTION_VECTORS[Direction.UP] == (0, -1)
    assert DIRECTION_VECTORS[Direction.DOWN] == (0, 1)
    assert DIRECTION_VECTORS[Direction.LEFT] == (-1, 0)
    assert DIRECTION_VECTORS[Direction.RIGHT] == (1, 0)
    for dx, dy in DIRECTION_VECTORS.values():
        assert abs(dx) + abs(dy) == 1


def test_every_direction_has_a_vector() -> None:
    assert set(DIRECTION_VECTORS) == set(Direction)


def test_gym_action_order_matches_move_directions() -> None:
    for action in GymAction:
        assert MOVE_DIRECTIONS[action].name == action.name


@pytest.mark.parametrize(
    "direction, expected",
    [
        (Direction.UP, (3, 2)),
        (Direction.DOWN, (3, 4)),
        (Direction.LEFT, (2, 3)),
        (Direction.RIGHT, (4, 3)),
    ],
)
def test_position_moved(direction: Direction, expected: tuple[int, int]) -> None:
    assert Position(3, 3).moved(direction) == Position(*expected)
