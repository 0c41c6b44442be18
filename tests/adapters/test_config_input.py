import pytest

from grid_snake.actions import Direction
from grid_snake.config import DEFAULT_GRID_SIZE, DEFAULT_TICK_MS, SessionConfig
from grid_snake.input import InputCommand, parse_key


def test_default_config() -> None:
    config = SessionConfig()
    assert config.grid_size == DEFAULT_GRID_SIZE == 20
    assert config.tick_ms == DEFAULT_TICK_MS == 120
    assert config.seed is None
    assert config.validate() is config


@pytest.mark.parametrize(
    "kwargs",
    [
        {"grid_size": 3},
        {"grid_size": "20"},
        {"grid_size": 4.5},
        {"grid_size": None},
        {"grid_size": True},
        {"tick_ms": 0},
        {"tick_ms": -10},
    ],
)
def test_invalid_config(kwargs: dict[str, object]) -> None:
    with pytest.raises(ValueError):
        SessionConfig(**kwargs).validate()  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "key, expected",
    [
        ("ArrowUp", Direction.UP),
        ("w", Direction.UP),
        ("S", Direction.DOWN),
        ("arrowleft", Direction.LEFT),
        ("D", Direction.RIGHT),
        (" ", InputCommand.PAUSE),
        ("R", InputCommand.RESTART),
        ("Escape", None),
    ],
)
def test_parse_key(key: str, expected: object) -> None:
    assert parse_key(key) == expected


def test_config_and_factory_share_grid_size_rules() -> None:
    from grid_snake.factory import MIN_GRID_SIZE, validate_grid_size

    assert validate_grid_size(MIN_GRID_SIZE) == MIN_GRID_SIZE
    assert SessionConfig(grid_size=MIN_GRID_SIZE).validate().grid_size == MIN_GRID_SIZE
