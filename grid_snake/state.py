"""Core immutable game ``State`` dataclass.

This module defines the frozen :class:`State` object that represents the
entire game snapshot at a single tick. All systems are pure functions that
take a previous ``State`` plus inputs (e.g. a ``Direction``) and return a
*new* ``State``; no mutation happens in-place. This keeps the engine
deterministic, easy to test, and friendly to functional style reducers.

Design notes:

* The snake body is a **persistent vector** (``pyrsistent.PVector``) of
    :class:`grid_snake.components.Position`, head first.
* ``direction`` is the heading used by the last tick; ``pending_direction``
    is the latest accepted request and is committed at the start of the next
    tick. Keeping them apart prevents two turns within one tick from
    reversing the snake into its own neck.
* ``rng`` is the injected random source; food placement never touches the
    global ``random`` module.
* ``status`` is the single lifecycle flag. The reducer short‑circuits on every
    status other than ``PLAYING``.

See :mod:`grid_snake.step` for how the reducer orchestrates systems.
"""

from dataclasses import dataclass
from typing import Any, Optional
from pyrsistent import PVector, pmap, pvector
from pyrsistent.typing import PMap

from grid_snake.actions import Direction
from grid_snake.components import Position, Snake, head_of
from grid_snake.types import GameStatus, RandomSource


@dataclass(frozen=True)
class State:
    """Immutable snake game state.

    Instances are *value objects*; every transition creates a new ``State``.

    Attributes:
        grid_size (int): Width and height of the square grid in cells.
        rng (RandomSource): Sample source used for food placement.
        snake (PVector[Position]): Body segments, head first.
        direction (Direction): Heading applied on the previous tick.
        pending_direction (Direction): Heading to commit on the next tick.
        food (Position | None): Food cell, ``None`` when the board is full.
        score (int): Number of food items eaten since the last reset.
        status (GameStatus): Lifecycle phase.
        turn (int): Number of ticks that advanced the snake.
        message (str | None): Reason for the terminal state, if any.
    """

    # Level
    grid_size: int
    rng: "RandomSource"

    # Board
    snake: Snake = pvector()
    direction: Direction = Direction.RIGHT
    pending_direction: Direction = Direction.RIGHT
    food: Optional[Position] = None

    # Status
    score: int = 0
    status: GameStatus = GameStatus.READY
    turn: int = 0
    message: Optional[str] = None

    @property
    def head(self) -> Position:
        return head_of(self.snake)

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse serialization of populated fields.

        Returns a persistent map of field name to value, skipping empty
        vectors and ``None`` values. Useful for lightweight diagnostics.
        """
        description: PMap[str, Any] = pmap()
        for field in self.__dataclass_fields__:
            if field == "rng":
                continue
            value = getattr(self, field)
            if value is None or (isinstance(value, PVector) and len(value) == 0):
                continue
            description = description.set(field, value)
        return description
