"""Explicit game session owned by the embedding application.

A :class:`Session` holds the single current ``State`` and replaces it on
every transition. Restarting bumps ``generation``; a timer that captured an
older generation can pass it to :meth:`Session.tick` and its late ticks are
ignored instead of advancing the fresh game.
"""

import logging
from typing import Optional

from grid_snake.actions import Direction
from grid_snake.config import SessionConfig
from grid_snake.factory import create_initial_state
from grid_snake.input import InputCommand, parse_key
from grid_snake.state import State
from grid_snake.step import set_direction, start, step, toggle_pause
from grid_snake.types import RandomSource
from grid_snake.utils.terminal import is_terminal_state
from grid_snake.utils.rng import seeded_rng

logger = logging.getLogger(__name__)


class Session:
    """One player's game, including restarts.

    Args:
        config: Session settings; validated on construction.
        rng: Optional random source. Defaults to ``seeded_rng(config.seed)``;
            the same source keeps being used across restarts.
    """

    def __init__(
        self, config: Optional[SessionConfig] = None, rng: Optional[RandomSource] = None
    ):
        self.config = (config or SessionConfig()).validate()
        self._rng = rng if rng is not None else seeded_rng(self.config.seed)
        self.generation = 0
        self.state: State = create_initial_state(self.config.grid_size, self._rng)

    def restart(self) -> State:
        """Discard the current game and start a new one."""
        self.generation += 1
        self.state = create_initial_state(self.config.grid_size, self._rng)
        logger.info("Session restarted (generation %d)", self.generation)
        return self.state

    def set_direction(self, direction: Direction) -> State:
        self.state = set_direction(self.state, direction)
        return self.state

    def toggle_pause(self) -> State:
        self.state = toggle_pause(self.state)
        return self.state

    def start(self) -> State:
        self.state = start(self.state)
        return self.state

    def tick(self, generation: Optional[int] = None) -> State:
        """Advance one tick.

        Args:
            generation: Generation the caller's timer belongs to. Ticks for a
                stale generation leave the state untouched.
        """
        if generation is not None and generation != self.generation:
            logger.debug(
                "Ignoring tick for generation %d (current %d)",
                generation,
                self.generation,
            )
            return self.state
        self.state = step(self.state)
        return self.state

    def handle_key(self, key: str) -> State:
        """Dispatch a raw key name through :data:`grid_snake.input.KEY_BINDINGS`."""
        event = parse_key(key)
        if event is None:
            return self.state
        if isinstance(event, Direction):
            return self.set_direction(event)
        if event == InputCommand.PAUSE:
            return self.toggle_pause()
        return self.restart()

    @property
    def is_over(self) -> bool:
        return is_terminal_state(self.state)
