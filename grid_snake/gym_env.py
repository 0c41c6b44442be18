"""Gymnasium environment wrapper for Grid Snake.

Provides a structured observation that pairs the encoded board with a small
info dictionary (score, status, turn, length). Reward is the delta of
``state.score`` per step. ``terminated`` is ``True`` once the game is over;
episodes are never truncated by the environment itself.

Observation schema:

``{"board": np.ndarray(N, N) int8, "info": {"score", "status", "turn", "length"}}``

Usage:

``env = SnakeEnv(grid_size=10, seed=0)``

Each ``step`` queues the chosen direction (reversals are ignored by the
engine, exactly as for keyboard input) and then advances one tick.
"""

import gymnasium as gym
import numpy as np
from typing import Any, Dict, Optional, Tuple

from grid_snake.actions import GymAction, MOVE_DIRECTIONS
from grid_snake.config import DEFAULT_GRID_SIZE
from grid_snake.factory import create_initial_state
from grid_snake.renderer import FOOD, TextRenderer, board_array
from grid_snake.state import State
from grid_snake.step import set_direction, start, step
from grid_snake.types import GameStatus
from grid_snake.utils.rng import seeded_rng

ObsType = Dict[str, Any]


def env_status_observation_dict(state: State) -> Dict[str, Any]:
    """Status portion of observation (score, status, turn, length)."""
    return {
        "score": int(state.score),
        "status": str(state.status),
        "turn": int(state.turn),
        "length": len(state.snake),
    }


class SnakeEnv(gym.Env[ObsType, np.integer]):
    """Gymnasium ``Env`` implementation for the snake engine.

    The action space is ``Discrete(len(GymAction))``; see
    :mod:`grid_snake.actions`.
    """

    metadata = {"render_modes": ["ansi"]}

    def __init__(
        self,
        grid_size: int = DEFAULT_GRID_SIZE,
        seed: Optional[int] = None,
        render_mode: str = "ansi",
    ):
        """Create a new environment instance.

        Arguments:
            grid_size: Side length of the square grid.
            seed: Seed for food placement; ``reset(seed=...)`` overrides it.
            render_mode: Only ``"ansi"`` (text frames) is supported.
        """
        from gymnasium import spaces

        if render_mode not in self.metadata["render_modes"]:
            raise ValueError(f"Render mode '{render_mode}' not supported.")

        self.grid_size = grid_size
        self.render_mode = render_mode
        self._seed = seed
        self._renderer = TextRenderer()
        self.state: Optional[State] = None

        def int_box(low: int, high: int) -> spaces.Box:
            return spaces.Box(
                low=np.array(low, dtype=np.int64),
                high=np.array(high, dtype=np.int64),
                shape=(),
                dtype=np.int64,
            )

        cells = grid_size * grid_size
        self.observation_space = spaces.Dict(
            {
                "board": spaces.Box(
                    low=0, high=FOOD, shape=(grid_size, grid_size), dtype=np.int8
                ),
                "info": spaces.Dict(
                    {
                        "score": int_box(0, cells),
                        "status": spaces.Text(max_length=16),
                        "turn": int_box(0, 1_000_000_000),
                        "length": int_box(1, cells),
                    }
                ),
            }
        )
        self.action_space = spaces.Discrete(len(GymAction))

        # Initialize first episode
        self.reset(seed=seed)

    def reset(
        self, *, seed: Optional[int] = None, options: Optional[Dict[str, object]] = None
    ) -> Tuple[ObsType, Dict[str, object]]:
        """Start a new episode.

        Arguments:
            seed: Food placement seed; falls back to the constructor seed.
            options: Gymnasium options (unused).

        Returns:
            Observation dict and empty info dict per Gymnasium API.
        """
        super().reset(seed=seed)
        if seed is not None:
            self._seed = seed
        state = create_initial_state(self.grid_size, seeded_rng(self._seed))
        self.state = start(state)
        return self._get_obs(), self._get_info()

    def step(
        self, action: np.integer
    ) -> Tuple[ObsType, float, bool, bool, Dict[str, object]]:
        """Apply one environment step.

        Arguments:
            action: Integer index into the ``GymAction`` enum.

        Returns:
            (observation, reward, terminated, truncated, info)
        """
        assert self.state is not None

        if not 0 <= int(action) < len(GymAction):
            raise ValueError(f"Invalid action: {action}")
        direction = MOVE_DIRECTIONS[GymAction(int(action))]

        prev_score = self.state.score
        self.state = step(set_direction(self.state, direction))
        reward = float(self.state.score - prev_score)
        terminated = self.state.status == GameStatus.OVER
        return self._get_obs(), reward, terminated, False, self._get_info()

    def render(self) -> Optional[str]:  # type: ignore[override]
        """Return the current state as a text frame."""
        assert self.state is not None
        if self.render_mode != "ansi":
            raise NotImplementedError(f"Render mode '{self.render_mode}' not supported.")
        return self._renderer.render(self.state)

    def _get_obs(self) -> ObsType:
        assert self.state is not None
        return {
            "board": board_array(self.state),
            "info": env_status_observation_dict(self.state),
        }

    def _get_info(self) -> Dict[str, object]:
        """Return the step info (empty placeholder for compatibility)."""
        return {}
