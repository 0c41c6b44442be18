"""Terminal condition system.

Every failure mode of a tick (wall hit, self hit, no room left for food)
collapses into the single ``OVER`` status; ``message`` keeps the reason for
renderers and logs.
"""

import logging
from dataclasses import replace
from grid_snake.state import State
from grid_snake.types import GameStatus

logger = logging.getLogger(__name__)

WALL_COLLISION = "Hit the wall"
SELF_COLLISION = "Hit itself"
BOARD_FULL = "Board full"


def game_over_system(state: State, reason: str) -> State:
    """Set ``OVER`` with ``reason`` (idempotent once terminal)."""
    if state.status == GameStatus.OVER:
        return state
    logger.debug("Game over after %d turns (score %d): %s", state.turn, state.score, reason)
    return replace(state, status=GameStatus.OVER, message=reason)
