"""Session configuration.

Values are fixed for the lifetime of a session; changing them means building
a new :class:`grid_snake.session.Session` (or restarting with a new config).
"""

from dataclasses import dataclass
from typing import Optional

from grid_snake.factory import validate_grid_size

DEFAULT_GRID_SIZE = 20
DEFAULT_TICK_MS = 120


@dataclass(frozen=True)
class SessionConfig:
    """Tunables supplied once at session start.

    Attributes:
        grid_size: Side length of the square grid.
        tick_ms: Timer interval between ticks in milliseconds.
        seed: Seed for the food random source (``None`` for a fresh one).
    """

    grid_size: int = DEFAULT_GRID_SIZE
    tick_ms: int = DEFAULT_TICK_MS
    seed: Optional[int] = None

    def validate(self) -> "SessionConfig":
        """Return ``self`` or raise ``ValueError`` on an unusable setting."""
        validate_grid_size(self.grid_size)
        if self.tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {self.tick_ms}")
        return self
