"""Fixed-interval tick driver.

Runs a :class:`grid_snake.session.Session` in the current thread: every
``config.tick_ms`` it advances one tick, renders the new state and hands the
frame to ``on_frame``. Input callbacks are expected to run between ticks on
the same thread (e.g. from ``on_frame``), never concurrently.
"""

import logging
import time
from typing import Callable, Optional

from grid_snake.renderer import TextRenderer
from grid_snake.session import Session

logger = logging.getLogger(__name__)

FrameCallback = Callable[[str], None]


class TickDriver:
    """Drive a session at its configured tick interval.

    Args:
        session: Session to advance.
        renderer: Renderer turning each state into a frame.
        on_frame: Receives every rendered frame (initial frame included).
        clock: Monotonic clock in seconds (injectable for tests).
        sleep: Sleep function in seconds (injectable for tests).
    """

    def __init__(
        self,
        session: Session,
        renderer: Optional[TextRenderer] = None,
        on_frame: Optional[FrameCallback] = None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.session = session
        self.renderer = renderer or TextRenderer()
        self.on_frame = on_frame or (lambda frame: None)
        self._clock = clock
        self._sleep = sleep
        self._running = False
        self.ticks = 0

    def stop(self) -> None:
        """Stop after the current tick."""
        self._running = False

    def run(self, max_ticks: Optional[int] = None) -> int:
        """Tick until the game is over, ``max_ticks`` is reached or :meth:`stop`.

        Returns:
            int: Number of ticks issued during this call.
        """
        interval = self.session.config.tick_ms / 1000.0
        generation = self.session.generation
        issued = 0
        self._running = True
        logger.info(
            "Driver started (grid %d, tick %d ms)",
            self.session.config.grid_size,
            self.session.config.tick_ms,
        )
        self.on_frame(self.renderer.render(self.session.state))

        next_tick = self._clock() + interval
        while self._running:
            if max_ticks is not None and issued >= max_ticks:
                break
            delay = next_tick - self._clock()
            if delay > 0:
                self._sleep(delay)
            next_tick += interval

            if self.session.generation != generation:
                # Restarted from a callback; the timer now belongs to the new game.
                generation = self.session.generation
            state = self.session.tick(generation)
            issued += 1
            self.ticks += 1
            self.on_frame(self.renderer.render(state))

            if self.session.is_over:
                break

        self._running = False
        logger.info("Driver stopped after %d ticks (score %d)", issued, self.session.state.score)
        return issued
