"""Key bindings for input sources.

Maps raw key names (as reported by browsers / terminal libraries) to either a
:class:`Direction` or an :class:`InputCommand`. No filtering happens here;
reversals are rejected by the engine.
"""

from enum import StrEnum, auto
from typing import Dict, Optional, Union

from grid_snake.actions import Direction


class InputCommand(StrEnum):
    """Non-directional controls."""

    PAUSE = auto()
    RESTART = auto()


InputEvent = Union[Direction, InputCommand]

KEY_BINDINGS: Dict[str, InputEvent] = {
    "arrowup": Direction.UP,
    "w": Direction.UP,
    "arrowdown": Direction.DOWN,
    "s": Direction.DOWN,
    "arrowleft": Direction.LEFT,
    "a": Direction.LEFT,
    "arrowright": Direction.RIGHT,
    "d": Direction.RIGHT,
    " ": InputCommand.PAUSE,
    "r": InputCommand.RESTART,
}


def parse_key(key: str) -> Optional[InputEvent]:
    """Return the event bound to ``key`` (case-insensitive), or ``None``."""
    return KEY_BINDINGS.get(key.lower())
