"""Plain-text renderer.

Draws one character per cell followed by a score line and a status label.
Glyphs are configurable so terminals without Unicode support can swap them.
"""

from dataclasses import dataclass, field
from typing import Dict

from grid_snake.renderer.board import BODY, EMPTY, FOOD, HEAD, board_array
from grid_snake.state import State
from grid_snake.types import GameStatus

STATUS_LABELS: Dict[GameStatus, str] = {
    GameStatus.READY: "Ready",
    GameStatus.PLAYING: "Playing",
    GameStatus.PAUSED: "Paused",
    GameStatus.OVER: "Game Over",
}

DEFAULT_GLYPHS: Dict[int, str] = {
    EMPTY: ".",
    BODY: "o",
    HEAD: "@",
    FOOD: "*",
}


@dataclass(frozen=True)
class TextRenderer:
    """Render a ``State`` as a multi-line string.

    Attributes:
        glyphs: Cell code to character mapping (see :mod:`grid_snake.renderer.board`).
        separator: String placed between cells of a row.
    """

    glyphs: Dict[int, str] = field(default_factory=lambda: dict(DEFAULT_GLYPHS))
    separator: str = " "

    def render(self, state: State) -> str:
        board = board_array(state)
        rows = [
            self.separator.join(self.glyphs[int(code)] for code in row)
            for row in board
        ]
        rows.append(f"Score: {state.score}")
        rows.append(self.status_line(state))
        return "\n".join(rows)

    def status_line(self, state: State) -> str:
        label = STATUS_LABELS[state.status]
        if state.status == GameStatus.OVER and state.message:
            return f"{label} ({state.message})"
        return label
