"""Rendering subpackage.

Turns immutable ``State`` snapshots into representations an embedding
application can display or feed to agents:

* :mod:`grid_snake.renderer.board` encodes the board as a small NumPy grid.
* :mod:`grid_snake.renderer.text` draws that grid as text with a score and
    status line.

Renderers only read the state; they never drive transitions.
"""

from .board import BODY, EMPTY, FOOD, HEAD, board_array
from .text import STATUS_LABELS, TextRenderer

__all__ = [
    "BODY",
    "EMPTY",
    "FOOD",
    "HEAD",
    "STATUS_LABELS",
    "TextRenderer",
    "board_array",
]
