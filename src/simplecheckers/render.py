"""Text rendering of the board for the console."""

from typing import Optional

from .board import Board
from .config import UISettings
from .types import Player

SEPARATOR = "  " + "-" * 33


def render_board(board: Board, settings: Optional[UISettings] = None) -> str:
    """
    Draw the board as a boxed grid with 1-indexed labels.

    Columns are numbered across the top and rows down the left, matching
    the "XY" input notation.
    """
    if settings is None:
        settings = UISettings()
    glyphs = {
        None: settings.empty_glyph,
        Player.ONE: settings.p1_glyph,
        Player.TWO: settings.p2_glyph,
    }

    lines = ["    " + "   ".join(str(col + 1) for col in range(Board.SIZE)), SEPARATOR]
    for row in range(Board.SIZE):
        cells = (glyphs[board.occupant_at((row, col))] for col in range(Board.SIZE))
        lines.append(f"{row + 1} | " + " | ".join(cells) + " |")
        lines.append(SEPARATOR)
    return "\n".join(lines)
