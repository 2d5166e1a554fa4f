"""
Human coordinate notation.

Players type a square as two digits, column first then row, both counted
from 1: "36" is column 3, row 6, i.e. the cell (5, 2). A direction is
"l", "r" or "b" (back to piece selection).
"""

from typing import Iterable, Optional

from .board import Board
from .exceptions import NotationError, OutOfBoundsError
from .types import Action, Direction, Position

BACK = "back"

_DIRECTIONS = {
    "l": Direction.LEFT,
    "left": Direction.LEFT,
    "r": Direction.RIGHT,
    "right": Direction.RIGHT,
}


def parse_position(text: str) -> Position:
    """
    Parse "XY" into a zero-indexed (row, col) cell.

    Raises:
        NotationError: If the text is not exactly two digits.
        OutOfBoundsError: If a digit is outside 1-8.
    """
    stripped = text.strip()
    if len(stripped) != 2 or not all(ch in "0123456789" for ch in stripped):
        raise NotationError(text, "expected two digits, column then row")

    col, row = int(stripped[0]) - 1, int(stripped[1]) - 1
    if not Board.in_bounds((row, col)):
        raise OutOfBoundsError(stripped)
    return row, col


def format_position(pos: Position) -> str:
    """Format a (row, col) cell as "XY"."""
    if not Board.in_bounds(pos):
        raise OutOfBoundsError(pos)
    row, col = pos
    return f"{col + 1}{row + 1}"


def parse_direction(text: str):
    """
    Parse a direction choice.

    Returns Direction.LEFT, Direction.RIGHT, or the BACK marker.
    """
    key = text.strip().lower()
    if key in ("b", BACK):
        return BACK
    if key not in _DIRECTIONS:
        raise NotationError(text, "expected l, r or b")
    return _DIRECTIONS[key]


def direction_of(action: Action) -> Direction:
    """The forward diagonal an action starts along."""
    first_step = action.over if action.is_capture else action.end
    return Direction.LEFT if first_step[1] < action.start[1] else Direction.RIGHT


def action_for(actions: Iterable[Action], start: Position, direction: Direction) -> Optional[Action]:
    """Find the legal action that moves the piece at start in a direction."""
    for action in actions:
        if action.start == tuple(start) and direction_of(action) == direction:
            return action
    return None


def format_action(action: Action) -> str:
    """Human-readable form, e.g. "36-47" or "36x58"."""
    separator = "x" if action.is_capture else "-"
    return f"{format_position(action.start)}{separator}{format_position(action.end)}"
