"""Board state representation for Simple Checkers."""

import numbers
from typing import Dict, List, Optional, Set

import numpy as np

from .exceptions import IllegalMoveError, OutOfBoundsError
from .rules import BOARD_SIZE, PLAYER_ONE_ROWS, PLAYER_TWO_ROWS
from .types import Jump, Player, Position, SimpleMove

EMPTY = 0


class Board:
    """
    8x8 board for Simple Checkers.

    The occupancy grid is a numpy array holding 0 for an empty cell or the
    owning player's value. Row 0 is the top; Player 2 starts on rows 0-2,
    Player 1 on rows 5-7, both on the squares where (row + col) is odd.

    Each player also has a set of occupied positions. The grid is the
    source of truth and the sets are kept in step on every mutation.
    """

    SIZE = BOARD_SIZE

    def __init__(self):
        """Create an empty board."""
        self._grid = np.zeros((self.SIZE, self.SIZE), dtype=np.int8)
        self._pieces: Dict[Player, Set[Position]] = {Player.ONE: set(), Player.TWO: set()}

    def clone(self) -> "Board":
        """Create an independent copy of this board."""
        new_board = Board()
        new_board._grid = self._grid.copy()
        new_board._pieces = {player: set(cells) for player, cells in self._pieces.items()}
        return new_board

    @classmethod
    def initial(cls) -> "Board":
        """Create a board with the standard initial setup."""
        board = cls()
        board.initialize()
        return board

    def initialize(self) -> None:
        """Clear the board and lay out the 24 starting pieces."""
        self._grid.fill(EMPTY)
        for cells in self._pieces.values():
            cells.clear()

        for player, rows in ((Player.TWO, PLAYER_TWO_ROWS), (Player.ONE, PLAYER_ONE_ROWS)):
            for row in rows:
                for col in range((row + 1) % 2, self.SIZE, 2):
                    self._set((row, col), player)

    @staticmethod
    def is_playable(row: int, col: int) -> bool:
        """Check if a square is a dark square."""
        return (row + col) % 2 == 1

    @staticmethod
    def in_bounds(pos: Position) -> bool:
        """Check if a position is within the board."""
        try:
            row, col = pos
            if not (isinstance(row, numbers.Integral) and isinstance(col, numbers.Integral)):
                return False
            return 0 <= row < Board.SIZE and 0 <= col < Board.SIZE
        except (TypeError, ValueError):
            return False

    def _check(self, pos: Position) -> Position:
        if not self.in_bounds(pos):
            raise OutOfBoundsError(pos)
        return int(pos[0]), int(pos[1])

    def occupant_at(self, pos: Position) -> Optional[Player]:
        """Get the player occupying a position, or None if empty."""
        row, col = self._check(pos)
        value = int(self._grid[row, col])
        return Player(value) if value != EMPTY else None

    def is_empty(self, pos: Position) -> bool:
        """Check if a position is empty."""
        return self.occupant_at(pos) is None

    def _set(self, pos: Position, player: Optional[Player]) -> None:
        """Write one cell and keep the piece sets consistent."""
        previous = self._grid[pos]
        if previous != EMPTY:
            self._pieces[Player(int(previous))].discard(pos)
        if player is None:
            self._grid[pos] = EMPTY
        else:
            self._grid[pos] = int(player)
            self._pieces[player].add(pos)

    def place(self, pos: Position, player: Player) -> None:
        """Put a piece on a position, replacing whatever was there."""
        self._set(self._check(pos), Player(player))

    def remove(self, pos: Position) -> Optional[Player]:
        """Remove and return the occupant of a position."""
        pos = self._check(pos)
        occupant = self.occupant_at(pos)
        self._set(pos, None)
        return occupant

    def pieces(self, player: Player) -> List[Position]:
        """Positions occupied by a player, in row-major order."""
        return sorted(self._pieces[player])

    def count(self, player: Player) -> int:
        """Number of pieces a player has on the board."""
        return len(self._pieces[player])

    def has_pieces(self, player: Player) -> bool:
        """Check if a player has any pieces on the board."""
        return bool(self._pieces[player])

    def apply_simple_move(self, start: Position, end: Position) -> None:
        """
        Move a piece one forward-diagonal step onto an empty cell.

        Raises:
            OutOfBoundsError: If either position is off the board.
            IllegalMoveError: If a precondition fails. The board is unchanged.
        """
        move = SimpleMove(start, end)
        start, end = self._check(start), self._check(end)
        player = self.occupant_at(start)
        if player is None:
            raise IllegalMoveError(move, f"no piece at {start}")
        if not self.is_empty(end):
            raise IllegalMoveError(move, f"destination {end} is occupied")
        if end[0] - start[0] != player.forward or abs(end[1] - start[1]) != 1:
            raise IllegalMoveError(move, "destination is not a forward diagonal")

        self._set(start, None)
        self._set(end, player)

    def apply_jump(self, start: Position, over: Position, end: Position) -> None:
        """
        Jump a piece over an enemy piece onto the empty cell beyond it.

        Raises:
            OutOfBoundsError: If any position is off the board.
            IllegalMoveError: If a precondition fails. The board is unchanged.
        """
        jump = Jump(start, over, end)
        start, over, end = self._check(start), self._check(over), self._check(end)
        player = self.occupant_at(start)
        if player is None:
            raise IllegalMoveError(jump, f"no piece at {start}")
        if over[0] - start[0] != player.forward or abs(over[1] - start[1]) != 1:
            raise IllegalMoveError(jump, "captured cell is not a forward diagonal")
        if end != (2 * over[0] - start[0], 2 * over[1] - start[1]):
            raise IllegalMoveError(jump, "landing cell is not beyond the captured cell")
        victim = self.occupant_at(over)
        if victim is None:
            raise IllegalMoveError(jump, f"nothing to capture at {over}")
        if victim == player:
            raise IllegalMoveError(jump, "cannot capture your own piece")
        if not self.is_empty(end):
            raise IllegalMoveError(jump, f"landing cell {end} is occupied")

        self._set(start, None)
        self._set(over, None)
        self._set(end, player)

    def to_array(self) -> np.ndarray:
        """Return a copy of the occupancy grid."""
        return self._grid.copy()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self._grid, other._grid))

    __hash__ = None

    def __str__(self) -> str:
        """String representation of the board."""
        lines = ["  0 1 2 3 4 5 6 7"]
        for row in range(self.SIZE):
            row_str = f"{row} "
            for col in range(self.SIZE):
                occupant = self.occupant_at((row, col))
                if occupant is None:
                    row_str += ". " if self.is_playable(row, col) else "  "
                elif occupant == Player.ONE:
                    row_str += "o "
                else:
                    row_str += "x "
            lines.append(row_str.rstrip())
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Board(p1={self.count(Player.ONE)}, p2={self.count(Player.TWO)})"
