"""
Tests for the Board class: layout, queries, and single-action application.
"""

import numpy as np
import pytest

from simplecheckers.board import Board
from simplecheckers.exceptions import IllegalMoveError, OutOfBoundsError
from simplecheckers.types import Player

PLAYER_TWO_START = {
    (0, 1), (0, 3), (0, 5), (0, 7),
    (1, 0), (1, 2), (1, 4), (1, 6),
    (2, 1), (2, 3), (2, 5), (2, 7),
}
PLAYER_ONE_START = {
    (5, 0), (5, 2), (5, 4), (5, 6),
    (6, 1), (6, 3), (6, 5), (6, 7),
    (7, 0), (7, 2), (7, 4), (7, 6),
}


def index_matches_grid(board: Board) -> bool:
    grid = board.to_array()
    for player in Player:
        from_grid = {tuple(int(v) for v in cell) for cell in np.argwhere(grid == int(player))}
        if from_grid != set(board.pieces(player)):
            return False
    return True


class TestInitialLayout:
    """Tests for the starting position."""

    def test_twelve_pieces_each(self, initial_board):
        """Each player starts with 12 pieces."""
        assert initial_board.count(Player.ONE) == 12
        assert initial_board.count(Player.TWO) == 12

    def test_piece_placement(self, initial_board):
        """Pieces sit on alternating columns of rows 0-2 and 5-7."""
        assert set(initial_board.pieces(Player.ONE)) == PLAYER_ONE_START
        assert set(initial_board.pieces(Player.TWO)) == PLAYER_TWO_START

    def test_nothing_elsewhere(self, initial_board):
        """Every other cell is empty."""
        occupied = PLAYER_ONE_START | PLAYER_TWO_START
        for row in range(8):
            for col in range(8):
                if (row, col) not in occupied:
                    assert initial_board.occupant_at((row, col)) is None

    def test_only_dark_squares(self, initial_board):
        """The starting layout only uses squares where row + col is odd."""
        for player in Player:
            for row, col in initial_board.pieces(player):
                assert Board.is_playable(row, col)

    def test_initialize_resets(self, initial_board):
        """initialize() restores the layout on a modified board."""
        initial_board.remove((5, 0))
        initial_board.place((4, 4), Player.TWO)
        initial_board.initialize()
        assert initial_board == Board.initial()
        assert index_matches_grid(initial_board)


class TestQueries:
    """Tests for bounds and occupancy queries."""

    @pytest.mark.parametrize("pos", [(0, 0), (7, 7), (3, 4)])
    def test_in_bounds(self, pos):
        """Test that cells on the board are in bounds."""
        assert Board.in_bounds(pos)

    @pytest.mark.parametrize("pos", [
        (-1, 0), (0, 8), (8, 8), (3, -2), None, "a", (1, 2, 3), (0.5, 1.9), (1.0, 2.0),
    ])
    def test_out_of_bounds_never_raises(self, pos):
        """in_bounds is a pure check and returns False for anything off-board."""
        assert Board.in_bounds(pos) is False

    def test_occupant_at(self, initial_board):
        """Test that occupant_at reports the owner or None."""
        assert initial_board.occupant_at((7, 0)) == Player.ONE
        assert initial_board.occupant_at((0, 1)) == Player.TWO
        assert initial_board.occupant_at((4, 3)) is None

    @pytest.mark.parametrize("pos", [(8, 0), (0, -1), (-1, -1), (0.5, 1.9), ("0", "1")])
    def test_occupant_at_out_of_bounds(self, initial_board, pos):
        """Test that off-board and non-integral cells raise OutOfBoundsError."""
        with pytest.raises(OutOfBoundsError):
            initial_board.occupant_at(pos)

    def test_clone_independence(self, initial_board):
        """Test that cloned board is independent."""
        clone = initial_board.clone()
        initial_board.remove((0, 1))

        assert clone.occupant_at((0, 1)) == Player.TWO
        assert (0, 1) in clone.pieces(Player.TWO)

    def test_place_replaces_and_keeps_index(self, empty_board):
        """Overwriting a cell moves it from one player's index to the other's."""
        empty_board.place((4, 3), Player.ONE)
        empty_board.place((4, 3), Player.TWO)

        assert empty_board.pieces(Player.ONE) == []
        assert empty_board.pieces(Player.TWO) == [(4, 3)]
        assert index_matches_grid(empty_board)


class TestApplySimpleMove:
    """Tests for apply_simple_move."""

    def test_moves_piece(self, initial_board):
        """Test that a simple move empties the start and fills the target."""
        initial_board.apply_simple_move((5, 2), (4, 3))

        assert initial_board.occupant_at((5, 2)) is None
        assert initial_board.occupant_at((4, 3)) == Player.ONE
        assert (4, 3) in initial_board.pieces(Player.ONE)
        assert (5, 2) not in initial_board.pieces(Player.ONE)
        assert index_matches_grid(initial_board)

    def test_player_two_moves_down(self, initial_board):
        """Test that Player 2 moves toward increasing rows."""
        initial_board.apply_simple_move((2, 1), (3, 0))
        assert initial_board.occupant_at((3, 0)) == Player.TWO

    @pytest.mark.parametrize("start,end", [
        ((4, 3), (3, 4)),   # no piece
        ((6, 1), (5, 2)),   # destination occupied
        ((5, 2), (6, 3)),   # backwards
        ((5, 2), (3, 4)),   # two steps
        ((5, 2), (4, 2)),   # straight ahead
    ])
    def test_rejects_and_leaves_board_unchanged(self, initial_board, start, end):
        """Test that an invalid simple move raises and changes nothing."""
        before = initial_board.clone()
        with pytest.raises(IllegalMoveError):
            initial_board.apply_simple_move(start, end)
        assert initial_board == before
        assert index_matches_grid(initial_board)

    def test_out_of_bounds_target(self, empty_board):
        """Test that moving off the board raises OutOfBoundsError."""
        empty_board.place((0, 1), Player.ONE)
        with pytest.raises(OutOfBoundsError):
            empty_board.apply_simple_move((0, 1), (-1, 0))
        assert empty_board.occupant_at((0, 1)) == Player.ONE


class TestApplyJump:
    """Tests for apply_jump."""

    def test_captures(self, initial_board):
        """Jumping empties origin and captured cell and removes one piece."""
        initial_board.place((4, 3), Player.TWO)
        total_before = initial_board.count(Player.ONE) + initial_board.count(Player.TWO)

        initial_board.apply_jump((5, 2), (4, 3), (3, 4))

        assert initial_board.occupant_at((5, 2)) is None
        assert initial_board.occupant_at((4, 3)) is None
        assert initial_board.occupant_at((3, 4)) == Player.ONE
        assert initial_board.count(Player.ONE) + initial_board.count(Player.TWO) == total_before - 1
        assert index_matches_grid(initial_board)

    def test_cannot_capture_own_piece(self, empty_board):
        """Test that jumping over a friendly piece is rejected."""
        empty_board.place((5, 2), Player.ONE)
        empty_board.place((4, 3), Player.ONE)
        with pytest.raises(IllegalMoveError, match="own piece"):
            empty_board.apply_jump((5, 2), (4, 3), (3, 4))

    def test_landing_must_be_empty(self, empty_board):
        """Test that a jump onto an occupied cell is rejected."""
        empty_board.place((5, 2), Player.ONE)
        empty_board.place((4, 3), Player.TWO)
        empty_board.place((3, 4), Player.TWO)
        before = empty_board.clone()
        with pytest.raises(IllegalMoveError):
            empty_board.apply_jump((5, 2), (4, 3), (3, 4))
        assert empty_board == before

    def test_over_must_be_midpoint(self, empty_board):
        """Test that the captured cell must lie between start and landing."""
        empty_board.place((5, 2), Player.ONE)
        empty_board.place((4, 3), Player.TWO)
        with pytest.raises(IllegalMoveError):
            empty_board.apply_jump((5, 2), (4, 3), (3, 2))

    def test_no_backward_capture(self, empty_board):
        """Test that a man cannot capture backward."""
        empty_board.place((3, 4), Player.ONE)
        empty_board.place((4, 3), Player.TWO)
        with pytest.raises(IllegalMoveError):
            empty_board.apply_jump((3, 4), (4, 3), (5, 2))

    def test_landing_off_board(self, empty_board):
        """Test that a jump landing off the board raises OutOfBoundsError."""
        empty_board.place((1, 6), Player.ONE)
        empty_board.place((0, 7), Player.TWO)
        with pytest.raises(OutOfBoundsError):
            empty_board.apply_jump((1, 6), (0, 7), (-1, 8))


def test_str_marks_pieces(initial_board):
    """Test that the plain string form marks both players' pieces."""
    text = str(initial_board)
    assert text.count("o") == 12
    assert text.count("x") == 12
