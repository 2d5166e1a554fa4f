"""Move generation for Simple Checkers."""

from typing import List, Optional, Tuple

from .board import Board
from .rules import FORWARD_DIRECTIONS_P1, FORWARD_DIRECTIONS_P2
from .types import Action, Jump, Player, Position, SimpleMove


def get_forward_directions(player: Player) -> List[Tuple[int, int]]:
    """Get the forward diagonal directions for a player."""
    return FORWARD_DIRECTIONS_P1 if player == Player.ONE else FORWARD_DIRECTIONS_P2


def forward_diagonals(pos: Position, player: Player) -> List[Position]:
    """
    The in-bounds forward-diagonal cells of a position for a player.

    Left comes before right. A piece on its far row, or against an edge,
    gets fewer than two cells; there is no wraparound.
    """
    row, col = pos
    cells = []
    for dr, dc in get_forward_directions(player):
        target = (row + dr, col + dc)
        if Board.in_bounds(target):
            cells.append(target)
    return cells


def generate_simple_moves(board: Board, pos: Position) -> List[SimpleMove]:
    """Generate non-capture moves for the piece at a position."""
    player = board.occupant_at(pos)
    if player is None:
        return []
    return [
        SimpleMove(pos, target)
        for target in forward_diagonals(pos, player)
        if board.is_empty(target)
    ]


def generate_jumps(board: Board, pos: Position) -> List[Jump]:
    """Generate single captures for the piece at a position."""
    player = board.occupant_at(pos)
    if player is None:
        return []

    row, col = pos
    jumps = []
    for dr, dc in get_forward_directions(player):
        over = (row + dr, col + dc)
        land = (row + 2 * dr, col + 2 * dc)

        if not Board.in_bounds(land):
            continue
        if board.occupant_at(over) != player.opponent():
            continue
        if not board.is_empty(land):
            continue

        jumps.append(Jump(pos, over, land))
    return jumps


def generate_all_jumps(board: Board, player: Player) -> List[Jump]:
    """Generate every capture available to a player anywhere on the board."""
    jumps = []
    for pos in board.pieces(player):
        jumps.extend(generate_jumps(board, pos))
    return jumps


def generate_all_moves(
    board: Board,
    player: Player,
    must_continue_from: Optional[Position] = None,
    forced_capture: bool = True,
) -> List[Action]:
    """
    Generate all legal actions for a player.

    Captures are collected across all of the player's pieces before any
    simple move is considered. If any capture exists and forced_capture is
    enabled, only captures are returned.

    When must_continue_from is given the player is in the middle of a jump
    chain: only captures by that piece are legal, and the result may be
    empty, which ends the chain.
    """
    if must_continue_from is not None:
        if board.occupant_at(must_continue_from) != player:
            return []
        return list(generate_jumps(board, must_continue_from))

    capture_moves = generate_all_jumps(board, player)
    if forced_capture and capture_moves:
        return capture_moves

    simple_moves = []
    for pos in board.pieces(player):
        simple_moves.extend(generate_simple_moves(board, pos))

    return simple_moves + capture_moves
