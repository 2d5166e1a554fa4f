"""Simple Checkers
Rule engine for English draughts on an 8x8 board, without crowning.

Modules:
    types.py        - Player, actions, outcomes, game status
    board.py        - Board state and single-action application
    movegen.py      - Forward diagonals, simple moves and jumps
    rule_engine.py  - Mandatory capture, jump chains, terminal states
    game.py         - Turn driver for humans and automated players
    notation.py     - "XY" coordinate input
    render.py       - Console board rendering
    config.py       - YAML settings
"""

from .board import Board
from .exceptions import (
    CheckersError,
    ConfigurationError,
    IllegalMoveError,
    NotationError,
    OutOfBoundsError,
)
from .rule_engine import RuleEngine
from .types import Action, Direction, GameStatus, Jump, Outcome, Player, Position, SimpleMove, Status

__version__ = "1.0.0"

__all__ = [
    'Board',
    'RuleEngine',
    'Player',
    'Position',
    'Direction',
    'Action',
    'SimpleMove',
    'Jump',
    'Outcome',
    'Status',
    'GameStatus',
    'CheckersError',
    'OutOfBoundsError',
    'IllegalMoveError',
    'NotationError',
    'ConfigurationError',
]
