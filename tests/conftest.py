"""
Pytest configuration and fixtures.
"""

import logging
import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the settings directory at a temp dir and drop cached config."""
    from simplecheckers.config import set_config

    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.setenv("APPDATA", str(tmp_path / "appdata"))
    set_config(None)
    yield tmp_path
    set_config(None)

    package_logger = logging.getLogger("simplecheckers")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def rules():
    """Default rule settings."""
    from simplecheckers.config import RuleSettings
    return RuleSettings()


@pytest.fixture
def engine(rules):
    """A rule engine with default rules, Player 1 to move."""
    from simplecheckers.rule_engine import RuleEngine
    return RuleEngine(rules)


@pytest.fixture
def initial_board():
    """Create an initial board."""
    from simplecheckers.board import Board
    return Board.initial()


@pytest.fixture
def empty_board():
    """Create an empty board."""
    from simplecheckers.board import Board
    return Board()


@pytest.fixture
def chain_board():
    """
    Player 1 can capture twice in a row with the piece on (6, 1):
    over (5, 2) to (4, 3), then over (3, 4) to (2, 5). The piece on (7, 6)
    also has a capture available, over (6, 5) to (5, 4).
    """
    from simplecheckers.board import Board
    from simplecheckers.types import Player

    board = Board()
    board.place((6, 1), Player.ONE)
    board.place((7, 6), Player.ONE)
    board.place((5, 2), Player.TWO)
    board.place((3, 4), Player.TWO)
    board.place((6, 5), Player.TWO)
    return board
