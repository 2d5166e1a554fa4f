"""Type definitions for Simple Checkers."""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional, Tuple, Union

from .rules import PLAYER_ONE_FORWARD, PLAYER_TWO_FORWARD


class Player(IntEnum):
    """Player identifiers."""
    ONE = 1  # Starts on rows 5-7, moves upward (decreasing row)
    TWO = 2  # Starts on rows 0-2, moves downward (increasing row)

    def opponent(self) -> "Player":
        """Return the opposing player."""
        return Player.TWO if self == Player.ONE else Player.ONE

    @property
    def forward(self) -> int:
        """Row delta of a single forward step."""
        return PLAYER_ONE_FORWARD if self == Player.ONE else PLAYER_TWO_FORWARD


# Type alias for board positions
Position = Tuple[int, int]


class Direction(Enum):
    """Forward-diagonal direction, seen from the top of the board."""
    LEFT = -1
    RIGHT = 1


@dataclass(frozen=True)
class SimpleMove:
    """A one-step diagonal move onto an empty cell."""
    start: Position
    end: Position

    @property
    def is_capture(self) -> bool:
        return False

    def __repr__(self) -> str:
        return f"SimpleMove({self.start}->{self.end})"


@dataclass(frozen=True)
class Jump:
    """A capture: jump from start over an enemy piece onto end."""
    start: Position
    over: Position
    end: Position

    @property
    def is_capture(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"Jump({self.start}x{self.over}->{self.end})"


Action = Union[SimpleMove, Jump]


@dataclass(frozen=True)
class Outcome:
    """
    Result of applying one action.

    Attributes:
        action: The action that was applied.
        player: The player who made it.
        captured: Position of the captured piece, if any.
        chain_continues: True if the same piece must keep jumping.
        next_player: The player to move after this action.
    """
    action: Action
    player: Player
    captured: Optional[Position]
    chain_continues: bool
    next_player: Player


class Status(Enum):
    """Terminal classification of a position."""
    ONGOING = "ongoing"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class GameStatus:
    """Game status: ongoing, won by a player, or drawn by agreement."""
    status: Status
    winner: Optional[Player] = None

    @classmethod
    def ongoing(cls) -> "GameStatus":
        return cls(Status.ONGOING)

    @classmethod
    def win(cls, player: Player) -> "GameStatus":
        return cls(Status.WIN, player)

    @classmethod
    def draw(cls) -> "GameStatus":
        return cls(Status.DRAW)

    @property
    def is_terminal(self) -> bool:
        """Check if the game has ended."""
        return self.status != Status.ONGOING

    def __str__(self) -> str:
        if self.status == Status.WIN:
            return f"Player {int(self.winner)} wins"
        if self.status == Status.DRAW:
            return "Draw by agreement"
        return "Ongoing"
