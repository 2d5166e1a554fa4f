"""Game driver - orchestrates turns between humans and automated players."""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, FrozenSet, List, Optional

from .ai.random_agent import RandomAgent
from .board import Board
from .config import Config, get_config
from .logger import get_logger
from .rule_engine import RuleEngine
from .types import Action, GameStatus, Outcome, Player

logger = get_logger("game")


class PlayerType(Enum):
    """Type of player."""
    HUMAN = "human"
    RANDOM = "random"


@dataclass
class GameResult:
    """Result of a completed game."""
    status: GameStatus
    total_plies: int
    final_board: Board

    @property
    def winner(self) -> Optional[Player]:
        return self.status.winner


class Game:
    """
    Owns one board and one rule engine for a single game.

    Humans submit actions through play(); automated players are advanced
    with step_ai(). A ply that is a jump chain is several actions by the
    same player, so the ply counter only moves when the turn passes.
    """

    def __init__(self, config: Optional[Config] = None):
        if config is None:
            config = get_config()
        self.config = config

        self.board: Board = Board.initial()
        self.engine = RuleEngine(config.game.rules)
        self.agent = RandomAgent(config.players.seed)
        self.outcomes: List[Outcome] = []
        self.plies = 0

        self.player_types: Dict[Player, PlayerType] = {
            Player.ONE: PlayerType(config.players.p1_type),
            Player.TWO: PlayerType(config.players.p2_type),
        }

        # Callbacks
        self.on_state_changed: Optional[Callable[["Game"], None]] = None
        self.on_game_over: Optional[Callable[[GameResult], None]] = None

    def new_game(self) -> None:
        """Start a new game on a fresh board."""
        self.board = Board.initial()
        self.engine.reset()
        self.outcomes = []
        self.plies = 0
        self._notify_state_changed()

    @property
    def current_player(self) -> Player:
        return self.engine.active_player

    def set_player_type(self, player: Player, player_type: PlayerType) -> None:
        """Set the type of a player."""
        self.player_types[player] = PlayerType(player_type)

    def get_player_type(self, player: Player) -> PlayerType:
        """Get the type of a player."""
        return self.player_types[player]

    def get_current_player_type(self) -> PlayerType:
        """Get the type of the current player."""
        return self.player_types[self.current_player]

    def legal_actions(self) -> FrozenSet[Action]:
        """Get legal actions for the current player."""
        return self.engine.legal_actions(self.board, self.current_player)

    def status(self) -> GameStatus:
        """Classify the current position for the player to move."""
        return self.engine.terminal_state(self.board, self.current_player)

    def is_over(self) -> bool:
        return self.status().is_terminal

    def play(self, action: Action) -> Outcome:
        """
        Apply an action for the current player.

        Raises:
            RuntimeError: If the game is already over.
            IllegalMoveError: If the action is not legal. Nothing changes.
        """
        if self.is_over():
            raise RuntimeError("The game is over")

        outcome = self.engine.apply_action(self.board, action)
        self.outcomes.append(outcome)
        if not outcome.chain_continues:
            self.plies += 1

        self._notify_state_changed()
        self._check_game_over()
        return outcome

    def step_ai(self) -> Outcome:
        """Let the automated agent act for the current player."""
        action = self.agent.choose(self.legal_actions())
        return self.play(action)

    def offer_draw(self) -> None:
        """End the game as a draw by agreement."""
        self.engine.agree_draw()
        self._check_game_over()

    def result(self) -> GameResult:
        return GameResult(
            status=self.status(),
            total_plies=self.plies,
            final_board=self.board,
        )

    def run_ai_vs_ai(self, max_plies: int = 500) -> GameResult:
        """Play automated actions for both sides until the game ends."""
        while not self.is_over() and self.plies < max_plies:
            self.step_ai()
        if not self.is_over():
            logger.warning("Stopped after %d plies without a result", self.plies)
        return self.result()

    def _check_game_over(self) -> None:
        status = self.status()
        if not status.is_terminal:
            return
        logger.info("Game over after %d plies: %s", self.plies, status)
        if self.on_game_over:
            self.on_game_over(self.result())

    def _notify_state_changed(self) -> None:
        """Notify listeners of state change."""
        if self.on_state_changed:
            self.on_state_changed(self)
