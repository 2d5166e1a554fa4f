"""Turn sequencing and legality for Simple Checkers."""

from typing import FrozenSet, Optional

from .board import Board
from .config import RuleSettings, get_config
from .exceptions import IllegalMoveError
from .logger import get_logger
from .movegen import generate_all_moves, generate_jumps
from .types import Action, GameStatus, Jump, Outcome, Player, Position

logger = get_logger("rule_engine")


class RuleEngine:
    """
    Derives legal actions, applies them, and classifies terminal states.

    The engine carries the turn state across one ply: the player to move
    and, once a capture has been made with more captures available from
    the landing cell, the cell the chain must continue from. A player in
    the middle of a chain may not switch pieces.

    The board is passed to every call; the engine never keeps one.
    """

    def __init__(self, rules: Optional[RuleSettings] = None, start_player: Player = Player.ONE):
        if rules is None:
            rules = get_config().game.rules
        self.rules = rules
        self.start_player = Player(start_player)
        self.active_player = self.start_player
        self.must_continue_from: Optional[Position] = None
        self._draw_agreed = False

    def reset(self) -> None:
        """Return to the initial state: start player to move, no chain, no draw."""
        self.active_player = self.start_player
        self.must_continue_from = None
        self._draw_agreed = False

    @property
    def in_chain(self) -> bool:
        """Check if a jump chain is in progress."""
        return self.must_continue_from is not None

    def legal_actions(self, board: Board, player: Optional[Player] = None) -> FrozenSet[Action]:
        """
        Get the set of legal actions for a player (default: the active player).

        Mandatory capture applies across all of the player's pieces. While a
        chain is in progress the active player is restricted to captures by
        the chaining piece.
        """
        if player is None:
            player = self.active_player
        player = Player(player)

        chain_cell = self.must_continue_from if player == self.active_player else None
        return frozenset(generate_all_moves(
            board,
            player,
            must_continue_from=chain_cell,
            forced_capture=self.rules.forced_capture,
        ))

    def apply_action(self, board: Board, action: Action) -> Outcome:
        """
        Apply an action for the active player and advance the turn state.

        Raises:
            IllegalMoveError: If the action is not legal right now. Neither
                the board nor the engine state is modified.
        """
        player = self.active_player
        self._validate(board, action, player)

        if isinstance(action, Jump):
            board.apply_jump(action.start, action.over, action.end)
            captured = action.over
            further = generate_jumps(board, action.end) if self.rules.multi_jump else []
        else:
            board.apply_simple_move(action.start, action.end)
            captured = None
            further = []

        if further:
            self.must_continue_from = action.end
            logger.debug("Player %d %r, chain continues from %s", player, action, action.end)
        else:
            self.must_continue_from = None
            self.active_player = player.opponent()
            logger.debug("Player %d %r", player, action)

        return Outcome(
            action=action,
            player=player,
            captured=captured,
            chain_continues=bool(further),
            next_player=self.active_player,
        )

    def _validate(self, board: Board, action: Action, player: Player) -> None:
        """Raise IllegalMoveError with the most specific reason available."""
        owner = board.occupant_at(action.start)
        if owner is None:
            raise IllegalMoveError(action, f"no piece at {action.start}")
        if owner != player:
            raise IllegalMoveError(action, f"piece at {action.start} belongs to player {int(owner)}")

        if action in self.legal_actions(board, player):
            return

        if self.must_continue_from is not None and action.start != self.must_continue_from:
            raise IllegalMoveError(action, f"must continue capturing with the piece at {self.must_continue_from}")
        if self.must_continue_from is not None and not action.is_capture:
            raise IllegalMoveError(action, "a capture sequence can only continue with captures")
        if not action.is_capture and self.rules.forced_capture and any(
            a.is_capture for a in self.legal_actions(board, player)
        ):
            raise IllegalMoveError(action, "a capture is available and must be taken")
        raise IllegalMoveError(action, "not a legal move in this position")

    def agree_draw(self) -> None:
        """Record that both players agreed to a draw."""
        self._draw_agreed = True
        logger.info("Draw agreed")

    def terminal_state(self, board: Board, player: Optional[Player] = None) -> GameStatus:
        """
        Classify the position for the player to move.

        The opponent wins if the player has no pieces or no legal actions.
        A draw is only reported after agree_draw().
        """
        if self._draw_agreed:
            return GameStatus.draw()

        if player is None:
            player = self.active_player
        player = Player(player)

        if not board.has_pieces(player) or not self.legal_actions(board, player):
            return GameStatus.win(player.opponent())
        return GameStatus.ongoing()

    def __repr__(self) -> str:
        return f"RuleEngine(active={self.active_player.name}, chain={self.must_continue_from})"
