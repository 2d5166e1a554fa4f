"""Console entry point for Simple Checkers."""

import argparse
import sys
from typing import Callable, List, Optional

from .config import Config, get_config, set_config
from .exceptions import CheckersError
from .game import Game, PlayerType
from .logger import setup_logger
from .notation import BACK, action_for, format_action, format_position, parse_direction, parse_position
from .render import render_board
from .types import Direction


def _ask_action(game: Game, input_fn: Callable[[str], str], output_fn: Callable[[str], None]):
    """
    Prompt a human for one action.

    Returns the chosen action, None to re-prompt, or "quit"/"draw".
    """
    actions = game.legal_actions()
    if game.engine.in_chain:
        output_fn(f"Keep capturing with the piece at {format_position(game.engine.must_continue_from)}.")

    text = input_fn("Select a piece with two numbers (XY), 'd' to agree a draw, or 'q' to quit: ").strip().lower()
    if text == "q":
        return "quit"
    if text == "d":
        return "draw"

    try:
        start = parse_position(text)
    except CheckersError as e:
        output_fn(str(e))
        return None

    if game.board.occupant_at(start) != game.current_player:
        output_fn("Illegal selection!")
        return None

    options = {}
    for direction, label in ((Direction.LEFT, "L: Diagonal Left"), (Direction.RIGHT, "R: Diagonal Right")):
        action = action_for(actions, start, direction)
        if action is not None:
            options[direction] = action
            output_fn(label)
    if not options:
        output_fn("That piece has no legal move.")
        return None
    output_fn("B: Back")

    try:
        choice = parse_direction(input_fn("What direction are you moving? "))
    except CheckersError as e:
        output_fn(str(e))
        return None
    if choice == BACK:
        return None
    if choice not in options:
        output_fn("Sorry, that was an illegal move.")
        return None
    return options[choice]


def play_console(
    game: Game,
    input_fn: Callable[[str], str] = input,
    output_fn: Callable[[str], None] = print,
) -> None:
    """Run an interactive game until it ends or a human quits."""
    ui = game.config.ui
    while True:
        output_fn("")
        output_fn(render_board(game.board, ui))

        status = game.status()
        if status.is_terminal:
            output_fn(f"Game over! {status}")
            return

        player = game.current_player
        if game.get_player_type(player) != PlayerType.HUMAN:
            outcome = game.step_ai()
            output_fn(f"Player {int(player)} plays {format_action(outcome.action)}")
            continue

        try:
            action = _ask_action(game, input_fn, output_fn)
        except EOFError:
            return
        if action == "quit":
            return
        if action == "draw":
            game.offer_draw()
            continue
        if action is None:
            continue

        try:
            game.play(action)
        except CheckersError as e:
            output_fn(str(e))


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(prog="simplecheckers", description="English draughts without crowning.")
    parser.add_argument("--config", help="Path to a settings.yaml file")
    parser.add_argument("--seed", type=int, help="Seed for the automated player")
    parser.add_argument("--log-level", help="Override the configured log level")
    parser.add_argument("--demo", action="store_true", help="Let the automated player play both sides")
    parser.add_argument("--max-plies", type=int, default=500, help="Ply limit for --demo")
    args = parser.parse_args(argv)

    try:
        config = Config.load(args.config).validate() if args.config else get_config()
    except CheckersError as e:
        print(e, file=sys.stderr)
        return 2
    if args.seed is not None:
        config.players.seed = args.seed
    set_config(config)

    setup_logger(
        level=args.log_level or config.logging.level,
        log_file=config.logging.log_file,
    )

    game = Game(config)
    if args.demo:
        game.set_player_type(game.current_player, PlayerType.RANDOM)
        game.set_player_type(game.current_player.opponent(), PlayerType.RANDOM)
        result = game.run_ai_vs_ai(args.max_plies)
        print(render_board(result.final_board, config.ui))
        print(f"{result.status} after {result.total_plies} plies")
        return 0

    play_console(game)
    return 0


if __name__ == "__main__":
    sys.exit(main())
