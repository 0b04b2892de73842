"""
Command line front end for twentyone.

`play` runs an interactive game against the dealer; `audit` reports how far
each shuffle method is from uniform.
"""

import argparse
import logging
import random
from typing import Callable, List, Optional

from twentyone.analysis.shuffle_audit import audit_shuffle
from twentyone.common.deck import ShuffleMethod
from twentyone.engine.blackjack import BlackjackEngine

logger = logging.getLogger(__name__)

COMMANDS = {
    "h": "hit",
    "hit": "hit",
    "s": "stand",
    "stand": "stand",
    "r": "reset",
    "reset": "reset",
}
QUIT_COMMANDS = {"q", "quit", "exit"}


def format_view(view: dict) -> str:
    """Render an adapter view of the game as text."""
    dealer_cards = ", ".join(card or "??" for card in view["dealer"]["cards"])
    dealer_score = view["dealer"]["score"]
    lines = [
        f"Status: {view['status']}",
        f"There are {view['deck_cards_remaining']} cards left in deck",
        f"Player: {', '.join(view['player']['cards'])} (score {view['player']['score']})",
        "Dealer: "
        + dealer_cards
        + ("" if dealer_score is None else f" (score {dealer_score})"),
    ]
    return "\n".join(lines)


def play(
    engine: BlackjackEngine,
    input_fn: Callable[[str], str] = input,
    output_fn: Callable[[str], None] = print,
) -> BlackjackEngine:
    """
    Run an interactive game loop until the user quits or input runs out.

    Args:
        engine: Engine to drive
        input_fn: Reads a line of user input given a prompt
        output_fn: Writes a block of text

    Returns:
        The engine, for inspecting session tallies
    """
    engine.start_game()
    output_fn(format_view(engine.render_state()))

    while True:
        if engine.is_finished:
            prompt = "[r]eset or [q]uit> "
        else:
            prompt = "[h]it, [s]tand, [r]eset or [q]uit> "
        try:
            command = input_fn(prompt).strip().lower()
        except EOFError:
            break

        if command in QUIT_COMMANDS:
            break
        if command not in COMMANDS:
            output_fn(f"Unknown command: {command}")
            continue
        if engine.is_finished and COMMANDS[command] != "reset":
            output_fn("The game is over. Reset to play again.")
            continue

        engine.execute_player_action(COMMANDS[command])
        output_fn(format_view(engine.render_state()))

    output_fn(
        f"Played {engine.games_played} games: "
        + ", ".join(
            f"{name} {count}"
            for name, count in engine.render_state()["results"].items()
        )
    )
    return engine


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="twentyone", description="Play blackjack against the dealer."
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="seed for the shuffle (default: random)"
    )
    parser.add_argument(
        "--shuffle",
        choices=[method.value for method in ShuffleMethod],
        default=ShuffleMethod.UNIFORM.value,
        help="shuffle algorithm (default: uniform)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level (default: WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command")
    subparsers.add_parser("play", help="play an interactive game (default)")
    audit_parser = subparsers.add_parser(
        "audit", help="measure shuffle uniformity"
    )
    audit_parser.add_argument(
        "-t",
        "--trials",
        type=int,
        default=2000,
        help="number of shuffles per method (default: 2000)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.command == "audit":
        rng = random.Random(args.seed)
        for method in ShuffleMethod:
            audit = audit_shuffle(method, trials=args.trials, rng=rng)
            verdict = "uniform" if audit.is_uniform() else "biased"
            print(
                f"{method.value:>10}: chi2={audit.chi_square:.1f} "
                f"p={audit.p_value:.4f} max deviation={audit.max_deviation:.1%} ({verdict})"
            )
        return 0

    engine = BlackjackEngine({"seed": args.seed, "shuffle_method": args.shuffle})
    play(engine)
    return 0
