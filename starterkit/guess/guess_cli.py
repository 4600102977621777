"""Command line entry point for the number guessing game."""

from __future__ import annotations

import argparse
import sys

from starterkit.guess.display import QuitGame, show_config, show_stats, show_welcome
from starterkit.guess.game import Game
from starterkit.guess.guess_config import GameConfig
from starterkit.guess.records import load_scores, load_stats, reset_all

_TRUE_WORDS = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE_WORDS = {"0", "f", "F", "FALSE", "false", "False"}


def _parse_bool(text: str) -> bool:
    if text in _TRUE_WORDS:
        return True
    if text in _FALSE_WORDS:
        return False
    raise argparse.ArgumentTypeError(f"invalid boolean value: {text}")


def _run_config(args: argparse.Namespace) -> None:
    show_config(GameConfig.load())


def _run_play(args: argparse.Namespace) -> None:
    show_welcome()
    try:
        game = Game(args.difficulty, args.time, args.hints)
    except ValueError as exc:
        raise ValueError(f"failed to create game: {exc}") from exc
    game.play()


def _run_reset(args: argparse.Namespace) -> None:
    reset_all()
    print("Game data reset successfully!")


def _run_stats(args: argparse.Namespace) -> None:
    stats = load_stats()
    scores = load_scores()
    show_stats(stats, scores)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="guess-game",
        description="A CLI number guessing game with multiple difficulty levels",
    )
    commands = parser.add_subparsers(dest="command")

    config = commands.add_parser(
        "config",
        help="Configure game settings",
        description="View and modify game configuration settings",
    )
    config.set_defaults(handler=_run_config)

    play = commands.add_parser(
        "play",
        help="start a new guessing game",
        description="start a new guessing game with the specified difficulty levels",
    )
    play.add_argument(
        "-d",
        "--difficulty",
        default="medium",
        help="Game difficulty (easy, medium, hard, custom)",
    )
    play.add_argument(
        "-t",
        "--time",
        type=int,
        default=0,
        help="Time limit in seconds (0 for no limit)",
    )
    play.add_argument(
        "-i",
        "--hints",
        type=_parse_bool,
        nargs="?",
        const=True,
        default=True,
        help="Enable hints",
    )
    play.set_defaults(handler=_run_play)

    reset = commands.add_parser(
        "reset",
        help="Reset game data",
        description="Reset high scores and statistics",
    )
    reset.set_defaults(handler=_run_reset)

    stats = commands.add_parser(
        "stats",
        help="Show game statistics",
        description=(
            "Display your game statistics including wins, average guesses, and high scores"
        ),
    )
    stats.set_defaults(handler=_run_stats)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run a game command and return the exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    handler = getattr(args, "handler", None)
    if handler is None:
        parser.print_help()
        return 0
    try:
        handler(args)
    except QuitGame:
        return 0
    except (OSError, ValueError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())