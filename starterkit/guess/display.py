"""What the guessing game prints, and how it reads a guess."""

from __future__ import annotations

import re
import sys
from datetime import timedelta
from typing import Sequence

from starterkit.guess.guess_config import GameConfig
from starterkit.guess.records import Score, Stats

_INTEGER = re.compile(r"[+-]?[0-9]+")
_QUIT_WORDS = {"quit", "exit", "q"}
_RECENT_SCORES = 5

_WELCOME_TITLE = "Welcome to the Number Guessing Game!"
_TIMEOUT_MESSAGE = "Time's up! Better luck next time!"


class QuitGame(Exception):
    """The player asked to leave the game."""


def format_duration(value: float | timedelta) -> str:
    """A duration rounded to whole seconds, written like ``1m30s``."""
    seconds = value.total_seconds() if isinstance(value, timedelta) else float(value)
    negative = seconds < 0
    total = int(abs(seconds) + 0.5)
    hours, rest = divmod(total, 3600)
    minutes, secs = divmod(rest, 60)
    if hours:
        text = f"{hours}h{minutes}m{secs}s"
    elif minutes:
        text = f"{minutes}m{secs}s"
    else:
        text = f"{secs}s"
    return "-" + text if negative and total else text


def _print_block(*lines: str) -> None:
    """Write the lines, each on its own line, followed by a blank line."""
    sys.stdout.write("".join(f"{line}\n" for line in lines) + "\n")


def show_welcome() -> None:
    """Print the greeting banner."""
    _print_block(_WELCOME_TITLE, "=" * len(_WELCOME_TITLE))


def show_game_start(low: int, high: int, difficulty: str, time_limit: float) -> None:
    """Announce a new game and its range and time limit."""
    print(f"Starting {difficulty} game (Range: {low}-{high})")
    if time_limit > 0:
        print(f"Time limit: {format_duration(time_limit)}")
    print(f"I'm thinking of a number between {low} and {high}")
    print("Let's see how many guesses it takes you!")
    print()


def show_hint(hint: str) -> None:
    """Print a hint."""
    _print_block(hint)


def show_win(guesses: int, duration: float | timedelta) -> None:
    """Congratulate the player, with praise that depends on the number of guesses."""
    print(f"Congratulations! You guessed it in {guesses} attempts!")
    print(f"Time taken {format_duration(duration)}")
    if guesses == 1:
        print("Incredible! You got it on the first try!")
    elif guesses <= 3:
        print("Excellent guessing!")
    elif guesses <= 5:
        print("Good job!")
    elif guesses <= 10:
        print("Not bad!")
    else:
        print("Better luck next time!")
    print()


def show_timeout() -> None:
    """Announce that the time limit ran out."""
    _print_block(_TIMEOUT_MESSAGE)


def show_answer(answer: int) -> None:
    """Reveal the number."""
    _print_block(f"The number was: {answer}")


def show_error(error: BaseException | str) -> None:
    """Print an error."""
    _print_block(f"Error: {error}")


def show_stats(stats: Stats, scores: Sequence[Score]) -> None:
    """Print the totals and the most recent scores."""
    print("Game Statistics")
    print("================")
    print(f"Games Played: {stats.games_played}")
    print(f"Games Won: {stats.games_won}")
    if stats.games_played > 0:
        print(f"Win Rate: {stats.games_won / stats.games_played * 100:.1f}%")
    if stats.games_won > 0:
        print(f"Average Guesses: {stats.total_guesses / stats.games_won:.1f}")
    print(f"Current Streak: {stats.current_streak}")
    print(f"Best Streak: {stats.best_streak}")
    print()

    if scores:
        print("Recent High Scores")
        print("==================")
        for score in scores[:_RECENT_SCORES]:
            print(
                f"{score.difficulty}: {score.guesses} guesses in "
                f"{format_duration(score.time)} ({score.date.strftime('%Y-%m-%d')})"
            )
        print()


def show_config(config: GameConfig) -> None:
    """Print the game settings."""
    print("Configuration")
    print("=============")
    print(f"Default Difficulty: {config.default_difficulty}")
    print(f"Colors Enabled: {str(config.enable_colors).lower()}")
    print(f"Sound Enabled: {str(config.enable_sound).lower()}")
    print(f"Default Time Limit: {config.default_time_limit} seconds")


def get_guess(low: int, high: int) -> int:
    """Ask until the player enters a number in range.

    Raises QuitGame when the player types quit, exit or q, and EOFError
    when input ends.
    """
    while True:
        sys.stdout.write(f"Enter your guess ({low}-{high}): ")
        sys.stdout.flush()
        line = sys.stdin.readline()
        if not line:
            raise EOFError("end of input")

        text = line.strip()
        if text.lower() in _QUIT_WORDS:
            print("Thanks for playing!")
            raise QuitGame()

        if not _INTEGER.fullmatch(text):
            print("Please enter a valid guess number")
            continue
        guess = int(text)
        if guess < low or guess > high:
            print(f"Please enter a number between {low} and {high}.")
            continue
        return guess