"""One round of the number guessing game."""

from __future__ import annotations

import threading
import time
from datetime import timedelta
from pathlib import Path

from starterkit.guess import display
from starterkit.guess.countdown import Countdown
from starterkit.guess.difficulty import parse_difficulty
from starterkit.guess.randomness import int_range
from starterkit.guess.records import Score, Stats, load_stats, save_score, save_stats


class Game:
    """A secret number, the player's guesses, and an optional time limit."""

    def __init__(
        self,
        difficulty: str = "medium",
        time_limit: int = 0,
        hints: bool = True,
        records_dir: str | Path | None = None,
    ):
        self.difficulty = parse_difficulty(difficulty)
        self.low, self.high = self.difficulty.bounds()
        self.target = int_range(self.low, self.high)
        self.time_limit = time_limit if time_limit > 0 else 0
        self.hints = hints
        self.records_dir = records_dir
        self.guesses = 0
        self.won = False
        self._started = time.monotonic()

    def play(self) -> bool:
        """Play until the number is found, the time runs out or input ends.

        Returns whether the player won. QuitGame from the input propagates.
        """
        countdown = None
        deadline = None
        if self.time_limit:
            deadline = time.monotonic() + self.time_limit
            countdown = Countdown(self.time_limit)
            threading.Thread(target=countdown.start, daemon=True).start()

        try:
            display.show_game_start(self.low, self.high, str(self.difficulty), self.time_limit)
            while True:
                if deadline is not None and time.monotonic() >= deadline:
                    display.show_timeout()
                    display.show_answer(self.target)
                    self._end_game()
                    return self.won

                try:
                    guess = display.get_guess(self.low, self.high)
                except EOFError as exc:
                    display.show_error(exc)
                    return self.won

                self.guesses += 1
                if guess == self.target:
                    self.won = True
                    display.show_win(self.guesses, time.monotonic() - self._started)
                    self._end_game()
                    return self.won

                if self.hints:
                    display.show_hint(self.hint_for(guess))
                else:
                    display.show_hint("Too low!" if guess < self.target else "Too high!")
        finally:
            if countdown is not None:
                countdown.stop()

    def hint_for(self, guess: int) -> str:
        """How close ``guess`` is to the secret number, and in which direction."""
        distance = abs(self.target - guess)
        direction = "higher" if guess < self.target else "lower"
        if distance <= 2:
            return f"Very close! Go {direction}."
        if distance <= 5:
            return f"Close! Go {direction}."
        if distance <= 10:
            return f"Go {direction}!"
        return f"Much {direction}"

    def _end_game(self) -> None:
        elapsed = timedelta(seconds=time.monotonic() - self._started)
        try:
            stats = load_stats(self.records_dir)
        except (OSError, ValueError, TypeError):
            stats = Stats()

        stats.games_played += 1
        if self.won:
            stats.games_won += 1
            stats.total_guesses += self.guesses
            save_score(
                Score(difficulty=str(self.difficulty), guesses=self.guesses, time=elapsed),
                self.records_dir,
            )
        save_stats(stats, self.records_dir)