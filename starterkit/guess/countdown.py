"""A countdown that warns the player as the time limit approaches."""

from __future__ import annotations

import sys
import threading
import time
from typing import TextIO

from starterkit.guess.display import format_duration

_TICK_SECONDS = 10.0


class Countdown:
    """Prints reminders every tick during the last half minute of a time limit."""

    def __init__(
        self,
        duration: float,
        tick: float = _TICK_SECONDS,
        stream: TextIO | None = None,
    ):
        self.duration = float(duration)
        self.tick = tick
        self._stream = stream
        self._done = threading.Event()

    def start(self) -> None:
        """Run until the time is up or ``stop`` is called; blocks the calling thread."""
        deadline = time.monotonic() + self.duration
        out = self._stream if self._stream is not None else sys.stdout
        while not self._done.wait(self.tick):
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                return
            if 20 < remaining <= 30:
                print(f"{format_duration(remaining)} remaining!", file=out)
            elif remaining <= 10:
                print(f"Only {format_duration(remaining)} left!", file=out)

    def stop(self) -> None:
        """End the countdown; calling it again has no effect."""
        self._done.set()