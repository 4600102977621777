"""Difficulty levels and the number ranges they play over."""

from __future__ import annotations

from enum import Enum


class Difficulty(Enum):
    """How wide the range of possible numbers is."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    CUSTOM = "custom"

    def __str__(self) -> str:
        return self.value

    def bounds(self) -> tuple[int, int]:
        """The lowest and highest possible number."""
        return _BOUNDS[self]


_BOUNDS = {
    Difficulty.EASY: (1, 10),
    Difficulty.MEDIUM: (1, 50),
    Difficulty.HARD: (1, 100),
    Difficulty.CUSTOM: (1, 1000),
}

_ALIASES = {
    "easy": Difficulty.EASY,
    "e": Difficulty.EASY,
    "medium": Difficulty.MEDIUM,
    "m": Difficulty.MEDIUM,
    "hard": Difficulty.HARD,
    "h": Difficulty.HARD,
    "custom": Difficulty.CUSTOM,
    "c": Difficulty.CUSTOM,
}


def parse_difficulty(text: str) -> Difficulty:
    """Parse a difficulty name or its first letter; raises ValueError otherwise."""
    try:
        return _ALIASES[text.lower()]
    except KeyError:
        raise ValueError(f"unknown difficulty: {text}") from None