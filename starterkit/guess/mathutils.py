"""Small integer helpers."""

from __future__ import annotations


def clamp(value: int, low: int, high: int) -> int:
    """``value`` limited to the range from ``low`` to ``high``."""
    if value < low:
        return low
    if value > high:
        return high
    return value


def in_range(value: int, low: int, high: int) -> bool:
    """Whether ``value`` lies between ``low`` and ``high`` inclusive."""
    return low <= value <= high


def percentage_difference(a: int, b: int) -> float:
    """The difference of two numbers as a percentage of their mean."""
    if a == 0 and b == 0:
        return 0.0
    average = (a + b) / 2.0
    if average == 0:
        return 100.0
    return abs(a - b) / average * 100.0