"""Cryptographically strong random numbers."""

from __future__ import annotations

import secrets


def int_range(low: int, high: int) -> int:
    """A random integer from ``low`` to ``high`` inclusive; raises ValueError if low > high."""
    if low > high:
        raise ValueError(f"min ({low}) cannot be greater than max ({high})")
    if low == high:
        return low
    return low + secrets.randbelow(high - low + 1)