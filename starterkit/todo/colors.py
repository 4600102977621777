"""Terminal colour helpers for the todo list output."""

from __future__ import annotations

import os
import sys
from typing import Any, Callable

from termcolor import colored

Painter = Callable[..., str]


def _color_enabled() -> bool:
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("FORCE_COLOR"):
        return True
    if os.environ.get("TERM") == "dumb":
        return False
    stream = sys.stdout
    return stream is not None and hasattr(stream, "isatty") and stream.isatty()


def _join(args: tuple[Any, ...]) -> str:
    """Concatenate like a plain print: spaces only between two non-string operands."""
    parts: list[str] = []
    previous_is_text = True
    for index, arg in enumerate(args):
        is_text = isinstance(arg, str)
        if index and not is_text and not previous_is_text:
            parts.append(" ")
        parts.append(str(arg))
        previous_is_text = is_text
    return "".join(parts)


def _paint(args: tuple[Any, ...], color: str | None = None, attr: str | None = None) -> str:
    text = _join(args)
    if not _color_enabled():
        return text
    return colored(text, color, attrs=[attr] if attr else None, force_color=True)


def red(*args: Any) -> str:
    """Text in red."""
    return _paint(args, color="red")


def green(*args: Any) -> str:
    """Text in green."""
    return _paint(args, color="green")


def yellow(*args: Any) -> str:
    """Text in yellow."""
    return _paint(args, color="yellow")


def blue(*args: Any) -> str:
    """Text in blue."""
    return _paint(args, color="blue")


def magenta(*args: Any) -> str:
    """Text in magenta."""
    return _paint(args, color="magenta")


def cyan(*args: Any) -> str:
    """Text in cyan."""
    return _paint(args, color="cyan")


def white(*args: Any) -> str:
    """Text in the standard white."""
    return _paint(args, color="light_grey")


def bold(*args: Any) -> str:
    """Bold text."""
    return _paint(args, attr="bold")


def underline(*args: Any) -> str:
    """Underlined text."""
    return _paint(args, attr="underline")


def dim(*args: Any) -> str:
    """Faint text."""
    return _paint(args, attr="dark")


def status_color(completed: bool) -> Painter:
    """Green for done tasks, yellow for pending ones."""
    return green if completed else yellow


def priority_color(priority: str) -> Painter:
    """The painter for a priority name such as ``High``."""
    return {"High": red, "Medium": yellow, "Low": green}.get(priority, white)