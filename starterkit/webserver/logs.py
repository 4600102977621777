"""Structured key=value or JSON logging for the web server."""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime
from typing import Any, TextIO

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}
_LEVEL_NAMES = {
    logging.DEBUG: "DEBUG",
    logging.INFO: "INFO",
    logging.WARNING: "WARN",
    logging.ERROR: "ERROR",
}


def _text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "<nil>"
    return str(value)


def _quote(text: str) -> str:
    if text == "" or any(ch.isspace() or ch in '="' or not ch.isprintable() for ch in text):
        return json.dumps(text, ensure_ascii=False)
    return text


def _json_value(value: Any) -> str:
    if isinstance(value, BaseException):
        value = str(value)
    return json.dumps(value, ensure_ascii=False, default=str)


class ServerLogger:
    """Writes one line per record with the time, level, message and fields."""

    def __init__(
        self,
        level: int = logging.INFO,
        json_output: bool = False,
        stream: TextIO | None = None,
        fields: tuple[tuple[str, Any], ...] = (),
    ):
        self.level = level
        self.json_output = json_output
        self._stream = stream
        self.fields = tuple(fields)

    def _emit(self, level: int, message: str, attrs: dict[str, Any]) -> None:
        if level < self.level:
            return
        now = datetime.now().astimezone()
        items = [*self.fields, *attrs.items()]
        name = _LEVEL_NAMES[level]
        if self.json_output:
            pairs = [("time", now.isoformat()), ("level", name), ("msg", message), *items]
            line = "{" + ",".join(
                f"{json.dumps(str(key), ensure_ascii=False)}:{_json_value(value)}"
                for key, value in pairs
            ) + "}"
        else:
            parts = [
                f"time={now.isoformat(timespec='milliseconds')}",
                f"level={name}",
                f"msg={_quote(message)}",
            ]
            parts.extend(f"{_quote(str(key))}={_quote(_text(value))}" for key, value in items)
            line = " ".join(parts)
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(line + "\n")
        stream.flush()

    def debug(self, message: str, **kwargs: Any) -> None:
        """Log at debug level."""
        self._emit(logging.DEBUG, message, kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        """Log at info level."""
        self._emit(logging.INFO, message, kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        """Log at warning level."""
        self._emit(logging.WARNING, message, kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        """Log at error level."""
        self._emit(logging.ERROR, message, kwargs)

    def with_fields(self, **kwargs: Any) -> ServerLogger:
        """A logger that adds these fields to every record."""
        return ServerLogger(
            self.level,
            self.json_output,
            self._stream,
            self.fields + tuple(kwargs.items()),
        )

    def with_request(self, method: str, uri: str, user_agent: str) -> ServerLogger:
        """A logger that names the request in every record."""
        return self.with_fields(method=method, uri=uri, user_agent=user_agent)

    def with_error(self, error: BaseException | str) -> ServerLogger:
        """A logger that carries the error text in every record."""
        return self.with_fields(error=str(error))


def create_logger(
    level: str = "info", environment: str = "development", stream: TextIO | None = None
) -> ServerLogger:
    """A logger for the level name; JSON lines in production, key=value otherwise."""
    return ServerLogger(
        level=_LEVELS.get(level.lower(), logging.INFO),
        json_output=environment == "production",
        stream=stream,
    )