"""Settings of the web server, read from the environment and a .env file."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path

from dotenv import load_dotenv

_UNIT_NANOSECONDS = {
    "ns": 1.0,
    "us": 1e3,
    "µs": 1e3,
    "μs": 1e3,
    "ms": 1e6,
    "s": 1e9,
    "m": 60e9,
    "h": 3600e9,
}
_DURATION_PART = re.compile(r"([0-9]*(?:\.[0-9]*)?)(ns|us|µs|μs|ms|s|m|h)")
_INTEGER = re.compile(r"[+-]?[0-9]+")
_TRUE_WORDS = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE_WORDS = {"0", "f", "F", "FALSE", "false", "False"}


def parse_duration(text: str) -> timedelta:
    """Parse a duration such as ``15s``, ``1h30m`` or ``-1.5h``; raises ValueError."""
    error = ValueError(f'time: invalid duration "{text}"')
    rest = text
    sign = 1
    if rest and rest[0] in "+-":
        sign = -1 if rest[0] == "-" else 1
        rest = rest[1:]
    if rest == "0":
        return timedelta(0)
    if not rest:
        raise error
    total = 0.0
    position = 0
    while position < len(rest):
        match = _DURATION_PART.match(rest, position)
        if match is None or match.group(1) in ("", "."):
            raise error
        total += float(match.group(1)) * _UNIT_NANOSECONDS[match.group(2)]
        position = match.end()
    return timedelta(microseconds=sign * total / 1000)


def _env(key: str, default: str) -> str:
    return os.environ.get(key) or default


def _duration_env(key: str, default: timedelta) -> timedelta:
    value = os.environ.get(key)
    if value:
        try:
            return parse_duration(value)
        except ValueError:
            pass
    return default


def _bool_env(key: str, default: bool) -> bool:
    value = os.environ.get(key)
    if value in _TRUE_WORDS:
        return True
    if value in _FALSE_WORDS:
        return False
    return default


def _int_env(key: str, default: int) -> int:
    value = os.environ.get(key)
    if value and _INTEGER.fullmatch(value):
        return int(value)
    return default


@dataclass
class ServerConfig:
    """Where and how the server listens, logs and finds its files."""

    port: str = "8080"
    environment: str = "development"
    log_level: str = "info"
    read_timeout: timedelta = timedelta(seconds=15)
    write_timeout: timedelta = timedelta(seconds=15)
    idle_timeout: timedelta = timedelta(seconds=60)
    shutdown_timeout: timedelta = timedelta(seconds=30)
    enable_cors: bool = True
    enable_rate_limit: bool = False
    rate_limit_rps: int = 100
    static_dir: str = "./web/static"
    template_dir: str = "./web/templates"

    @classmethod
    def load(cls) -> ServerConfig:
        """Read the settings; values already in the environment win over .env."""
        dotenv = Path.cwd() / ".env"
        if dotenv.is_file():
            load_dotenv(dotenv)

        config = cls(
            port=_env("PORT", "8080"),
            environment=_env("ENVIRONMENT", "development"),
            log_level=_env("LOG_LEVEL", "info"),
            read_timeout=_duration_env("READ_TIMEOUT", timedelta(seconds=15)),
            write_timeout=_duration_env("WRITE_TIMEOUT", timedelta(seconds=15)),
            idle_timeout=_duration_env("IDLE_TIMEOUT", timedelta(seconds=60)),
            shutdown_timeout=_duration_env("SHUTDOWN_TIMEOUT", timedelta(seconds=30)),
            enable_cors=_bool_env("ENABLE_CORS", True),
            enable_rate_limit=_bool_env("ENABLE_RATE_LIMIT", False),
            rate_limit_rps=_int_env("RATE_LIMIT_RPS", 100),
            static_dir=_env("STATIC_DIR", "./web/static"),
            template_dir=_env("TEMPLATE_DIR", "./web/templates"),
        )
        try:
            config.validate()
        except ValueError as exc:
            raise ValueError(f"configuration validation failed: {exc}") from exc
        return config

    def validate(self) -> None:
        """Raise ValueError when a setting is unusable."""
        if not self.port:
            raise ValueError("port cannot be empty")
        if not self.environment:
            raise ValueError("environment cannot be empty")
        if self.read_timeout <= timedelta(0):
            raise ValueError("read timeout must be positive")
        if self.write_timeout <= timedelta(0):
            raise ValueError("write timeout must be positive")

    def is_production(self) -> bool:
        """Whether the server runs in the production environment."""
        return self.environment == "production"