"""A small greeting application and its build information."""

from __future__ import annotations

import logging
import platform
import sys
from dataclasses import dataclass
from datetime import datetime
from typing import TextIO

VERSION = "dev"
GIT_COMMIT = "unknown"
BUILD_DATE = "unknown"

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class GreeterConfig:
    """Settings for a greeter run."""

    name: str = "World"
    verbose: bool = False


class Greeter:
    """Prints a greeting for the configured name."""

    def __init__(self, config: GreeterConfig | None = None, stream: TextIO | None = None):
        self.config = config if config is not None else GreeterConfig()
        self._stream = stream

    def run(self) -> None:
        """Print the greeting, logging progress when verbose."""
        if self.config.verbose:
            started = datetime.now().astimezone().isoformat(timespec="seconds")
            _log.info("Starting the application at %s", started)
            _log.info(
                "Application configurations: Name:%s, Verbose:%s",
                self.config.name,
                str(self.config.verbose).lower(),
            )

        print(self.greeting(), file=self._stream if self._stream is not None else sys.stdout)

        if self.config.verbose:
            _log.info("Application finished successfully!")

    def greeting(self) -> str:
        """Return the greeting text."""
        return f"Hello, {self.config.name}"


def version_info() -> str:
    """Describe the build and the running platform."""
    return (
        f"Version: {VERSION}\n"
        f"Git Commit: {GIT_COMMIT}\n"
        f"Build Date: {BUILD_DATE}\n"
        f"Python Version: {platform.python_version()}\n"
        f"OS/Arch: {sys.platform}/{platform.machine()}"
    )