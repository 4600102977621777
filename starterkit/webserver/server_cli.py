"""Command line entry point for the web server."""

from __future__ import annotations

import argparse
import platform
import signal
import sys
import threading

from starterkit.webserver.app import Server
from starterkit.webserver.logs import create_logger
from starterkit.webserver.server_config import ServerConfig

_SHUTDOWN_SECONDS = 30.0


def version_text() -> str:
    """The version, the runtime it runs on, and the platform."""
    return (
        "http server v1.0.0\n"
        f"built with Python {platform.python_version()}\n"
        f"OS/Arch: {sys.platform}/{platform.machine()}"
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="http-server",
        description=(
            "A simple HTTP server that demonstrates web development concepts "
            "including routing, middleware, template rendering, and API endpoints"
        ),
    )
    commands = parser.add_subparsers(dest="command")
    server = commands.add_parser("server", help="Start the HTTP server")
    server.add_argument("-p", "--port", help="Port to run the server on (default 8080)")
    server.add_argument(
        "-e", "--env", help="Environment (development, production) (default development)"
    )
    server.add_argument(
        "-l", "--log-level", help="Log level (debug, info, warn, error) (default info)"
    )
    commands.add_parser("version", help="print the version information")
    return parser


def _serve(config: ServerConfig) -> int:
    log = create_logger(config.log_level, config.environment)
    server = Server(config, log)
    stop = threading.Event()
    failures: list[BaseException] = []

    def run() -> None:
        log.info("Starting HTTP server", port=config.port, env=config.environment)
        try:
            server.start()
        except RuntimeError as exc:
            log.error("Server failed to start", error=exc)
            failures.append(exc)
            stop.set()

    previous = {}
    if threading.current_thread() is threading.main_thread():
        for sig in (signal.SIGINT, signal.SIGTERM):
            previous[sig] = signal.signal(sig, lambda *_: stop.set())

    threading.Thread(target=run, daemon=True).start()
    try:
        while not stop.wait(0.5):
            pass
    except KeyboardInterrupt:
        pass
    finally:
        for sig, handler in previous.items():
            signal.signal(sig, handler)

    if failures:
        return 1

    log.info("Shutting down server...")
    try:
        server.shutdown(_SHUTDOWN_SECONDS)
    except TimeoutError as exc:
        log.error("Server forced to shutdown", error=exc)
        return 1
    log.info("Server exited gracefully")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Serve, or run a subcommand, and return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        config = ServerConfig.load()
    except ValueError as exc:
        print(f"Failed to load configuration: {exc}", file=sys.stderr)
        return 1

    if not args:
        return _serve(config)

    parser = _build_parser()
    try:
        options = parser.parse_args(args)
    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else 1

    if options.command == "version":
        print(version_text())
        return 0
    if options.command == "server":
        if options.port is not None:
            config.port = options.port
        if options.env is not None:
            config.environment = options.env
        if options.log_level is not None:
            config.log_level = options.log_level
        return _serve(config)

    parser.print_help()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())