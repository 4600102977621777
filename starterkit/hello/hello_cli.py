"""Command line entry point for the greeter."""

from __future__ import annotations

import argparse
import logging

from starterkit.hello.greeter import VERSION, Greeter, GreeterConfig


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hello",
        description=(
            "This project showcases how projects are structured and follows "
            "a production ready norm"
        ),
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="enable verbose output")
    parser.add_argument("-n", "--name", default="World", help="name for greeting")
    parser.add_argument("--version", action="version", version=f"%(prog)s version {VERSION}")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, greet, and return the exit status."""
    args = _build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s %(message)s",
            datefmt="%Y/%m/%d %H:%M:%S",
        )
    Greeter(GreeterConfig(name=args.name, verbose=args.verbose)).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())