"""Small command-line programs: greeter, todo list, guessing game and HTTP server."""

__version__ = "0.1.0"