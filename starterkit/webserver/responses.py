"""JSON responses in the shapes the server's endpoints use."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

_INTERNAL_ERROR_BODY = b"Internal Server Error\n"
_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def _encode(data: Any) -> bytes:
    text = json.dumps(data, ensure_ascii=False, separators=(",", ":"), sort_keys=True)
    for char, escape in _ESCAPES.items():
        text = text.replace(char, escape)
    return (text + "\n").encode("utf-8")


@dataclass
class Response:
    """A status code, headers and body ready to be sent."""

    status: int
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    def json(self) -> Any:
        """The body decoded as JSON."""
        return json.loads(self.body.decode("utf-8"))


def json_response(status: int, data: Any) -> Response:
    """``data`` as a JSON body with the given status."""
    headers = {"Content-Type": "application/json"}
    try:
        body = _encode(data)
    except (TypeError, ValueError):
        body = _INTERNAL_ERROR_BODY
    return Response(status, headers, body)


def error_response(status: int, message: str) -> Response:
    """An error object carrying the message and the status."""
    return json_response(status, {"error": {"message": message, "status": status}})


def success_response(data: Any) -> Response:
    """A 200 response wrapping ``data`` with a success flag."""
    return json_response(200, {"success": True, "data": data})