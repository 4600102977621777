"""The web application: routes, handlers, middleware, and the server around it."""

from __future__ import annotations

import html
import mimetypes
import platform
import posixpath
import re
import threading
import time
import traceback
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from http import HTTPStatus
from pathlib import Path
from socketserver import ThreadingMixIn
from typing import Any, BinaryIO, Callable, Iterable
from urllib.parse import parse_qs, quote
from wsgiref.simple_server import WSGIRequestHandler, WSGIServer, make_server

from starterkit.webserver.logs import ServerLogger, create_logger
from starterkit.webserver.responses import Response, error_response, json_response
from starterkit.webserver.server_config import ServerConfig

_VERSION = "1.0.0"
_STATIC_PREFIX = "/static/"
_ACTION = re.compile(r"\{\{(.*?)\}\}", re.DOTALL)
_FIELD = re.compile(r"\.([A-Za-z_]\w*)")
_CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization, X-Requested-With",
    "Access-Control-Max-Age": "86400",
}

Handler = Callable[["_Request"], Response]


class _TemplateError(Exception):
    """A page template could not be rendered."""


def _rfc3339(moment: datetime) -> str:
    text = moment.isoformat(timespec="seconds")
    return text[:-6] + "Z" if text.endswith("+00:00") else text


def _now() -> datetime:
    return datetime.now().astimezone()


def _fraction(value: int, unit: int) -> str:
    whole, rest = divmod(value, unit)
    digits = str(rest).rjust(len(str(unit)) - 1, "0").rstrip("0")
    return f"{whole}.{digits}" if digits else str(whole)


def _duration_text(seconds: float) -> str:
    """A duration written like ``1m2.5s``, ``350ms`` or ``0s``."""
    nanos = round(seconds * 1e9)
    if nanos == 0:
        return "0s"
    sign = "-" if nanos < 0 else ""
    nanos = abs(nanos)
    if nanos < 1_000:
        return f"{sign}{nanos}ns"
    if nanos < 1_000_000:
        return f"{sign}{_fraction(nanos, 1_000)}µs"
    if nanos < 1_000_000_000:
        return f"{sign}{_fraction(nanos, 1_000_000)}ms"
    hours, rest = divmod(nanos, 3600 * 10**9)
    minutes, rest = divmod(rest, 60 * 10**9)
    text = f"{_fraction(rest, 10**9)}s"
    if hours:
        text = f"{hours}h{minutes}m{text}"
    elif minutes:
        text = f"{minutes}m{text}"
    return sign + text


def _wsgi_text(value: str) -> str:
    return value.encode("latin-1", "replace").decode("utf-8", "replace")


def _canonical(name: str) -> str:
    return "-".join(part.capitalize() for part in name.split("_"))


def _plain(status: int, text: str) -> Response:
    return Response(
        status,
        {"Content-Type": "text/plain; charset=utf-8", "X-Content-Type-Options": "nosniff"},
        (text + "\n").encode("utf-8"),
    )


def _internal_error(status: int = 500) -> Response:
    return _plain(status, "Internal Server Error")


def _render(source: str, values: dict[str, str]) -> str:
    def replace(match: re.Match) -> str:
        action = match.group(1).strip()
        if action.startswith("/*") and action.endswith("*/"):
            return ""
        found = _FIELD.fullmatch(action)
        if found is None:
            raise _TemplateError(f"unsupported action {{{{{action}}}}}")
        try:
            return values[found.group(1)]
        except KeyError:
            raise _TemplateError(f"can't evaluate field {found.group(1)}") from None

    return _ACTION.sub(replace, source)


@dataclass
class _PageData:
    title: str
    message: str
    current_time: str = ""
    version: str = ""

    def values(self) -> dict[str, str]:
        return {
            "Title": self.title,
            "Message": self.message,
            "CurrentTime": self.current_time,
            "Version": self.version,
        }


@dataclass
class _Request:
    method: str
    path: str
    raw_query: str
    headers: dict[str, list[str]]
    remote_addr: str
    stream: BinaryIO | None = None
    length: int = 0
    _body: bytes | None = field(default=None, repr=False)

    @classmethod
    def from_environ(cls, environ: dict[str, Any]) -> _Request:
        headers: dict[str, list[str]] = {}
        for key, value in environ.items():
            if key.startswith("HTTP_") and key != "HTTP_HOST":
                name = key[5:]
            elif key in ("CONTENT_TYPE", "CONTENT_LENGTH") and value:
                name = key
            else:
                continue
            headers.setdefault(_canonical(name), []).append(_wsgi_text(str(value)))
        try:
            length = int(environ.get("CONTENT_LENGTH") or 0)
        except ValueError:
            length = 0
        address = environ.get("REMOTE_ADDR", "")
        port = environ.get("REMOTE_PORT")
        return cls(
            method=environ.get("REQUEST_METHOD", "GET").upper(),
            path=_wsgi_text(environ.get("PATH_INFO", "")) or "/",
            raw_query=environ.get("QUERY_STRING", ""),
            headers=headers,
            remote_addr=f"{address}:{port}" if port else address,
            stream=environ.get("wsgi.input"),
            length=max(length, 0),
        )

    def header(self, name: str) -> str:
        values = self.headers.get(_canonical(name.replace("-", "_")))
        return values[0] if values else ""

    @property
    def query(self) -> dict[str, list[str]]:
        return parse_qs(self.raw_query, keep_blank_values=True)

    @property
    def url(self) -> str:
        path = quote(self.path, safe="/:@!$&'()*+,;=-._~")
        return f"{path}?{self.raw_query}" if self.raw_query else path

    @property
    def user_agent(self) -> str:
        return self.header("User-Agent")

    def body(self) -> bytes:
        if self._body is None:
            self._body = self.stream.read(self.length) if self.stream and self.length else b""
        return self._body


class WebApp:
    """The WSGI application with all routes and middleware in place."""

    def __init__(self, config: ServerConfig, logger: ServerLogger | None = None):
        self.config = config
        self.logger = logger or create_logger(config.log_level, config.environment)
        self._started = time.monotonic()
        self._routes: dict[str, Handler] = {
            "/hello": self._handle_hello,
            "/about": self._handle_about,
            "/api/info": self._handle_api_info,
            "/api/echo": self._handle_api_echo,
            "/api/time": self._handle_api_time,
            "/health": self._handle_health,
            "/ready": self._handle_ready,
        }
        handler: Handler = self._recovery(self._dispatch)
        handler = self._logging(handler)
        if config.enable_cors:
            handler = self._cors(handler)
        self._handler = handler

    def __call__(self, environ: dict[str, Any], start_response: Callable) -> Iterable[bytes]:
        request = _Request.from_environ(environ)
        response = self._handler(request)
        headers = dict(response.headers)
        headers["Content-Length"] = str(len(response.body))
        try:
            phrase = HTTPStatus(response.status).phrase
        except ValueError:
            phrase = ""
        start_response(f"{response.status} {phrase}".rstrip(), list(headers.items()))
        return [b"" if request.method == "HEAD" else response.body]

    # routing

    def _dispatch(self, request: _Request) -> Response:
        handler = self._routes.get(request.path)
        if handler is not None:
            return handler(request)
        if request.path == _STATIC_PREFIX.rstrip("/"):
            return self._redirect(_STATIC_PREFIX)
        if request.path.startswith(_STATIC_PREFIX):
            return self._serve_static(request)
        return self._handle_home(request)

    # middleware

    def _logging(self, handler: Handler) -> Handler:
        def wrapped(request: _Request) -> Response:
            start = time.monotonic()
            response = handler(request)
            self.logger.info(
                "HTTP request",
                method=request.method,
                uri=request.url,
                status=response.status,
                duration=_duration_text(time.monotonic() - start),
                user_agent=request.user_agent,
                remote_addr=request.remote_addr,
            )
            return response

        return wrapped

    def _cors(self, handler: Handler) -> Handler:
        def wrapped(request: _Request) -> Response:
            if request.method == "OPTIONS":
                return Response(200, dict(_CORS_HEADERS), b"")
            response = handler(request)
            response.headers.update(_CORS_HEADERS)
            return response

        return wrapped

    def _recovery(self, handler: Handler) -> Handler:
        def wrapped(request: _Request) -> Response:
            try:
                return handler(request)
            except Exception as exc:  # every failure becomes a 500
                self.logger.error(
                    "Panic recovered",
                    error=exc,
                    method=request.method,
                    uri=request.url,
                    stack=traceback.format_exc(),
                )
                return _internal_error()

        return wrapped

    # handlers

    def _handle_home(self, request: _Request) -> Response:
        if request.path != "/":
            return self._handle_not_found(request)
        data = _PageData(
            title="Go HTTP Server",
            message="Welcome to the Go HTTP Server!",
            current_time=_rfc3339(_now()),
            version=_VERSION,
        )
        return self._render_template("index.html", data)

    def _handle_hello(self, request: _Request) -> Response:
        name = (request.query.get("name") or [""])[0] or "Go"
        message = f"Hello, {name}!"
        if request.header("Accept") == "application/json":
            return json_response(200, {"message": message, "time": _rfc3339(_now())})
        return Response(200, {"Content-Type": "text/plain"}, message.encode("utf-8"))

    def _handle_about(self, request: _Request) -> Response:
        data = _PageData(
            title="About - Go Http Server",
            message=(
                "This is a simple http server built with Go to demonstrate "
                "web development concepts"
            ),
            version=_VERSION,
        )
        return self._render_template("about.html", data)

    def _handle_api_info(self, request: _Request) -> Response:
        info = {
            "server": {
                "name": "Go HTTP Server",
                "version": _VERSION,
                "environment": self.config.environment,
                "runtime_version": platform.python_version(),
            },
            "request": {
                "method": request.method,
                "url": request.url,
                "user_agent": request.user_agent,
                "remote_ip": request.remote_addr,
            },
            "timestamp": _rfc3339(_now()),
        }
        return json_response(200, info)

    def _handle_api_echo(self, request: _Request) -> Response:
        body: Any = None
        if request.method == "POST" and request.header("Content-Type") == "application/json":
            text = request.body().decode("utf-8", "replace").lstrip()
            try:
                body, _ = json.JSONDecoder().raw_decode(text)
            except ValueError:
                return error_response(400, "Invalid JSON body")

        echo: dict[str, Any] = {
            "method": request.method,
            "url": request.url,
            "headers": {name: values[0] for name, values in request.headers.items()},
            "query": request.query,
            "remote_addr": request.remote_addr,
            "timestamp": _rfc3339(_now()),
        }
        if body is not None:
            echo["body"] = body
        return json_response(200, echo)

    def _handle_api_time(self, request: _Request) -> Response:
        now = _now()
        stamp = _rfc3339(now)
        hour = now.hour % 12 or 12
        meridiem = "AM" if now.hour < 12 else "PM"
        human = (
            f"{now:%B} {now.day}, {now.year} at {hour}:{now:%M} {meridiem} "
            f"{now.tzname() or now.strftime('%z')}"
        )
        info = {
            "timestamp": stamp,
            "unix": int(now.timestamp()),
            "timezone": "Local",
            "formats": {
                "rfc3339": stamp,
                "iso8601": stamp,
                "human": human,
                "date": now.strftime("%Y-%m-%d"),
                "time": now.strftime("%H:%M:%S"),
            },
        }
        return json_response(200, info)

    def _handle_health(self, request: _Request) -> Response:
        health = {
            "status": "healthy",
            "timestamp": _rfc3339(_now()),
            "uptime": _duration_text(time.monotonic() - self._started),
            "version": _VERSION,
        }
        return json_response(200, health)

    def _handle_ready(self, request: _Request) -> Response:
        return json_response(200, {"ready": True, "timestamp": _rfc3339(_now())})

    def _handle_not_found(self, request: _Request) -> Response:
        if request.header("Accept") == "application/json":
            return error_response(404, "Endpoint Not Found!")
        data = _PageData(
            title="404 - Page Not Found",
            message=f"The page '{request.path}' was not found!",
        )
        return self._render_template("error.html", data, status=404, failure_status=404)

    def _render_template(
        self, name: str, data: _PageData, status: int = 200, failure_status: int = 500
    ) -> Response:
        path = Path(self.config.template_dir) / name
        try:
            source = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            self.logger.error("Template parse error", template=name, error=exc)
            return _internal_error(failure_status)
        try:
            page = _render(source, data.values())
        except _TemplateError as exc:
            self.logger.error("Template execution error", template=name, error=exc)
            return _internal_error(failure_status)
        return Response(
            status, {"Content-Type": "text/html; charset=utf-8"}, page.encode("utf-8")
        )

    # static files

    @staticmethod
    def _redirect(location: str) -> Response:
        body = f'<a href="{html.escape(location)}">Moved Permanently</a>.\n\n'
        return Response(
            301,
            {"Location": location, "Content-Type": "text/html; charset=utf-8"},
            body.encode("utf-8"),
        )

    def _serve_static(self, request: _Request) -> Response:
        clean = posixpath.normpath("/" + request.path[len(_STATIC_PREFIX):])
        root = Path(self.config.static_dir)
        target = root.joinpath(*(part for part in clean.split("/") if part))
        try:
            if target.is_dir():
                if not request.path.endswith("/"):
                    return self._redirect(request.path + "/")
                index = target / "index.html"
                if index.is_file():
                    return self._file_response(index)
                return self._listing(target)
            if target.is_file():
                return self._file_response(target)
        except OSError:
            return _internal_error()
        return _plain(404, "404 page not found")

    @staticmethod
    def _file_response(path: Path) -> Response:
        kind, _ = mimetypes.guess_type(path.name)
        if kind is None:
            kind = "application/octet-stream"
        elif kind.startswith("text/"):
            kind += "; charset=utf-8"
        return Response(200, {"Content-Type": kind}, path.read_bytes())

    @staticmethod
    def _listing(directory: Path) -> Response:
        lines = ['<!doctype html>\n<meta name="viewport" content="width=device-width">\n<pre>\n']
        for entry in sorted(directory.iterdir(), key=lambda item: item.name):
            name = entry.name + ("/" if entry.is_dir() else "")
            lines.append(f'<a href="{quote(name)}">{html.escape(name)}</a>\n')
        lines.append("</pre>\n")
        return Response(
            200, {"Content-Type": "text/html; charset=utf-8"}, "".join(lines).encode("utf-8")
        )


class _ThreadingWSGIServer(ThreadingMixIn, WSGIServer):
    daemon_threads = True
    request_timeout: float | None = None


class _QuietHandler(WSGIRequestHandler):
    def setup(self) -> None:
        self.timeout = getattr(self.server, "request_timeout", None)
        super().setup()

    def log_message(self, format: str, *args: Any) -> None:
        pass


class Server:
    """Serves the web application over HTTP until shut down."""

    def __init__(self, config: ServerConfig, logger: ServerLogger | None = None):
        self.config = config
        self.logger = logger or create_logger(config.log_level, config.environment)
        self.app = WebApp(config, self.logger)
        self.address = ":" + config.port
        self.started = threading.Event()
        self.bound_port: int | None = None
        self._lock = threading.Lock()
        self._httpd: _ThreadingWSGIServer | None = None
        self._closed = False

    def start(self) -> None:
        """Listen and serve; blocks until ``shutdown``. Raises RuntimeError if it cannot listen."""
        self.logger.info("Server starting", address=self.address)
        try:
            httpd = make_server(
                "",
                int(self.config.port),
                self.app,
                server_class=_ThreadingWSGIServer,
                handler_class=_QuietHandler,
            )
        except (OSError, ValueError, OverflowError) as exc:
            raise RuntimeError(f"Server failed to start: {exc}") from exc
        httpd.request_timeout = self.config.read_timeout.total_seconds() or None
        with self._lock:
            if self._closed:
                httpd.server_close()
                return
            self._httpd = httpd
        self.bound_port = httpd.server_address[1]
        self.started.set()
        try:
            httpd.serve_forever(poll_interval=0.2)
        finally:
            httpd.server_close()

    def shutdown(self, timeout: float | timedelta = 30.0) -> None:
        """Stop serving; raises TimeoutError if that takes longer than ``timeout``."""
        self.logger.info("Server shutting down...")
        seconds = timeout.total_seconds() if isinstance(timeout, timedelta) else float(timeout)
        with self._lock:
            self._closed = True
            httpd = self._httpd
        if httpd is not None:
            stopper = threading.Thread(target=httpd.shutdown, daemon=True)
            stopper.start()
            stopper.join(seconds)
            if stopper.is_alive():
                raise TimeoutError("server shutdown failed: timed out")
        self.logger.info("Server shutdown complete")


import json  # noqa: E402  (kept with the module's other imports at runtime)