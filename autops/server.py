"""The HTTP API server."""

from __future__ import annotations

import argparse
import logging
from typing import Callable, Iterable
from wsgiref.simple_server import WSGIRequestHandler, WSGIServer, make_server

logger = logging.getLogger(__name__)

DEFAULT_PORT = 8080

StartResponse = Callable[..., object]
WSGIApp = Callable[[dict, StartResponse], Iterable[bytes]]

_NOT_FOUND_BODY = b"404 page not found\n"


def create_app() -> WSGIApp:
    """The WSGI application serving the API; no routes are registered yet."""
    routes: dict[tuple[str, str], WSGIApp] = {}

    def app(environ: dict, start_response: StartResponse) -> Iterable[bytes]:
        handler = routes.get((environ.get("REQUEST_METHOD", "GET"), environ.get("PATH_INFO", "/")))
        if handler is not None:
            return handler(environ, start_response)
        start_response(
            "404 Not Found",
            [
                ("Content-Type", "text/plain; charset=utf-8"),
                ("X-Content-Type-Options", "nosniff"),
                ("Content-Length", str(len(_NOT_FOUND_BODY))),
            ],
        )
        return [_NOT_FOUND_BODY]

    return app


class _LoggingHandler(WSGIRequestHandler):
    """Request handler that sends access lines to the module logger."""

    def log_message(self, format: str, *args: object) -> None:
        logger.debug("%s - %s", self.address_string(), format % args)


def _make_server(host: str, port: int) -> WSGIServer:
    return make_server(host, port, create_app(), handler_class=_LoggingHandler)


def main(argv: list[str] | None = None) -> int:
    """Run the API server until interrupted."""
    parser = argparse.ArgumentParser(description="Run the API server.")
    parser.add_argument("--host", default="", help="address to bind (default: all)")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="port to listen on")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")
    with _make_server(args.host, args.port) as server:
        logger.info("Server running on %s:%d", args.host, args.port)
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            logger.info("Server stopped")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())