"""A small web service with a JSON endpoint."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Callable, Iterable
from wsgiref.simple_server import make_server

_logger = logging.getLogger(__name__)

Handler = Callable[[dict, Callable[..., object]], Iterable[bytes]]

_ROUTES: dict[str, Handler] = {}


def send_json(environ: dict, start_response: Callable[..., object]) -> Iterable[bytes]:
    """Answer with a simple JSON document describing a user."""
    user = {"Name": "Bill", "Email": "[email]"}
    body = (json.dumps(user, separators=(",", ":")) + "\n").encode("utf-8")
    start_response(
        "200 OK",
        [("Content-Type", "application/json"), ("Content-Length", str(len(body)))],
    )
    return [body]


def routes() -> dict[str, Handler]:
    """Register the service's endpoints and return the route table."""
    _ROUTES["/sendjson"] = send_json
    return dict(_ROUTES)


def app(environ: dict, start_response: Callable[..., object]) -> Iterable[bytes]:
    """WSGI application dispatching on the registered routes."""
    handler = _ROUTES.get(environ.get("PATH_INFO", ""))
    if handler is None:
        body = b"404 page not found\n"
        start_response(
            "404 Not Found",
            [("Content-Type", "text/plain; charset=utf-8"), ("Content-Length", str(len(body)))],
        )
        return [body]
    return handler(environ, start_response)


def main(argv: list[str] | None = None) -> int:
    """Serve the web service."""
    parser = argparse.ArgumentParser(description="Serve the JSON web service.")
    parser.add_argument("--host", default="", help="address to listen on")
    parser.add_argument("--port", type=int, default=4000, help="port to listen on")
    args = parser.parse_args(argv)

    logging.basicConfig(stream=sys.stdout, level=logging.INFO, format="%(asctime)s %(message)s")
    routes()
    with make_server(args.host, args.port, app) as server:
        _logger.info("listener : Started : Listening on :%d", args.port)
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())