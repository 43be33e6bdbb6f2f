"""HTTP API that searches the configured feeds and answers in JSON."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Callable, Iterable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import asdict, dataclass
from pathlib import Path
from urllib.parse import parse_qs
from wsgiref.simple_server import make_server

from samplekit import feedsearch
from samplekit.feedsearch import Feed, Matcher, Result

_logger = logging.getLogger(__name__)

SEARCH_PATH = "/api/search"

StartResponse = Callable[..., object]


@dataclass
class SearchResult:
    """A search result as the API returns it."""

    title: str
    description: str
    source: str
    date: str


def _matcher_for(feed_type: str) -> Matcher | None:
    matcher = feedsearch.get_matcher(feed_type)
    if matcher is None:
        matcher = feedsearch.get_matcher("default")
    return matcher


def _search_feed(feed: Feed, search_term: str) -> list[Result]:
    return feedsearch.match(_matcher_for(feed.type), feed, search_term)


def collect_results(
    search_term: str, data_file: str | Path = feedsearch.DATA_FILE
) -> list[SearchResult]:
    """Search every feed concurrently and return the results for the API."""
    try:
        feeds = feedsearch.retrieve_feeds(data_file)
    except (OSError, ValueError) as exc:
        _logger.error("failed to retrieve feeds: %s", exc)
        return []
    if not feeds:
        return []

    with ThreadPoolExecutor(max_workers=len(feeds)) as pool:
        batches = pool.map(lambda feed: _search_feed(feed, search_term), feeds)
        return [
            SearchResult(title=result.content, description="", source=result.field, date="")
            for batch in batches
            for result in batch
        ]


def _plain(start_response: StartResponse, status: str, message: str) -> Iterable[bytes]:
    body = (message + "\n").encode("utf-8")
    start_response(
        status,
        [
            ("Content-Type", "text/plain; charset=utf-8"),
            ("X-Content-Type-Options", "nosniff"),
            ("Content-Length", str(len(body))),
        ],
    )
    return [body]


def make_app(data_file: str | Path = feedsearch.DATA_FILE) -> Callable:
    """Return a WSGI application serving searches over the feeds in ``data_file``.

    A search that finds nothing is answered with the JSON value ``null``.
    """

    def app(environ: dict, start_response: StartResponse) -> Iterable[bytes]:
        if environ.get("PATH_INFO", "") != SEARCH_PATH:
            return _plain(start_response, "404 Not Found", "404 page not found")
        if environ.get("REQUEST_METHOD", "GET") != "GET":
            return _plain(
                start_response, "405 Method Not Allowed", "only GET requests are supported"
            )

        query = parse_qs(environ.get("QUERY_STRING", ""))
        search_term = query.get("q", [""])[0]
        if not search_term:
            return _plain(start_response, "400 Bad Request", "please provide a search term")

        _logger.info("search request received: %s", search_term)
        results = collect_results(search_term, data_file)
        payload = [asdict(result) for result in results] or None
        body = (json.dumps(payload, ensure_ascii=False) + "\n").encode("utf-8")
        start_response(
            "200 OK",
            [("Content-Type", "application/json"), ("Content-Length", str(len(body)))],
        )
        return [body]

    return app


def serve(
    host: str = "", port: int = 8080, data_file: str | Path = feedsearch.DATA_FILE
) -> None:
    """Serve the search API until interrupted."""
    with make_server(host, port, make_app(data_file)) as server:
        _logger.info("server listening on http://localhost:%d", port)
        server.serve_forever()


def main(argv: list[str] | None = None) -> int:
    """Start the search API server."""
    parser = argparse.ArgumentParser(description="Serve the feed search API.")
    parser.add_argument("--host", default="", help="address to listen on")
    parser.add_argument("--port", type=int, default=8080, help="port to listen on")
    parser.add_argument("--data", default=feedsearch.DATA_FILE, help="JSON file listing the feeds")
    args = parser.parse_args(argv)

    logging.basicConfig(stream=sys.stdout, level=logging.INFO, format="%(asctime)s %(message)s")
    _logger.info("starting API server...")
    try:
        serve(args.host, args.port, args.data)
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())