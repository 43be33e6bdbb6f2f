"""Search a set of feeds concurrently with pluggable matchers."""

from __future__ import annotations

import json
import logging
import threading
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from pathlib import Path

DATA_FILE = "data/data.json"

_logger = logging.getLogger(__name__)


@dataclass
class Feed:
    """A feed to search: its site name, its link and its matcher type."""

    name: str = ""
    uri: str = ""
    type: str = ""


@dataclass
class Result:
    """A single match: the field that matched and its content."""

    field: str
    content: str


class Matcher(ABC):
    """Something that can search one feed for a term."""

    @abstractmethod
    def search(self, feed: Feed, search_term: str) -> list[Result]:
        """Return the results of searching ``feed`` for ``search_term``."""


class DefaultMatcher(Matcher):
    """Matcher used for feed types nobody registered; finds nothing."""

    def search(self, feed: Feed, search_term: str) -> list[Result]:
        return []


class MatcherRegistry:
    """Thread-safe mapping of feed types to matchers."""

    def __init__(self) -> None:
        self._matchers: dict[str, Matcher] = {}
        self._lock = threading.Lock()

    def register(self, feed_type: str, matcher: Matcher) -> None:
        """Register ``matcher`` for ``feed_type``; a type may be registered once."""
        with self._lock:
            if feed_type in self._matchers:
                raise ValueError(f"{feed_type} matcher already registered")
            _logger.info("Register %s matcher", feed_type)
            self._matchers[feed_type] = matcher

    def get(self, feed_type: str) -> Matcher | None:
        """Return the matcher for ``feed_type``, or None if there is none."""
        with self._lock:
            return self._matchers.get(feed_type)


_registry = MatcherRegistry()


def register(feed_type: str, matcher: Matcher) -> None:
    """Register ``matcher`` for ``feed_type`` in the shared registry."""
    _registry.register(feed_type, matcher)


def get_matcher(feed_type: str) -> Matcher | None:
    """Return the shared registry's matcher for ``feed_type``, if any."""
    return _registry.get(feed_type)


def _feed_from_json(entry: dict) -> Feed:
    return Feed(
        name=entry.get("site", ""),
        uri=entry.get("link", ""),
        type=entry.get("type", ""),
    )


def retrieve_feeds(path: str | Path = DATA_FILE) -> list[Feed]:
    """Read the list of feeds from the JSON data file at ``path``."""
    with open(path, encoding="utf-8") as handle:
        entries = json.load(handle)
    if entries is None:
        return []
    if not isinstance(entries, list):
        raise ValueError("feed data must be a JSON array")
    return [_feed_from_json(entry) for entry in entries]


def match(matcher: Matcher, feed: Feed, search_term: str) -> list[Result]:
    """Search one feed; a failing search is logged and yields no results."""
    try:
        return list(matcher.search(feed, search_term))
    except Exception as exc:  # a matcher's failure must not stop the others
        _logger.error("%s", exc)
        return []


def display(results: Iterable[Result], log: Callable[[str], object] | None = None) -> None:
    """Write each result through ``log`` (the module logger by default)."""
    emit = log if log is not None else _logger.info
    for result in results:
        emit(f"{result.field}:\n{result.content}\n")


def _matcher_for(feed_type: str) -> Matcher:
    matcher = _registry.get(feed_type)
    if matcher is None:
        matcher = _registry.get("default")
    if matcher is None:
        raise LookupError(f"no matcher for feed type {feed_type!r}")
    return matcher


def run(search_term: str, data_file: str | Path = DATA_FILE) -> list[Result]:
    """Search every feed concurrently, display results as they come in and return them."""
    feeds = retrieve_feeds(data_file)
    found: list[Result] = []
    if not feeds:
        return found

    with ThreadPoolExecutor(max_workers=len(feeds)) as pool:
        futures = [
            pool.submit(match, _matcher_for(feed.type), feed, search_term)
            for feed in feeds
        ]
        for future in as_completed(futures):
            batch = future.result()
            display(batch)
            found.extend(batch)
    return found


register("default", DefaultMatcher())