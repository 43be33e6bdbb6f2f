"""A publish/subscribe service and a mock that records its use."""

from __future__ import annotations

import argparse
import queue
import threading
from abc import ABC, abstractmethod
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any


class Publisher(ABC):
    """Something that messages can be published to and subscribed from."""

    @abstractmethod
    def publish(self, key: str, value: Any) -> int:
        """Send ``value`` under ``key``; return how many subscribers got it."""

    @abstractmethod
    def subscribe(self, key: str) -> queue.SimpleQueue:
        """Return a queue that receives the messages published under ``key``."""


class PubSub(Publisher):
    """An in-memory message queue system for one host."""

    def __init__(self, host: str) -> None:
        self.host = host
        self._subscribers: defaultdict[str, list[queue.SimpleQueue]] = defaultdict(list)
        self._lock = threading.Lock()

    def publish(self, key: str, value: Any) -> int:
        with self._lock:
            subscribers = list(self._subscribers.get(key, ()))
        for subscriber in subscribers:
            subscriber.put(value)
        return len(subscribers)

    def subscribe(self, key: str) -> queue.SimpleQueue:
        inbox: queue.SimpleQueue = queue.SimpleQueue()
        with self._lock:
            self._subscribers[key].append(inbox)
        return inbox


@dataclass
class MockPublisher(Publisher):
    """A publisher that delivers nothing and records every call."""

    published: list[tuple[str, Any]] = field(default_factory=list)
    subscriptions: list[str] = field(default_factory=list)

    def publish(self, key: str, value: Any) -> int:
        self.published.append((key, value))
        return 0

    def subscribe(self, key: str) -> queue.SimpleQueue:
        self.subscriptions.append(key)
        return queue.SimpleQueue()


def main(argv: list[str] | None = None) -> int:
    """Use a real and a mock publisher through the same interface."""
    parser = argparse.ArgumentParser(description="Publish through interchangeable publishers.")
    parser.parse_args(argv)

    publishers: list[Publisher] = [PubSub("localhost"), MockPublisher()]
    for publisher in publishers:
        publisher.publish("key", "value")
        publisher.subscribe("key")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())