"""A pool of shared resources that can be closed."""

from __future__ import annotations

import argparse
import itertools
import logging
import queue
import random
import sys
import threading
import time
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Protocol

_logger = logging.getLogger(__name__)


class Closer(Protocol):
    def close(self) -> object: ...


class PoolClosedError(Exception):
    """Raised when a resource is acquired from a closed pool."""

    def __init__(self) -> None:
        super().__init__("Pool has been closed.")


class Pool:
    """Manages a bounded set of resources shared safely between threads."""

    def __init__(self, factory: Callable[[], Closer], size: int) -> None:
        if size < 1:
            raise ValueError("Size value too small.")
        self._factory = factory
        self._resources: queue.Queue[Closer] = queue.Queue(maxsize=size)
        self._lock = threading.Lock()
        self._closed = False

    def acquire(self) -> Closer:
        """Return a pooled resource, or a new one if none is free."""
        with self._lock:
            if self._closed:
                _logger.info("Acquire: Shared Resource")
                raise PoolClosedError()
            try:
                resource = self._resources.get_nowait()
            except queue.Empty:
                resource = None
        if resource is not None:
            _logger.info("Acquire: Shared Resource")
            return resource
        _logger.info("Acquire: New Resource")
        return self._factory()

    def release(self, resource: Closer) -> None:
        """Put ``resource`` back in the pool, or close it if there is no room."""
        with self._lock:
            if self._closed:
                resource.close()
                return
            try:
                self._resources.put_nowait(resource)
            except queue.Full:
                _logger.info("Release: Closing")
                resource.close()
            else:
                _logger.info("Release: In Queue")

    def close(self) -> None:
        """Shut the pool down and close every pooled resource."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            while True:
                try:
                    resource = self._resources.get_nowait()
                except queue.Empty:
                    break
                resource.close()

    def __enter__(self) -> Pool:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


@dataclass
class DbConnection:
    """A simulated database connection."""

    id: int
    closed: bool = field(default=False, compare=False)

    def close(self) -> None:
        """Mark the connection as closed."""
        self.closed = True
        _logger.info("Close: Connection %d", self.id)


_ids = itertools.count(1)
_ids_lock = threading.Lock()


def create_connection() -> DbConnection:
    """Create a connection with a fresh, unique id."""
    with _ids_lock:
        connection_id = next(_ids)
    _logger.info("Create: New Connection %d", connection_id)
    return DbConnection(connection_id)


def _perform_query(query: int, pool: Pool) -> None:
    try:
        connection = pool.acquire()
    except PoolClosedError as exc:
        _logger.info("%s", exc)
        return
    try:
        time.sleep(random.random())
        _logger.info("Query: QID[%d] CID[%d]", query, connection.id)
    finally:
        pool.release(connection)


def main(argv: list[str] | None = None) -> int:
    """Run concurrent queries over a small pool of connections."""
    parser = argparse.ArgumentParser(description="Share connections through a pool.")
    parser.add_argument("--queries", type=int, default=25, help="number of concurrent queries")
    parser.add_argument("--size", type=int, default=2, help="number of pooled connections")
    args = parser.parse_args(argv)

    logging.basicConfig(stream=sys.stdout, level=logging.INFO, format="%(asctime)s %(message)s")
    try:
        pool = Pool(create_connection, args.size)
    except ValueError as exc:
        _logger.error("%s", exc)
        return 1

    with ThreadPoolExecutor(max_workers=max(args.queries, 1)) as executor:
        list(executor.map(lambda query: _perform_query(query, pool), range(args.queries)))

    _logger.info("Shutdown Program.")
    pool.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())