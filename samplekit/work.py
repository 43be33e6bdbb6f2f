"""A fixed pool of threads that runs submitted work."""

from __future__ import annotations

import argparse
import logging
import queue
import sys
import threading
import time
from abc import ABC, abstractmethod
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

_logger = logging.getLogger(__name__)

_STOP = object()

NAMES = ("steve", "bob", "mary", "therese", "jason")


class Worker(ABC):
    """Work that the pool can run."""

    @abstractmethod
    def task(self) -> None:
        """Do the work."""


class WorkPool:
    """Runs submitted workers on a fixed number of threads."""

    def __init__(self, max_workers: int) -> None:
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self._queue: queue.Queue = queue.Queue()
        self._lock = threading.Lock()
        self._closed = False
        self._threads = [
            threading.Thread(target=self._loop, daemon=True) for _ in range(max_workers)
        ]
        for thread in self._threads:
            thread.start()

    def _loop(self) -> None:
        while True:
            item = self._queue.get()
            if item is _STOP:
                return
            worker, taken = item
            taken.set()
            try:
                worker.task()
            except Exception:
                _logger.exception("task failed")

    def run(self, worker: Worker) -> None:
        """Submit ``worker``; return once a pool thread has taken it."""
        taken = threading.Event()
        with self._lock:
            if self._closed:
                raise RuntimeError("work pool is shut down")
            self._queue.put((worker, taken))
        taken.wait()

    def shutdown(self) -> None:
        """Finish the submitted work and stop every pool thread."""
        with self._lock:
            if self._closed:
                raise RuntimeError("work pool is already shut down")
            self._closed = True
            for _ in self._threads:
                self._queue.put(_STOP)
        for thread in self._threads:
            thread.join()

    def __enter__(self) -> WorkPool:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()


@dataclass
class NamePrinter(Worker):
    """Logs a name, then pauses."""

    name: str
    delay: float = 1.0

    def task(self) -> None:
        _logger.info("%s", self.name)
        time.sleep(self.delay)


def main(argv: list[str] | None = None) -> int:
    """Print many names through a pool of two threads."""
    parser = argparse.ArgumentParser(description="Run work through a thread pool.")
    parser.add_argument("--rounds", type=int, default=100, help="times to submit each name")
    parser.add_argument("--delay", type=float, default=1.0, help="seconds each task takes")
    args = parser.parse_args(argv)

    logging.basicConfig(stream=sys.stdout, level=logging.INFO, format="%(asctime)s %(message)s")
    pool = WorkPool(2)
    printers = [NamePrinter(name, args.delay) for _ in range(args.rounds) for name in NAMES]
    with ThreadPoolExecutor(max_workers=len(NAMES)) as submitters:
        list(submitters.map(pool.run, printers))
    pool.shutdown()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())