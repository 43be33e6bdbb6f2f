"""A counter shared by threads: unguarded, atomic, and behind a lock."""

from __future__ import annotations

import argparse
import threading
import time
from collections.abc import Callable


class AtomicCounter:
    """An integer that threads can add to and read safely."""

    def __init__(self, value: int = 0) -> None:
        self._value = value
        self._lock = threading.Lock()

    def add(self, delta: int) -> int:
        """Add ``delta`` and return the new value."""
        with self._lock:
            self._value += delta
            return self._value

    def load(self) -> int:
        """Return the current value."""
        with self._lock:
            return self._value


def _check(workers: int, rounds: int) -> None:
    if workers < 0:
        raise ValueError("workers must not be negative")
    if rounds < 0:
        raise ValueError("rounds must not be negative")


def _run(workers: int, rounds: int, step: Callable[[], None]) -> None:
    def work() -> None:
        for _ in range(rounds):
            step()

    threads = [threading.Thread(target=work) for _ in range(workers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()


def unsafe_count(workers: int = 2, rounds: int = 2) -> int:
    """Increment a shared value without protection; updates may be lost."""
    _check(workers, rounds)
    counter = 0

    def step() -> None:
        nonlocal counter
        value = counter
        time.sleep(0)
        counter = value + 1

    _run(workers, rounds, step)
    return counter


def atomic_count(workers: int = 2, rounds: int = 2) -> int:
    """Increment a shared value atomically; no update is lost."""
    _check(workers, rounds)
    counter = AtomicCounter()

    def step() -> None:
        counter.add(1)
        time.sleep(0)

    _run(workers, rounds, step)
    return counter.load()


def locked_count(workers: int = 2, rounds: int = 2) -> int:
    """Increment a shared value inside a critical section; no update is lost."""
    _check(workers, rounds)
    lock = threading.Lock()
    counter = 0

    def step() -> None:
        nonlocal counter
        with lock:
            value = counter
            time.sleep(0)
            counter = value + 1

    _run(workers, rounds, step)
    return counter


def main(argv: list[str] | None = None) -> int:
    """Count from two threads and print the final value."""
    parser = argparse.ArgumentParser(description="Increment a counter from several threads.")
    parser.add_argument(
        "mode", nargs="?", choices=("unsafe", "atomic", "locked"), default="locked",
        help="how the counter is protected",
    )
    parser.add_argument("--workers", type=int, default=2, help="number of threads")
    parser.add_argument("--rounds", type=int, default=2, help="increments per thread")
    args = parser.parse_args(argv)

    counting = {"unsafe": unsafe_count, "atomic": atomic_count, "locked": locked_count}
    print(f"Final Counter: {counting[args.mode](args.workers, args.rounds)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())