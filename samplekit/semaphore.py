"""A counting semaphore and a reader/writer built on it.

Many readers may hold the resource at once, up to a limit. A writer takes
every slot, so it runs alone.
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import threading
import time
from concurrent.futures import ThreadPoolExecutor

_logger = logging.getLogger(__name__)


def _check_count(count: int) -> None:
    if count < 0:
        raise ValueError("count must not be negative")


class Semaphore:
    """A fixed number of slots, taken and given back one at a time."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._held = 0
        self._cond = threading.Condition()

    def acquire(self, count: int = 1) -> None:
        """Take ``count`` slots, waiting for each one to be free."""
        _check_count(count)
        for _ in range(count):
            with self._cond:
                self._cond.wait_for(lambda: self._held < self._capacity)
                self._held += 1
                self._cond.notify_all()

    def release(self, count: int = 1) -> None:
        """Give back ``count`` slots, waiting for each one to be held."""
        _check_count(count)
        for _ in range(count):
            with self._cond:
                self._cond.wait_for(lambda: self._held > 0)
                self._held -= 1
                self._cond.notify_all()


class ReaderWriter:
    """Reader threads and one writer thread sharing a resource safely.

    ``reads``, ``writes`` and ``peak_reads`` count what happened;
    ``overlaps`` counts reads and writes that ran at the same time and
    so stays zero.
    """

    max_delay = 1.0

    def __init__(self, name: str, max_reads: int, max_readers: int) -> None:
        if max_reads < 1:
            raise ValueError("max_reads must be at least 1")
        if max_readers < 0:
            raise ValueError("max_readers must not be negative")
        self.name = name
        self.max_reads = max_reads
        self.max_readers = max_readers
        self._control = Semaphore(max_reads)
        self._write_cond = threading.Condition()
        self._pending_writes = 0
        self._shutdown = threading.Event()
        self._threads: list[threading.Thread] = []
        self._state = threading.Lock()
        self._rng = random.Random()
        self._current_reads = 0
        self._writing = False
        self._started = False
        self._stopped = False
        self.reads = 0
        self.writes = 0
        self.peak_reads = 0
        self.overlaps = 0

    def _delay(self) -> float:
        with self._state:
            return self._rng.random() * self.max_delay

    def start(self) -> ReaderWriter:
        """Launch the reader threads and the writer thread."""
        if self._started:
            raise RuntimeError(f"{self.name} already started")
        self._started = True
        self._threads = [
            threading.Thread(target=self._reader, args=(reader,), daemon=True)
            for reader in range(self.max_readers)
        ]
        self._threads.append(threading.Thread(target=self._writer, daemon=True))
        for thread in self._threads:
            thread.start()
        return self

    def stop(self) -> None:
        """Signal every thread to finish and wait until they have."""
        if not self._started:
            raise RuntimeError(f"{self.name} was never started")
        if self._stopped:
            raise RuntimeError(f"{self.name} already stopped")
        self._stopped = True
        _logger.info("%s\t: #####> Stop", self.name)
        self._shutdown.set()
        for thread in self._threads:
            thread.join()
        _logger.info("%s\t: #####> Stopped", self.name)

    def _reader(self, reader: int) -> None:
        while not self._shutdown.is_set():
            self._perform_read(reader)
        _logger.info("%s\t: #> Reader Shutdown", self.name)

    def _perform_read(self, reader: int) -> None:
        self.read_lock()
        try:
            with self._state:
                self._current_reads += 1
                count = self._current_reads
                self.reads += 1
                self.peak_reads = max(self.peak_reads, count)
                if self._writing:
                    self.overlaps += 1
            _logger.info("%s\t: [%d] Start\t- [%d] Reads", self.name, reader, count)
            time.sleep(self._delay())
            with self._state:
                self._current_reads -= 1
                count = self._current_reads
            _logger.info("%s\t: [%d] Finish\t- [%d] Reads", self.name, reader, count)
        finally:
            self.read_unlock()

    def _writer(self) -> None:
        while not self._shutdown.is_set():
            self._perform_write()
        _logger.info("%s\t: #> Writer Shutdown", self.name)

    def _perform_write(self) -> None:
        time.sleep(self._delay())
        _logger.info("%s\t: *****> Writing Pending", self.name)
        self.write_lock()
        try:
            with self._state:
                self._writing = True
                self.writes += 1
                if self._current_reads:
                    self.overlaps += 1
            _logger.info("%s\t: *****> Writing Start", self.name)
            time.sleep(self._delay())
            _logger.info("%s\t: *****> Writing Finish", self.name)
            with self._state:
                self._writing = False
        finally:
            self.write_unlock()

    def read_lock(self) -> None:
        """Wait for any pending write, then take one read slot."""
        with self._write_cond:
            self._write_cond.wait_for(lambda: self._pending_writes == 0)
        self._control.acquire(1)

    def read_unlock(self) -> None:
        """Give back one read slot."""
        self._control.release(1)

    def write_lock(self) -> None:
        """Hold off new readers and take every read slot."""
        with self._write_cond:
            self._pending_writes += 1
        self._control.acquire(self.max_reads)

    def write_unlock(self) -> None:
        """Give back every read slot and let readers in again."""
        self._control.release(self.max_reads)
        with self._write_cond:
            self._pending_writes -= 1
            self._write_cond.notify_all()


def start(name: str, max_reads: int, max_readers: int) -> ReaderWriter:
    """Create a reader/writer and start its threads."""
    return ReaderWriter(name, max_reads, max_readers).start()


def shutdown(*readers_writers: ReaderWriter) -> None:
    """Stop every reader/writer concurrently and wait for all of them."""
    if not readers_writers:
        return
    with ThreadPoolExecutor(max_workers=len(readers_writers)) as executor:
        list(executor.map(lambda rw: rw.stop(), readers_writers))


def main(argv: list[str] | None = None) -> int:
    """Run two reader/writers for a while, then shut them down."""
    parser = argparse.ArgumentParser(description="Readers and writers sharing a resource.")
    parser.add_argument("--duration", type=float, default=2.0, help="seconds to run")
    args = parser.parse_args(argv)

    logging.basicConfig(stream=sys.stdout, level=logging.INFO, format="%(asctime)s %(message)s")
    _logger.info("Starting Process")
    first = start("First", 3, 6)
    second = start("Second", 2, 2)
    time.sleep(args.duration)
    shutdown(first, second)
    _logger.info("Process Ended")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())