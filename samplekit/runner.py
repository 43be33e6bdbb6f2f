"""Run a list of tasks within a time limit, stopping early on interrupt."""

from __future__ import annotations

import argparse
import logging
import signal
import sys
import threading
import time
from collections.abc import Callable

_logger = logging.getLogger(__name__)

Task = Callable[[int], object]


class RunnerTimeout(Exception):
    """Raised when the tasks do not finish before the runner's deadline."""

    def __init__(self) -> None:
        super().__init__("received timeout")


class RunnerInterrupted(Exception):
    """Raised when the runner is interrupted before all tasks have run."""

    def __init__(self) -> None:
        super().__init__("received interrupt")


class Runner:
    """Runs tasks in order, each given its index, within a deadline.

    The deadline starts counting when the runner is created. While
    ``start`` runs in the main thread, SIGINT interrupts the runner.
    """

    def __init__(self, timeout: float) -> None:
        self._deadline = time.monotonic() + timeout
        self._tasks: list[Task] = []
        self._interrupted = threading.Event()

    def add(self, *tasks: Task) -> None:
        """Append tasks; each is called with its index when it runs."""
        self._tasks.extend(tasks)

    def interrupt(self) -> None:
        """Ask the runner to stop before its next task."""
        self._interrupted.set()

    def _got_interrupt(self) -> bool:
        if self._interrupted.is_set():
            self._interrupted.clear()
            return True
        return False

    def _run(self, tasks: list[Task]) -> None:
        for task_id, task in enumerate(tasks):
            if self._got_interrupt():
                raise RunnerInterrupted()
            task(task_id)

    def _watch_sigint(self) -> Callable[[], object]:
        if threading.current_thread() is not threading.main_thread():
            return lambda: None
        previous = signal.getsignal(signal.SIGINT)
        if previous is None:
            previous = signal.SIG_DFL

        def handler(signum: int, frame: object) -> None:
            self.interrupt()
            signal.signal(signal.SIGINT, previous)

        try:
            signal.signal(signal.SIGINT, handler)
        except ValueError:
            return lambda: None
        return lambda: signal.signal(signal.SIGINT, previous)

    def start(self) -> None:
        """Run every task; raise RunnerTimeout or RunnerInterrupted on failure."""
        tasks = list(self._tasks)
        done = threading.Event()
        failure: list[BaseException] = []

        def target() -> None:
            try:
                self._run(tasks)
            except BaseException as exc:  # handed back to the caller
                failure.append(exc)
            finally:
                done.set()

        restore = self._watch_sigint()
        try:
            threading.Thread(target=target, daemon=True).start()
            remaining = self._deadline - time.monotonic()
            if not done.wait(max(remaining, 0.0)):
                raise RunnerTimeout()
        finally:
            restore()
        if failure:
            raise failure[0]


def create_task(unit: float = 1.0) -> Task:
    """Return a task that sleeps ``id * unit`` seconds."""

    def task(task_id: int) -> None:
        _logger.info("Processor - Task #%d.", task_id)
        time.sleep(task_id * unit)

    return task


def main(argv: list[str] | None = None) -> int:
    """Run three tasks under a time limit; exit 1 on timeout, 2 on interrupt."""
    parser = argparse.ArgumentParser(description="Run tasks within a time limit.")
    parser.add_argument("--timeout", type=float, default=3.0, help="seconds allowed")
    parser.add_argument("--unit", type=float, default=1.0, help="seconds per task id")
    args = parser.parse_args(argv)

    logging.basicConfig(stream=sys.stdout, level=logging.INFO, format="%(asctime)s %(message)s")
    _logger.info("Starting work.")

    runner = Runner(args.timeout)
    runner.add(create_task(args.unit), create_task(args.unit), create_task(args.unit))
    try:
        runner.start()
    except RunnerTimeout:
        _logger.info("Terminating due to timeout.")
        return 1
    except RunnerInterrupted:
        _logger.info("Terminating due to interrupt.")
        return 2

    _logger.info("Process ended.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())