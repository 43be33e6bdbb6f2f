"""Small programs that hand values between threads."""

from __future__ import annotations

import argparse
import queue
import random
import sys
import threading
import time
from collections.abc import Iterable, Sequence
from typing import TextIO

TASK_LOAD = 10
NUMBER_WORKERS = 4

_CLOSED = object()


class _Output:
    """Serialises writes from several threads to one stream."""

    def __init__(self, out: TextIO | None) -> None:
        self._out = sys.stdout if out is None else out
        self._lock = threading.Lock()

    def write(self, text: str) -> None:
        with self._lock:
            self._out.write(text)


def print_received(values: Iterable[int] | None = None, out: TextIO | None = None) -> None:
    """Send values to a printer thread, which writes each one it receives."""
    values = range(1, 11) if values is None else values
    output = _Output(out)
    channel: queue.Queue = queue.Queue(maxsize=1)

    def printer() -> None:
        while (value := channel.get()) is not _CLOSED:
            output.write(f"Received {value} ")

    thread = threading.Thread(target=printer)
    thread.start()
    for value in values:
        channel.put(value)
    channel.put(_CLOSED)
    thread.join()


def work_until_shutdown(
    names: Sequence[str] = ("A", "B"),
    duration: float = 1.0,
    interval: float = 0.25,
    out: TextIO | None = None,
) -> None:
    """Let one thread per name work until a shutdown flag is raised after ``duration``."""
    output = _Output(out)
    stop = threading.Event()

    def do_work(name: str) -> None:
        while True:
            output.write(f"Doing {name} Work\n")
            time.sleep(interval)
            if stop.is_set():
                output.write(f"Shutting {name} Down\n")
                return

    threads = [threading.Thread(target=do_work, args=(name,)) for name in names]
    for thread in threads:
        thread.start()
    time.sleep(duration)
    output.write("Shutdown Now\n")
    stop.set()
    for thread in threads:
        thread.join()


def play_tennis(
    players: Sequence[str] = ("Nadal", "Djokovic"),
    rng: random.Random | None = None,
    out: TextIO | None = None,
) -> list[str]:
    """Play a rally until a player misses; return the players who won.

    Each player hits the ball on to the next one. A player misses when
    ``rng.randrange(100)`` is a multiple of 13; every other player wins.
    """
    if len(players) < 2:
        raise ValueError("tennis needs at least two players")
    rng = random.Random() if rng is None else rng
    output = _Output(out)
    inboxes: list[queue.Queue] = [queue.Queue() for _ in players]
    winners: set[int] = set()
    winners_lock = threading.Lock()

    def player(index: int) -> None:
        name = players[index]
        while True:
            ball = inboxes[index].get()
            if ball is _CLOSED:
                output.write(f"Player {name} Won\n")
                with winners_lock:
                    winners.add(index)
                return
            if rng.randrange(100) % 13 == 0:
                output.write(f"Player {name} Missed\n")
                for other, inbox in enumerate(inboxes):
                    if other != index:
                        inbox.put(_CLOSED)
                return
            output.write(f"Player {name} Hit {ball}\n")
            inboxes[(index + 1) % len(players)].put(ball + 1)

    threads = [threading.Thread(target=player, args=(index,)) for index in range(len(players))]
    for thread in threads:
        thread.start()
    inboxes[0].put(1)
    for thread in threads:
        thread.join()
    return [name for index, name in enumerate(players) if index in winners]


def relay_race(runners: int = 4, leg_time: float = 0.1, out: TextIO | None = None) -> None:
    """Pass a baton from runner to runner until the last one finishes."""
    if runners < 1:
        raise ValueError("a relay needs at least one runner")
    output = _Output(out)
    baton: queue.Queue[int] = queue.Queue()
    finished = threading.Event()
    threads: list[threading.Thread] = []

    def launch() -> None:
        thread = threading.Thread(target=runner)
        threads.append(thread)
        thread.start()

    def runner() -> None:
        number = baton.get()
        output.write(f"Runner {number} Running With Baton\n")
        next_runner = number + 1
        if number != runners:
            output.write(f"Runner {next_runner} To The Line\n")
            launch()
        time.sleep(leg_time)
        if number == runners:
            output.write(f"Runner {number} Finished, Race Over\n")
            finished.set()
            return
        output.write(f"Runner {number} Exchange With Runner {next_runner}\n")
        baton.put(next_runner)

    launch()
    baton.put(1)
    finished.wait()
    for thread in list(threads):
        thread.join()


def run_workers(
    tasks: Iterable[str] | None = None,
    workers: int = NUMBER_WORKERS,
    rng: random.Random | None = None,
    out: TextIO | None = None,
) -> dict[str, int]:
    """Process tasks on a fixed number of worker threads.

    Each task takes a random time below 100 ms. Returns which worker
    completed each task.
    """
    if workers < 1:
        raise ValueError("workers must be at least 1")
    task_list = (
        [f"Task : {post}" for post in range(1, TASK_LOAD + 1)] if tasks is None else list(tasks)
    )
    rng = random.Random() if rng is None else rng
    rng_lock = threading.Lock()
    output = _Output(out)
    pending: queue.Queue = queue.Queue()
    completed: dict[str, int] = {}
    completed_lock = threading.Lock()

    def worker(number: int) -> None:
        while (task := pending.get()) is not _CLOSED:
            output.write(f"Worker: {number} : Started {task}\n")
            with rng_lock:
                pause = rng.randrange(100)
            time.sleep(pause / 1000)
            output.write(f"Worker: {number} : Completed {task}\n")
            with completed_lock:
                completed[task] = number
        output.write(f"Worker: {number} : Shutting Down\n")

    threads = [threading.Thread(target=worker, args=(number,)) for number in range(1, workers + 1)]
    for thread in threads:
        thread.start()
    for task in task_list:
        pending.put(task)
    for _ in threads:
        pending.put(_CLOSED)
    for thread in threads:
        thread.join()
    return completed


def main(argv: list[str] | None = None) -> int:
    """Run one of the channel programs."""
    parser = argparse.ArgumentParser(description="Hand values between threads.")
    parser.add_argument(
        "program",
        nargs="?",
        choices=("receive", "shutdown", "tennis", "relay", "workers"),
        default="receive",
        help="which program to run",
    )
    args = parser.parse_args(argv)

    if args.program == "receive":
        print_received()
    elif args.program == "shutdown":
        work_until_shutdown()
    elif args.program == "tennis":
        play_tennis()
    elif args.program == "relay":
        relay_race()
    else:
        run_workers()
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())