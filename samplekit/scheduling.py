"""Concurrent printers of alphabets and prime numbers."""

from __future__ import annotations

import argparse
import sys
import threading
from collections.abc import Iterator
from typing import TextIO

LETTERS = 26


def alphabet(first: str, times: int = 3) -> Iterator[str]:
    """Yield the 26 letters starting at ``first``, ``times`` times over."""
    if len(first) != 1:
        raise ValueError("first must be a single character")
    start = ord(first)
    for _ in range(times):
        yield from (chr(start + offset) for offset in range(LETTERS))


def primes(limit: int = 5000) -> Iterator[int]:
    """Yield the primes below ``limit`` by trial division."""
    for candidate in range(2, limit):
        if all(candidate % divisor for divisor in range(2, candidate)):
            yield candidate


def _write_letters(first: str, out: TextIO, lock: threading.Lock) -> None:
    for char in alphabet(first, 3):
        with lock:
            out.write(f"{char} ")


def print_alphabets(out: TextIO | None = None) -> None:
    """Print the lower- and upper-case alphabets from two threads."""
    out = sys.stdout if out is None else out
    lock = threading.Lock()
    with lock:
        out.write("Start Goroutines\n")
    threads = [
        threading.Thread(target=_write_letters, args=(first, out, lock)) for first in "aA"
    ]
    for thread in threads:
        thread.start()
    with lock:
        out.write("Waiting To Finish\n")
    for thread in threads:
        thread.join()
    out.write("\nTerminating Program\n")


def print_primes(prefix: str, limit: int = 5000, out: TextIO | None = None) -> None:
    """Print each prime below ``limit`` as ``prefix:prime``, then a completion line."""
    out = sys.stdout if out is None else out
    for prime in primes(limit):
        out.write(f"{prefix}:{prime}\n")
    out.write(f"Completed {prefix}\n")


def _run_prime_printers(limit: int, out: TextIO) -> None:
    out.write("Create Goroutines\n")
    threads = [
        threading.Thread(target=print_primes, args=(prefix, limit, out)) for prefix in "AB"
    ]
    for thread in threads:
        thread.start()
    out.write("Waiting To Finish\n")
    for thread in threads:
        thread.join()
    out.write("Terminating Program\n")


def main(argv: list[str] | None = None) -> int:
    """Print alphabets or primes from concurrent threads."""
    parser = argparse.ArgumentParser(description="Print from concurrent threads.")
    parser.add_argument(
        "mode", nargs="?", choices=("alphabets", "primes"), default="alphabets",
        help="what to print",
    )
    parser.add_argument("--limit", type=int, default=5000, help="primes are below this")
    args = parser.parse_args(argv)

    if args.mode == "alphabets":
        print_alphabets(sys.stdout)
    else:
        _run_prime_printers(args.limit, sys.stdout)
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())