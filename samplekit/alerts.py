"""Alert counters."""

from __future__ import annotations

import argparse


class AlertCounter(int):
    """A count of alerts."""


def new(value: int) -> AlertCounter:
    """Create an alert counter holding ``value``."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"alert counter needs an int, not {type(value).__name__}")
    return AlertCounter(value)


def main(argv: list[str] | None = None) -> int:
    """Create a counter and print it."""
    parser = argparse.ArgumentParser(description="Create an alert counter.")
    parser.add_argument("value", nargs="?", type=int, default=10, help="starting count")
    args = parser.parse_args(argv)

    counter = new(args.value)
    print(f"Counter: {counter:d}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())