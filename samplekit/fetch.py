"""Download a URL and copy its body to one or more destinations."""

from __future__ import annotations

import argparse
import sys
from contextlib import closing
from typing import BinaryIO
from urllib.error import HTTPError
from urllib.request import urlopen

_CHUNK = 32 * 1024


def _stdout() -> BinaryIO:
    return getattr(sys.stdout, "buffer", sys.stdout)


def fetch(url: str, *destinations: BinaryIO) -> int:
    """Copy the body of ``url`` to every destination; return the bytes copied.

    The body is copied whatever the response status. Without destinations
    it goes to standard output.
    """
    targets = destinations or (_stdout(),)
    try:
        response = urlopen(url)
    except HTTPError as exc:
        response = exc

    total = 0
    with closing(response):
        while chunk := response.read(_CHUNK):
            for target in targets:
                target.write(chunk)
            total += len(chunk)
    for target in targets:
        target.flush()
    return total


def main(argv: list[str] | None = None) -> int:
    """Print a URL's body, and save it to a file if one is named."""
    parser = argparse.ArgumentParser(description="Download a URL.")
    parser.add_argument("url", help="address to download")
    parser.add_argument("output", nargs="?", help="file that also receives the body")
    args = parser.parse_args(argv)

    try:
        if args.output:
            with open(args.output, "wb") as file:
                fetch(args.url, _stdout(), file)
        else:
            fetch(args.url, _stdout())
    except (OSError, ValueError) as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())