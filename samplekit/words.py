"""Count the words in a piece of text or in a file."""

from __future__ import annotations

import argparse
from pathlib import Path


def count_words(text: str) -> int:
    """Return the number of whitespace-separated words in ``text``."""
    return len(text.split())


def main(argv: list[str] | None = None) -> int:
    """Print the number of words in the file named on the command line."""
    parser = argparse.ArgumentParser(description="Count the words in a file.")
    parser.add_argument("filename", help="file whose words are counted")
    args = parser.parse_args(argv)

    try:
        contents = Path(args.filename).read_bytes()
    except OSError as exc:
        print("There was an error opening the file:", exc)
        return 0

    text = contents.decode("utf-8", errors="replace")
    print(f"There are {count_words(text)} words in your text. ")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())