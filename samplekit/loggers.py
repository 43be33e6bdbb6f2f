"""A set of loggers for trace, information, warning and error messages."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

_DATE_FORMAT = "%Y/%m/%d %H:%M:%S"


@dataclass
class Loggers:
    """The four loggers; use as a context manager to release their outputs."""

    trace: logging.Logger
    info: logging.Logger
    warning: logging.Logger
    error: logging.Logger

    def __enter__(self) -> Loggers:
        return self

    def __exit__(self, *exc_info: object) -> None:
        for logger in (self.trace, self.info, self.warning, self.error):
            for handler in list(logger.handlers):
                logger.removeHandler(handler)
                handler.close()


def _new_logger(prefix: str, handlers: list[logging.Handler]) -> logging.Logger:
    logger = logging.Logger(prefix.rstrip(": ").lower(), logging.DEBUG)
    logger.propagate = False
    formatter = logging.Formatter(
        f"{prefix}%(asctime)s %(filename)s:%(lineno)d: %(message)s", datefmt=_DATE_FORMAT
    )
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger


def create_loggers(
    error_path: str | Path = "errors.txt",
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> Loggers:
    """Create the loggers; errors are appended to ``error_path`` and written to stderr.

    Raises OSError if the error file cannot be opened.
    """
    error_file = logging.FileHandler(error_path, mode="a", encoding="utf-8")
    out = sys.stdout if stdout is None else stdout
    err = sys.stderr if stderr is None else stderr
    return Loggers(
        trace=_new_logger("TRACE: ", [logging.NullHandler()]),
        info=_new_logger("INFO: ", [logging.StreamHandler(out)]),
        warning=_new_logger("WARNING: ", [logging.StreamHandler(out)]),
        error=_new_logger("ERROR: ", [error_file, logging.StreamHandler(err)]),
    )


def main(argv: list[str] | None = None) -> int:
    """Write one message through each logger."""
    parser = argparse.ArgumentParser(description="Write through custom loggers.")
    parser.add_argument("--error-file", default="errors.txt", help="file errors are appended to")
    args = parser.parse_args(argv)

    try:
        loggers = create_loggers(args.error_file)
    except OSError as exc:
        print("Failed to open error log file:", exc, file=sys.stderr)
        return 1
    with loggers:
        loggers.trace.info("I have something standard to say")
        loggers.info.info("Special Information")
        loggers.warning.info("There is something you need to know about")
        loggers.error.info("Something has failed")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())