"""Copy data in batches from a source system into a destination system."""

from __future__ import annotations

import argparse
import random
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TextIO


@dataclass
class Data:
    """One line of data being copied."""

    line: str = ""


class XeniaError(Exception):
    """Raised when reading from Xenia fails."""

    def __init__(self, message: str = "Error reading data from Xenia") -> None:
        super().__init__(message)


class Puller(ABC):
    """A source that data can be pulled from."""

    @abstractmethod
    def pull(self) -> Data:
        """Return the next piece of data; raise EOFError when there is none left."""


class Storer(ABC):
    """A destination that data can be stored into."""

    @abstractmethod
    def store(self, data: Data) -> None:
        """Store ``data``."""


def _stream(out: TextIO | None) -> TextIO:
    return sys.stdout if out is None else out


@dataclass
class Xenia(Puller):
    """A system data is pulled from; it randomly runs dry or fails."""

    rng: random.Random = field(default_factory=random.Random, repr=False)
    out: TextIO | None = field(default=None, repr=False)

    def pull(self) -> Data:
        roll = self.rng.randrange(10)
        if roll in (1, 9):
            raise EOFError("EOF")
        if roll == 5:
            raise XeniaError()
        data = Data("Data")
        print("In:", data.line, file=_stream(self.out))
        return data


@dataclass
class Pillar(Storer):
    """A system data is stored into."""

    out: TextIO | None = field(default=None, repr=False)

    def store(self, data: Data) -> None:
        print("Out:", data.line, file=_stream(self.out))


@dataclass
class System(Puller, Storer):
    """A puller and a storer joined into one system."""

    puller: Puller = field(default_factory=Xenia)
    storer: Storer = field(default_factory=Pillar)

    def pull(self) -> Data:
        return self.puller.pull()

    def store(self, data: Data) -> None:
        self.storer.store(data)


def _pull_batch(puller: Puller, batch: int) -> tuple[list[Data], BaseException | None]:
    pulled: list[Data] = []
    for _ in range(batch):
        try:
            pulled.append(puller.pull())
        except (EOFError, XeniaError) as exc:
            return pulled, exc
    return pulled, None


def copy(system: System, batch: int) -> int:
    """Pull data in batches of ``batch`` and store each batch.

    Whatever was pulled before a failure is still stored. Returns the
    number of items stored once the source runs dry; a read failure or a
    store failure is raised.
    """
    if batch < 1:
        raise ValueError("batch must be at least 1")
    stored = 0
    while True:
        pulled, failure = _pull_batch(system, batch)
        for data in pulled:
            system.store(data)
            stored += 1
        if isinstance(failure, EOFError):
            return stored
        if failure is not None:
            raise failure


def main(argv: list[str] | None = None) -> int:
    """Copy data from Xenia into Pillar in batches."""
    parser = argparse.ArgumentParser(description="Copy data between systems.")
    parser.add_argument("--batch", type=int, default=3, help="items pulled per batch")
    args = parser.parse_args(argv)

    system = System(puller=Xenia(), storer=Pillar())
    try:
        copy(system, args.batch)
    except (XeniaError, ValueError) as exc:
        print(exc)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())