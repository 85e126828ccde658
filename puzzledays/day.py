"""The common shape of a daily puzzle and running a batch of them."""

from __future__ import annotations

import sys
import threading
import time
from abc import ABC, abstractmethod
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from enum import Enum
from os import PathLike
from pathlib import Path
from typing import ClassVar, Iterable, TextIO

from .inputs import read_input

DEFAULT_INPUTS_DIR = Path("inputs")


class Part(Enum):
    ONE = 1
    TWO = 2


@dataclass(frozen=True)
class DayResult:
    """The answers to both parts of a day and how long they took."""

    day: int
    part_one: str
    part_two: str
    elapsed_ms: int

    def __str__(self) -> str:
        return (
            f"Day {self.day}:"
            f"\n\tPart 1: {self.part_one}"
            f"\n\tPart 2: {self.part_two}"
            f"\n\tTime: {self.elapsed_ms}ms"
        )


class Day(ABC):
    """A puzzle: reads its input once, then answers each part."""

    number: ClassVar[int]

    def __init__(self, inputs_dir: str | PathLike[str] = DEFAULT_INPUTS_DIR) -> None:
        self.inputs_dir = Path(inputs_dir)

    def name(self) -> str:
        return f"Day{self.number}"

    def load(self) -> None:
        """Read this day's input file and initialize from it."""
        self.initialize(read_input(self.name(), self.inputs_dir))

    @abstractmethod
    def initialize(self, text: str) -> None:
        """Prepare from the raw input text; called before solving."""

    @abstractmethod
    def solve(self, part: Part) -> str:
        """The answer to one part."""

    def run(self) -> DayResult:
        """Load the input, solve both parts and time the whole."""
        start = time.monotonic()
        self.load()
        part_one = self.solve(Part.ONE)
        part_two = self.solve(Part.TWO)
        elapsed = int((time.monotonic() - start) * 1000)
        return DayResult(self.number, part_one, part_two, elapsed)


def run_days(
    days: Iterable[Day], out: TextIO | None = None, err: TextIO | None = None
) -> list[DayResult | None]:
    """Run days concurrently, printing each result or error as it completes.

    Returns results in the order given, with None for days that failed.
    """
    out = sys.stdout if out is None else out
    err = sys.stderr if err is None else err
    days = list(days)
    lock = threading.Lock()

    def run_one(day: Day) -> DayResult | None:
        try:
            result = day.run()
        except Exception as exc:
            with lock:
                print(exc, file=err, flush=True)
            return None
        with lock:
            print(result, file=out, flush=True)
        return result

    with ThreadPoolExecutor(max_workers=max(1, len(days))) as pool:
        return list(pool.map(run_one, days))