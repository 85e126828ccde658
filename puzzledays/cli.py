"""Command line entry point: solve every day concurrently."""

from __future__ import annotations

import argparse
from os import PathLike

from .day import DEFAULT_INPUTS_DIR, Day, run_days
from .day00 import Day0
from .day01 import Day1
from .day02 import Day2
from .day03 import Day3
from .day04 import Day4
from .day05 import Day5
from .day06 import Day6
from .day07 import Day7
from .day08 import Day8
from .day09 import Day9
from .day10 import Day10
from .day11 import Day11
from .day12 import Day12
from .day13 import Day13
from .day14 import Day14
from .day15 import Day15
from .day16 import Day16
from .day17 import Day17
from .day18 import Day18
from .day19 import Day19
from .day20 import Day20

_DAYS: tuple[type[Day], ...] = (
    Day0, Day1, Day2, Day3, Day4, Day5, Day6, Day7, Day8, Day9, Day10,
    Day11, Day12, Day13, Day14, Day15, Day16, Day17, Day18, Day19, Day20,
)


def all_days(inputs_dir: str | PathLike[str] = DEFAULT_INPUTS_DIR) -> list[Day]:
    """One instance of every day, in order, reading from ``inputs_dir``."""
    return [day_class(inputs_dir) for day_class in _DAYS]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="puzzledays", description="Solve every puzzle day.")
    parser.add_argument(
        "--inputs",
        default=str(DEFAULT_INPUTS_DIR),
        help="directory holding the DayN.txt input files",
    )
    args = parser.parse_args(argv)
    run_days(all_days(args.inputs))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())