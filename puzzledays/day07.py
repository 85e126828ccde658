"""Day 7: calibration equations completed with +, * and concatenation."""

from __future__ import annotations

from typing import Sequence

from .day import Day, Part
from .inputs import parse_number_rows


def _concat(total: int, number: int) -> int:
    digits = len(str(number)) if number > 0 else 0
    return total * 10**digits + number


def _reachable(target: int, total: int, remaining: Sequence[int], allow_concat: bool) -> bool:
    if not remaining:
        return total == target
    number, rest = remaining[0], remaining[1:]
    candidates = [total + number, total * number]
    if allow_concat:
        candidates.append(_concat(total, number))
    return any(
        candidate <= target and _reachable(target, candidate, rest, allow_concat) for candidate in candidates
    )


def valid_equation(target: int, numbers: Sequence[int], allow_concat: bool) -> bool:
    """Whether operators placed left to right between ``numbers`` can produce ``target``."""
    if not numbers:
        raise ValueError("an equation needs at least one number")
    return _reachable(target, numbers[0], tuple(numbers[1:]), allow_concat)


class Day7(Day):
    number = 7

    def initialize(self, text: str) -> None:
        self._equations = parse_number_rows(text)
        for row in self._equations:
            if len(row) < 2:
                raise ValueError(f"incomplete equation: {row}")

    def solve(self, part: Part) -> str:
        allow_concat = part is Part.TWO
        return str(
            sum(row[0] for row in self._equations if valid_equation(row[0], row[1:], allow_concat))
        )