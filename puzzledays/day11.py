"""Day 11: counting stones that split and change each blink."""

from __future__ import annotations

from functools import cache

from .day import Day, Part
from .inputs import parse_numbers


@cache
def _count(stone: int, blinks: int) -> int:
    if blinks == 0:
        return 1
    if stone == 0:
        return _count(1, blinks - 1)
    digits = str(stone)
    if len(digits) % 2 == 0:
        half = len(digits) // 2
        return _count(int(digits[:half]), blinks - 1) + _count(int(digits[half:]), blinks - 1)
    return _count(stone * 2024, blinks - 1)


def count_stones(stone: int, blinks: int) -> int:
    """How many stones one stone becomes after ``blinks`` blinks."""
    if blinks < 0:
        raise ValueError("blinks must not be negative")
    return _count(stone, blinks)


class Day11(Day):
    number = 11

    def initialize(self, text: str) -> None:
        self._stones = parse_numbers(text)

    def solve(self, part: Part) -> str:
        blinks = 25 if part is Part.ONE else 75
        return str(sum(count_stones(stone, blinks) for stone in self._stones))