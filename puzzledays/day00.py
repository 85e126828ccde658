"""Day 0: echo the single number in the input."""

from __future__ import annotations

from .day import Day, Part
from .inputs import parse_int


class Day0(Day):
    number = 0

    def initialize(self, text: str) -> None:
        self._value = parse_int(text)

    def solve(self, part: Part) -> str:
        return str(self._value)