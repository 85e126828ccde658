"""Day 1: distances and similarity between two sorted columns."""

from __future__ import annotations

from collections import Counter

from .day import Day, Part
from .inputs import parse_column_pair


class Day1(Day):
    number = 1

    def initialize(self, text: str) -> None:
        left, right = parse_column_pair(text)
        self._left = sorted(left)
        self._right = sorted(right)

    def solve(self, part: Part) -> str:
        if part is Part.ONE:
            return str(sum(abs(a - b) for a, b in zip(self._left, self._right, strict=True)))
        occurrences = Counter(self._left)
        return str(sum(occurrences[value] * value for value in self._right))