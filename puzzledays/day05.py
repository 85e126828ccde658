"""Day 5: page ordering rules and the middle pages of updates."""

from __future__ import annotations

import re
from functools import cmp_to_key

from .day import Day, Part
from .inputs import parse_lines

_NUMBER = re.compile(r"\d+")


class Day5(Day):
    number = 5

    def initialize(self, text: str) -> None:
        rules_text, separator, manuals_text = text.partition("\n\n")
        if not separator:
            raise ValueError("expected a blank line between rules and updates")
        self._rules: list[tuple[int, int]] = []
        for line in parse_lines(rules_text):
            numbers = [int(n) for n in _NUMBER.findall(line)]
            if len(numbers) % 2:
                raise ValueError(f"incomplete ordering rule: {line!r}")
            self._rules.extend(zip(numbers[0::2], numbers[1::2]))
        self._manuals = [[int(n) for n in _NUMBER.findall(line)] for line in parse_lines(manuals_text)]

    def _is_ordered(self, manual: list[int]) -> bool:
        first_index: dict[int, int] = {}
        for index, page in enumerate(manual):
            first_index.setdefault(page, index)
        return not any(
            first in first_index and second in first_index and first_index[first] > first_index[second]
            for first, second in self._rules
        )

    def solve(self, part: Part) -> str:
        if part is Part.ONE:
            return str(
                sum(manual[(len(manual) - 1) // 2] for manual in self._manuals if self._is_ordered(manual))
            )

        rules = set(self._rules)

        def compare(a: int, b: int) -> int:
            if (a, b) in rules:
                return -1
            if (b, a) in rules:
                return 1
            return 0

        total = 0
        for manual in self._manuals:
            if not self._is_ordered(manual):
                fixed = sorted(manual, key=cmp_to_key(compare))
                total += fixed[(len(fixed) - 1) // 2]
        return str(total)