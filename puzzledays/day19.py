"""Day 19: arranging towels to match display patterns."""

from __future__ import annotations

import re
from functools import cache

from .day import Day, Part
from .inputs import parse_lines

_TOWEL = re.compile(r"[a-z]+")


class Day19(Day):
    number = 19

    def initialize(self, text: str) -> None:
        self._towels: list[str] = []
        self._patterns: list[str] = []
        after_break = False
        for line in parse_lines(text):
            if not line:
                after_break = True
            elif after_break:
                self._patterns.append(line)
            else:
                self._towels.extend(_TOWEL.findall(line))

    def _counter(self, first_only: bool):
        towels = tuple(self._towels)

        @cache
        def count(rest: str) -> int:
            if not rest:
                return 1
            total = 0
            for towel in towels:
                if rest.startswith(towel):
                    total += count(rest[len(towel):])
                    if first_only and total:
                        break
            return total

        return count

    def solve(self, part: Part) -> str:
        # Part one stops at the first arrangement, so each pattern scores 0 or 1.
        count = self._counter(first_only=part is Part.ONE)
        return str(sum(count(pattern) for pattern in self._patterns))