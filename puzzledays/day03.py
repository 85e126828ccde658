"""Day 3: summing mul() instructions from corrupted memory."""

from __future__ import annotations

import math
import re

from .day import Day, Part

_INSTRUCTION = re.compile(r"mul\(\d+,\d+\)|don't\(\)|do\(\)")
_NUMBER = re.compile(r"\d+")


class Day3(Day):
    number = 3

    def initialize(self, text: str) -> None:
        self._memory = text

    def solve(self, part: Part) -> str:
        total = 0
        enabled = True
        for match in _INSTRUCTION.finditer(self._memory):
            instruction = match.group()
            if instruction == "don't()":
                enabled = False
            elif instruction == "do()":
                enabled = True
            elif part is Part.ONE or enabled:
                total += math.prod(int(n) for n in _NUMBER.findall(instruction))
        return str(total)