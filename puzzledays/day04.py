"""Day 4: counting XMAS in a word search, and X-shaped MAS crosses."""

from __future__ import annotations

from .day import Day, Part
from .inputs import parse_grid

_ADJACENT = ((-1, -1), (-1, 0), (-1, 1), (0, -1), (0, 1), (1, -1), (1, 0), (1, 1))
_DIAGONALS = ((-1, -1), (-1, 1), (1, -1), (1, 1))


class Day4(Day):
    number = 4

    def initialize(self, text: str) -> None:
        self._grid = parse_grid(text)

    def _is(self, i: int, j: int, ch: str) -> bool:
        grid = self._grid
        return 0 <= i < len(grid) and 0 <= j < len(grid[0]) and grid[i][j] == ch

    def _count_xmas(self, i: int, j: int) -> int:
        return sum(
            1
            for x, y in _ADJACENT
            if self._is(i + x, j + y, "M")
            and self._is(i + 2 * x, j + 2 * y, "A")
            and self._is(i + 3 * x, j + 3 * y, "S")
        )

    def _count_crosses(self, i: int, j: int) -> int:
        total = 0
        for x, y in _DIAGONALS:
            if not (self._is(i + x, j + y, "A") and self._is(i + 2 * x, j + 2 * y, "S")):
                continue
            if self._is(i, j + 2 * y, "M"):
                if self._is(i + 2 * x, j, "S"):
                    total += 1
            elif self._is(i, j + 2 * y, "S"):
                if self._is(i + 2 * x, j, "M"):
                    total += 1
        return total

    def solve(self, part: Part) -> str:
        total = 0
        for i, row in enumerate(self._grid):
            for j, ch in enumerate(row):
                if part is Part.ONE and ch == "X":
                    total += self._count_xmas(i, j)
                elif part is Part.TWO and ch == "M":
                    total += self._count_crosses(i, j)
        if part is Part.TWO:
            # Each cross is found once from each of its two M's.
            total //= 2
        return str(total)