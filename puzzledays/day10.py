"""Day 10: hiking trails climbing from height 0 to height 9."""

from __future__ import annotations

from .day import Day, Part
from .geometry import Direction, Position
from .inputs import parse_grid


class Day10(Day):
    number = 10

    def initialize(self, text: str) -> None:
        grid = parse_grid(text)
        self._heights = {
            Position(x, y): ord(ch) - ord("0") for y, row in enumerate(grid) for x, ch in enumerate(row)
        }
        self._trailheads = [
            Position(x, y) for y, row in enumerate(grid) for x, ch in enumerate(row) if ch == "0"
        ]

    def check_trail(self, position: Position, peaks: set[Position]) -> int:
        """Count the trails from ``position`` to a peak, adding reached peaks to ``peaks``."""
        height = self._heights[position]
        if height == 9:
            peaks.add(position)
            return 1
        total = 0
        for direction in Direction:
            following = position + direction.offset
            if self._heights.get(following) == height + 1:
                total += self.check_trail(following, peaks)
        return total

    def solve(self, part: Part) -> str:
        total = 0
        for trailhead in self._trailheads:
            peaks: set[Position] = set()
            rating = self.check_trail(trailhead, peaks)
            total += len(peaks) if part is Part.ONE else rating
        return str(total)