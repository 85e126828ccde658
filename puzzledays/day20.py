"""Day 20: cheats that cut through the walls of a single-track race."""

from __future__ import annotations

from collections import deque
from os import PathLike

from .day import DEFAULT_INPUTS_DIR, Day, Part
from .geometry import Direction, Position
from .inputs import parse_grid


class Day20(Day):
    number = 20

    def __init__(
        self,
        inputs_dir: str | PathLike[str] = DEFAULT_INPUTS_DIR,
        *,
        min_saving: int = 100,
    ) -> None:
        super().__init__(inputs_dir)
        self._min_saving = min_saving

    def initialize(self, text: str) -> None:
        self._walls: dict[Position, bool] = {}
        start: Position | None = None
        end: Position | None = None
        for y, row in enumerate(parse_grid(text)):
            for x, ch in enumerate(row):
                if ch not in ".#SE":
                    continue
                position = Position(x, y)
                self._walls[position] = ch == "#"
                if ch == "S":
                    start = position
                elif ch == "E":
                    end = position
        if start is None or end is None:
            raise ValueError("the race track needs a start and an end")
        self._start = start
        self._end = end

    def solve_maze(self) -> list[Position]:
        """Track positions in the order a breadth-first walk from the start finds them."""
        path = [self._start]
        visited = {self._start}
        queue = deque([self._start])
        while queue:
            current = queue.popleft()
            if current == self._end:
                break
            for direction in Direction:
                following = current + direction.offset
                if following in visited or self._walls.get(following, True):
                    continue
                visited.add(following)
                path.append(following)
                queue.append(following)
        return path

    def solve(self, part: Part) -> str:
        coords = [(position.x, position.y) for position in self.solve_maze()]
        longest = 2 if part is Part.ONE else 20
        min_saving = self._min_saving
        # A cheat of length >= 2 saving >= min_saving needs j - i >= min_saving + 2.
        gap = max(3, min_saving + 2)
        total = 0
        for i, (sx, sy) in enumerate(coords):
            for j in range(i + gap, len(coords)):
                ex, ey = coords[j]
                length = abs(sx - ex) + abs(sy - ey)
                if 2 <= length <= longest and j - i - length >= min_saving:
                    total += 1
        return str(total)