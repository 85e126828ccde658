"""Day 6: a guard patrolling a lab, and obstructions that trap it in a loop."""

from __future__ import annotations

from .day import Day, Part
from .geometry import Direction, Position
from .inputs import parse_grid


class Day6(Day):
    number = 6

    def initialize(self, text: str) -> None:
        grid = parse_grid(text)
        self._size = len(grid)
        self._walls: set[Position] = set()
        start: Position | None = None
        for i, row in enumerate(grid):
            for j, ch in enumerate(row):
                if ch == "#":
                    self._walls.add(Position(i, j))
                elif ch == "^":
                    start = Position(i, j)
        if start is None:
            raise ValueError("no guard on the map")
        self._start = start

    def _in_bounds(self, position: Position) -> bool:
        return 0 <= position.x < self._size and 0 <= position.y < self._size

    def _patrol(self) -> set[Position]:
        """Every position the guard visits before leaving the map."""
        visited: set[Position] = set()
        direction = Direction.UP
        current = self._start
        while self._in_bounds(current):
            if current in self._walls:
                # Step back off the wall and turn right.
                current = current - direction.offset
                direction = direction.turn90()
            else:
                visited.add(current)
            current = current + direction.offset
        return visited

    def _loops(self, obstruction: Position, limit: int) -> bool:
        """Whether the guard walks more than ``limit`` steps with ``obstruction`` added."""
        direction = Direction.UP
        current = self._start
        walked = 0
        while self._in_bounds(current):
            if walked > limit:
                return True
            if current in self._walls or current == obstruction:
                current = current - direction.offset
                direction = direction.turn90()
            else:
                walked += 1
            current = current + direction.offset
        return False

    def solve(self, part: Part) -> str:
        visited = self._patrol()
        if part is Part.ONE:
            return str(len(visited))
        # A walk twice as long as the original patrol is taken to be a loop.
        limit = 2 * len(visited)
        candidates = visited - {self._start}
        return str(sum(1 for obstruction in candidates if self._loops(obstruction, limit)))