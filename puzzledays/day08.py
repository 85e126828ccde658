"""Day 8: antinodes of antennas sharing a frequency."""

from __future__ import annotations

from collections import defaultdict
from itertools import combinations
from typing import Iterator

from .day import Day, Part
from .geometry import Position
from .inputs import parse_grid


class Day8(Day):
    number = 8

    def initialize(self, text: str) -> None:
        grid = parse_grid(text)
        if not grid:
            raise ValueError("empty map")
        self._height = len(grid)
        self._width = len(grid[0])
        antennas: defaultdict[str, list[Position]] = defaultdict(list)
        for y, row in enumerate(grid):
            for x, ch in enumerate(row):
                if ch != ".":
                    antennas[ch].append(Position(x, y))
        self._antennas = dict(antennas)

    def _in_bounds(self, position: Position) -> bool:
        return 0 <= position.x < self._width and 0 <= position.y < self._height

    def _ray(self, origin: Position, step: Position, repeat: bool) -> Iterator[Position]:
        node = origin + step
        while self._in_bounds(node):
            yield node
            if not repeat:
                return
            node = node + step

    def solve(self, part: Part) -> str:
        repeat = part is Part.TWO
        nodes: set[Position] = set()
        for positions in self._antennas.values():
            if repeat and len(positions) > 1:
                nodes.update(positions)
            for first, second in combinations(positions, 2):
                difference = first - second
                nodes.update(self._ray(first, difference, repeat))
                nodes.update(self._ray(second, Position(0, 0) - difference, repeat))
        return str(len(nodes))