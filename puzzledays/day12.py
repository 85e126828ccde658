"""Day 12: fencing garden regions by perimeter and by number of sides."""

from __future__ import annotations

from collections import deque

from .day import Day, Part
from .geometry import Direction, Position
from .inputs import parse_grid

_CORNER_PAIRS = (
    (Direction.UP, Direction.RIGHT),
    (Direction.RIGHT, Direction.DOWN),
    (Direction.DOWN, Direction.LEFT),
    (Direction.LEFT, Direction.UP),
)


def _regions(plants: dict[Position, str]) -> list[set[Position]]:
    seen: set[Position] = set()
    regions: list[set[Position]] = []
    for start in plants:
        if start in seen:
            continue
        plant = plants[start]
        region: set[Position] = set()
        queue = deque([start])
        seen.add(start)
        while queue:
            position = queue.popleft()
            region.add(position)
            for direction in Direction:
                neighbour = position + direction.offset
                if neighbour not in seen and plants.get(neighbour) == plant:
                    seen.add(neighbour)
                    queue.append(neighbour)
        regions.append(region)
    return regions


def _corners(position: Position, adjacent: set[Direction], plants: dict[Position, str]) -> int:
    """Corners of the region's outline at this plot; a region has as many sides as corners."""
    if not adjacent:
        return 4
    if len(adjacent) == 1:
        return 2
    corners = 0
    straight = {Direction.UP, Direction.DOWN} <= adjacent or {Direction.LEFT, Direction.RIGHT} <= adjacent
    if len(adjacent) == 2 and not straight:
        corners += 1
    for first, second in _CORNER_PAIRS:
        if first in adjacent and second in adjacent:
            diagonal = position + first.offset + second.offset
            if plants[diagonal] != plants[position]:
                corners += 1
    return corners


class Day12(Day):
    number = 12

    def initialize(self, text: str) -> None:
        self._grid = parse_grid(text)

    def solve(self, part: Part) -> str:
        plants = {
            Position(x, y): ch for y, row in enumerate(self._grid) for x, ch in enumerate(row)
        }
        adjacency = {
            position: {d for d in Direction if plants.get(position + d.offset) == plant}
            for position, plant in plants.items()
        }
        total = 0
        for region in _regions(plants):
            if part is Part.ONE:
                fences = sum(4 - len(adjacency[position]) for position in region)
            else:
                fences = sum(_corners(position, adjacency[position], plants) for position in region)
            total += len(region) * fences
        return str(total)