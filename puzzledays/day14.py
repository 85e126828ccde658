"""Day 14: robots wrapping around a grid, and the moment a picture appears."""

from __future__ import annotations

from dataclasses import dataclass

from .day import Day, Part
from .geometry import Position
from .inputs import parse_signed_rows

GRID = Position(101, 103)
ELAPSED = Position(100, 100)
# The picture shows up as a dense block of robots inside this window.
_WINDOW_X = (25, 60)
_WINDOW_Y = (50, 85)
_PICTURE_THRESHOLD = 350


@dataclass(frozen=True)
class Robot:
    """Where a robot starts and how far it moves each second."""

    position: Position
    velocity: Position


def _wrap(position: Position) -> Position:
    return ((position % GRID) + GRID) % GRID


class Day14(Day):
    number = 14

    def initialize(self, text: str) -> None:
        self._robots: list[Robot] = []
        for row in parse_signed_rows(text):
            if len(row) != 4:
                raise ValueError(f"a robot needs four numbers: {row}")
            px, py, vx, vy = row
            self._robots.append(Robot(Position(px, py), Position(vx, vy)))

    def _safety_factor(self) -> int:
        mid_x = (GRID.x - 1) // 2
        mid_y = (GRID.y - 1) // 2
        quadrants = [0, 0, 0, 0]
        for robot in self._robots:
            location = _wrap(robot.position + ELAPSED * robot.velocity)
            if location.x == mid_x or location.y == mid_y:
                continue
            quadrants[(2 if location.x > mid_x else 0) + (1 if location.y > mid_y else 0)] += 1
        product = 1
        for count in quadrants:
            product *= count
        return product

    def _picture_time(self) -> int:
        positions = [(robot.position.x, robot.position.y) for robot in self._robots]
        velocities = [(robot.velocity.x, robot.velocity.y) for robot in self._robots]
        low_x, high_x = _WINDOW_X
        low_y, high_y = _WINDOW_Y
        for time in range(1, GRID.x * GRID.y + 1):
            positions = [
                ((x + vx) % GRID.x, (y + vy) % GRID.y) for (x, y), (vx, vy) in zip(positions, velocities)
            ]
            inside = {(x, y) for x, y in positions if low_x < x < high_x and low_y < y < high_y}
            if len(inside) > _PICTURE_THRESHOLD:
                return time
        return 0

    def solve(self, part: Part) -> str:
        if part is Part.ONE:
            return str(self._safety_factor())
        return str(self._picture_time())