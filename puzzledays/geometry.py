"""Grid positions, compass directions and their combination."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from functools import total_ordering


def _truncated_mod(value: int, modulus: int) -> int:
    """Remainder whose sign follows the dividend, as with truncating division."""
    remainder = abs(value) % abs(modulus)
    return -remainder if value < 0 else remainder


@total_ordering
@dataclass(frozen=True)
class Position:
    """A point on an integer grid; ordered row by row (y first, then x)."""

    x: int
    y: int

    def __add__(self, other: Position) -> Position:
        return Position(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Position) -> Position:
        return Position(self.x - other.x, self.y - other.y)

    def __mul__(self, other: Position) -> Position:
        return Position(self.x * other.x, self.y * other.y)

    def __mod__(self, other: Position) -> Position:
        return Position(_truncated_mod(self.x, other.x), _truncated_mod(self.y, other.y))

    def __lt__(self, other: Position) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return (self.y, self.x) < (other.y, other.x)


class Direction(IntEnum):
    """The four grid directions, numbered clockwise from UP."""

    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    @property
    def offset(self) -> Position:
        """The unit step taken when moving in this direction (y grows downwards)."""
        return _OFFSETS[self.value]

    def turn90(self) -> Direction:
        return Direction((self.value + 1) % 4)

    def turn180(self) -> Direction:
        return Direction((self.value + 2) % 4)

    def turn270(self) -> Direction:
        return Direction((self.value + 3) % 4)

    @classmethod
    def from_offset(cls, offset: Position) -> Direction:
        """The direction whose unit step is ``offset``."""
        try:
            return _BY_OFFSET[offset]
        except KeyError:
            raise ValueError(f"not a unit direction: {offset}") from None


_OFFSETS = (Position(0, -1), Position(1, 0), Position(0, 1), Position(-1, 0))
_BY_OFFSET = {offset: Direction(index) for index, offset in enumerate(_OFFSETS)}


@total_ordering
@dataclass(frozen=True)
class PositionAndDirection:
    """A position paired with a heading; ordered by position, then direction."""

    position: Position
    direction: Direction

    def __lt__(self, other: PositionAndDirection) -> bool:
        if not isinstance(other, PositionAndDirection):
            return NotImplemented
        return (self.position, self.direction) < (other.position, other.direction)