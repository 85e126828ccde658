"""Day 15: a robot pushing boxes around a warehouse, narrow and wide."""

from __future__ import annotations

from enum import Enum

from .day import Day, Part
from .geometry import Direction, Position
from .inputs import parse_lines


class Tile(Enum):
    SPACE = 0
    ROBOT = 1
    BOX = 2
    WALL = 3
    LEFT_BOX = 4
    RIGHT_BOX = 5


_NARROW = {".": Tile.SPACE, "#": Tile.WALL, "@": Tile.ROBOT, "O": Tile.BOX}
_WIDE = {
    ".": (Tile.SPACE, Tile.SPACE),
    "#": (Tile.WALL, Tile.WALL),
    "@": (Tile.ROBOT, Tile.SPACE),
    "O": (Tile.LEFT_BOX, Tile.RIGHT_BOX),
}
_MOVES = {">": Direction.RIGHT, "^": Direction.UP, "<": Direction.LEFT, "v": Direction.DOWN}
_VERTICAL = (Direction.UP, Direction.DOWN)
_HALVES = (Tile.LEFT_BOX, Tile.RIGHT_BOX)

Warehouse = dict[Position, Tile]


def _tile(warehouse: Warehouse, position: Position) -> Tile:
    return warehouse.get(position, Tile.SPACE)


def _partner(position: Position, tile: Tile) -> Position:
    """The other half of a wide box."""
    step = Direction.RIGHT if tile is Tile.LEFT_BOX else Direction.LEFT
    return position + step.offset


def _can_move(warehouse: Warehouse, position: Position, direction: Direction) -> bool:
    following = position + direction.offset
    tile = _tile(warehouse, following)
    if tile is Tile.WALL:
        return False
    if tile is Tile.BOX:
        return _can_move(warehouse, following, direction)
    if tile in _HALVES:
        if direction in _VERTICAL:
            return _can_move(warehouse, _partner(following, tile), direction) and _can_move(
                warehouse, following, direction
            )
        return _can_move(warehouse, following + direction.offset, direction)
    if tile is Tile.SPACE:
        return True
    raise RuntimeError("Invalid flow!")


def _move(warehouse: Warehouse, position: Position, direction: Direction) -> None:
    if not _can_move(warehouse, position, direction):
        return
    following = position + direction.offset
    if _tile(warehouse, following) is Tile.WALL:
        return
    if _tile(warehouse, following) is Tile.BOX:
        _move(warehouse, following, direction)
    tile = _tile(warehouse, following)
    if tile in _HALVES:
        if direction in _VERTICAL:
            partner = _partner(following, tile)
            _move(warehouse, partner, direction)
            if _tile(warehouse, partner) is not Tile.SPACE:
                return
            _move(warehouse, following, direction)
        else:
            beyond = following + direction.offset
            _move(warehouse, beyond, direction)
            if _tile(warehouse, beyond) is Tile.SPACE:
                warehouse[beyond] = _tile(warehouse, following)
                warehouse[following] = Tile.SPACE
    if _tile(warehouse, following) is Tile.SPACE:
        warehouse[following] = _tile(warehouse, position)
        warehouse[position] = Tile.SPACE


class Day15(Day):
    number = 15

    def initialize(self, text: str) -> None:
        self._lines = parse_lines(text)

    def _layout(self, wide: bool) -> tuple[Warehouse, list[Direction]]:
        warehouse: Warehouse = {}
        instructions: list[Direction] = []
        after_break = False
        for y, line in enumerate(self._lines):
            if not line:
                after_break = True
            if after_break:
                instructions.extend(_MOVES[ch] for ch in line if ch in _MOVES)
                continue
            x = -1
            for ch in line:
                x += 1
                if wide and ch in _WIDE:
                    first, second = _WIDE[ch]
                    warehouse.setdefault(Position(x, y), first)
                    x += 1
                    warehouse.setdefault(Position(x, y), second)
                elif not wide and ch in _NARROW:
                    warehouse.setdefault(Position(x, y), _NARROW[ch])
        return warehouse, instructions

    def solve(self, part: Part) -> str:
        warehouse, instructions = self._layout(part is Part.TWO)
        robots = {position for position, tile in warehouse.items() if tile is Tile.ROBOT}
        for direction in instructions:
            if not robots:
                raise ValueError("no robot in the warehouse")
            robot = min(robots)
            _move(warehouse, robot, direction)
            if warehouse.get(robot) is not Tile.ROBOT:
                robots.remove(robot)
                robots.add(robot + direction.offset)
        return str(
            sum(
                100 * position.y + position.x
                for position, tile in warehouse.items()
                if tile in (Tile.BOX, Tile.LEFT_BOX)
            )
        )