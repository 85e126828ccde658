"""Day 16: the cheapest route through a reindeer maze and the tiles on best routes."""

from __future__ import annotations

from collections import deque

from .day import Day, Part
from .geometry import Direction, Position, PositionAndDirection
from .inputs import parse_grid

STEP_COST = 1
TURN_COST = 1001


class Day16(Day):
    number = 16

    def initialize(self, text: str) -> None:
        self._maze: dict[Position, str] = {}
        start: Position | None = None
        end: Position | None = None
        for y, row in enumerate(parse_grid(text)):
            for x, ch in enumerate(row):
                if ch not in ".#SE":
                    continue
                position = Position(x, y)
                self._maze.setdefault(position, ch)
                if ch == "S":
                    start = position
                elif ch == "E":
                    end = position
        if start is None or end is None:
            raise ValueError("the maze needs a start and an end")
        self._start = start
        self._end = end

    def _tile(self, position: Position) -> str:
        try:
            return self._maze[position]
        except KeyError:
            raise ValueError(f"route leaves the maze at {position}") from None

    def _scores(self) -> dict[PositionAndDirection, int]:
        origin = PositionAndDirection(self._start, Direction.RIGHT)
        scores = {origin: 0}
        queue = deque([origin])
        while queue:
            pad = queue.popleft()
            if self._tile(pad.position) == "E":
                continue
            score = scores[pad]
            for direction, cost in (
                (pad.direction, STEP_COST),
                (pad.direction.turn90(), TURN_COST),
                (pad.direction.turn270(), TURN_COST),
            ):
                following = PositionAndDirection(pad.position + direction.offset, direction)
                if self._tile(following.position) == "#":
                    continue
                candidate = score + cost
                if following not in scores or candidate < scores[following]:
                    scores[following] = candidate
                    queue.append(following)
        return scores

    def solve(self, part: Part) -> str:
        scores = self._scores()
        ending = [score for pad, score in scores.items() if pad.position == self._end]
        if not ending:
            raise ValueError("the end cannot be reached")
        lowest = min(ending)
        if part is Part.ONE:
            return str(lowest)

        finish = min(pad for pad, score in scores.items() if pad.position == self._end and score == lowest)
        tiles: set[Position] = set()
        seen = {finish}
        queue = deque([finish])
        while queue:
            pad = queue.popleft()
            tiles.add(pad.position)
            score = scores[pad]
            for step in Direction:
                for heading in Direction:
                    previous = PositionAndDirection(pad.position - step.offset, heading)
                    if previous in seen or previous not in scores:
                        continue
                    if scores[previous] in (score - STEP_COST, score - TURN_COST):
                        seen.add(previous)
                        queue.append(previous)
        return str(len(tiles))