"""Day 18: escaping a memory grid as bytes fall, and the byte that seals it."""

from __future__ import annotations

from collections import deque
from os import PathLike

from .day import DEFAULT_INPUTS_DIR, Day, Part
from .geometry import Direction, Position
from .inputs import parse_signed_rows


class Day18(Day):
    number = 18

    def __init__(
        self,
        inputs_dir: str | PathLike[str] = DEFAULT_INPUTS_DIR,
        *,
        size: int = 70,
        fallen: int = 1024,
    ) -> None:
        super().__init__(inputs_dir)
        self._exit = Position(size, size)
        self._fallen = fallen

    def initialize(self, text: str) -> None:
        self._bytes: list[Position] = []
        for row in parse_signed_rows(text):
            if len(row) < 2:
                raise ValueError(f"a byte needs two coordinates: {row}")
            self._bytes.append(Position(row[0], row[1]))

    def _in_bounds(self, position: Position) -> bool:
        return 0 <= position.x <= self._exit.x and 0 <= position.y <= self._exit.y

    def _shortest(self, corrupted: set[Position]) -> int | None:
        """Steps from the origin to the exit avoiding ``corrupted``, or None."""
        origin = Position(0, 0)
        steps = {origin: 0}
        queue = deque([origin])
        while queue:
            current = queue.popleft()
            if current == self._exit:
                continue
            for direction in Direction:
                following = current + direction.offset
                if not self._in_bounds(following) or following in corrupted or following in steps:
                    continue
                steps[following] = steps[current] + 1
                queue.append(following)
        return steps.get(self._exit)

    def solve(self, part: Part) -> str:
        if len(self._bytes) < self._fallen:
            raise ValueError(f"expected at least {self._fallen} bytes")
        time = self._fallen
        lower = 0
        upper = len(self._bytes)
        while True:
            steps = self._shortest(set(self._bytes[:time]))
            if part is Part.ONE:
                return str(steps if steps is not None else 0)
            if steps is None:
                upper = time
            else:
                if lower == time:
                    if time >= len(self._bytes):
                        raise ValueError("no byte blocks the exit")
                    blocker = self._bytes[time]
                    return f"{blocker.x},{blocker.y}"
                lower = time
            time = (upper + lower) // 2