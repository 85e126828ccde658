"""Day 13: the cheapest button presses that win each claw machine prize."""

from __future__ import annotations

from dataclasses import dataclass

from .day import Day, Part
from .inputs import parse_numbers

PRIZE_OFFSET = 10_000_000_000_000


@dataclass(frozen=True)
class ClawMachine:
    """The moves of buttons A and B and where the prize lies."""

    a: tuple[int, int]
    b: tuple[int, int]
    prize: tuple[int, int]


def _cost(machine: ClawMachine, offset: int) -> int:
    """Tokens for the single exact solution, or 0 when none is whole."""
    ax, ay = machine.a
    bx, by = machine.b
    px, py = (coordinate + offset for coordinate in machine.prize)
    determinant = ax * by - bx * ay
    if determinant == 0:
        raise ValueError(f"buttons move in the same direction: {machine}")
    dx = px * by - bx * py
    dy = ax * py - px * ay
    if dx % determinant or dy % determinant:
        return 0
    return 3 * (dx // determinant) + dy // determinant


class Day13(Day):
    number = 13

    def initialize(self, text: str) -> None:
        numbers = parse_numbers(text)
        if len(numbers) % 6:
            raise ValueError("each machine needs six numbers")
        self.machines = [
            ClawMachine((ax, ay), (bx, by), (px, py))
            for ax, ay, bx, by, px, py in zip(*[iter(numbers)] * 6)
        ]

    def solve(self, part: Part) -> str:
        offset = PRIZE_OFFSET if part is Part.TWO else 0
        return str(sum(_cost(machine, offset) for machine in self.machines))