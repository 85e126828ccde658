"""Day 2: safe reports, with and without one level removed."""

from __future__ import annotations

from typing import Sequence

from .day import Day, Part
from .inputs import parse_signed_rows


def is_report_safe(report: Sequence[int]) -> bool:
    """Strictly monotonic, with every step between 1 and 3 in size."""
    if not report:
        raise ValueError("empty report")
    steps = list(zip(report, report[1:]))
    gentle = all(1 <= abs(a - b) <= 3 for a, b in steps)
    return gentle and (all(a < b for a, b in steps) or all(a > b for a, b in steps))


class Day2(Day):
    number = 2

    def initialize(self, text: str) -> None:
        self._reports = parse_signed_rows(text)

    def solve(self, part: Part) -> str:
        safe = 0
        for report in self._reports:
            if is_report_safe(report):
                safe += 1
            elif part is Part.TWO and any(
                is_report_safe(report[:index] + report[index + 1 :]) for index in range(len(report))
            ):
                safe += 1
        return str(safe)