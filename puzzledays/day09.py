"""Day 9: compacting a disk map block by block, then file by file."""

from __future__ import annotations

import re

from .day import Day, Part
from .inputs import parse_digits

FREE = -1
_DIGITS = re.compile(r"[0-9]*")

Segment = tuple[int, int]


def _expand(segments: list[Segment]) -> list[int]:
    return [file_id for file_id, length in segments for _ in range(length)]


def _checksum(blocks: list[int]) -> int:
    return sum(index * file_id for index, file_id in enumerate(blocks) if file_id > 0)


def _compact_blocks(segments: list[Segment]) -> list[int]:
    """Move single blocks from the end into the leftmost free block."""
    layout = _expand(segments)
    free = 0
    for index in range(len(layout) - 1, -1, -1):
        while free < len(layout) and layout[free] != FREE:
            free += 1
        if free < index:
            layout[index], layout[free] = layout[free], layout[index]
    return layout


def _compact_files(segments: list[Segment]) -> list[int]:
    """Move whole files, right to left, into the leftmost free span that fits."""
    parts = list(segments)
    index = len(parts) - 1
    while index >= 0:
        file_id, length = parts[index]
        if length and file_id != FREE:
            target = next(
                (k for k in range(index) if parts[k][0] == FREE and parts[k][1] >= length),
                None,
            )
            if target is not None:
                space = parts[target][1]
                parts[target] = (file_id, length)
                parts[index] = (FREE, length)
                if space > length:
                    parts.insert(target + 1, (FREE, space - length))
                    index += 1
        index -= 1
    return _expand(parts)


class Day9(Day):
    number = 9

    def initialize(self, text: str) -> None:
        disk_map = text.rstrip("\r\n")
        if not _DIGITS.fullmatch(disk_map):
            raise ValueError("disk map must hold only digits")
        self._sizes = parse_digits(disk_map)

    def _segments(self) -> list[Segment]:
        return [
            (index // 2 if index % 2 == 0 else FREE, size) for index, size in enumerate(self._sizes)
        ]

    def solve(self, part: Part) -> str:
        segments = self._segments()
        blocks = _compact_blocks(segments) if part is Part.ONE else _compact_files(segments)
        return str(_checksum(blocks))