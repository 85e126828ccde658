"""Reading puzzle input files and parsing their common shapes."""

from __future__ import annotations

import re
from os import PathLike
from pathlib import Path

_UNSIGNED = re.compile(r"\d+")
_SIGNED = re.compile(r"-*\d+")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def read_input(name: str, inputs_dir: str | PathLike[str]) -> str:
    """Return the whole text of ``<inputs_dir>/<name>.txt``."""
    path = Path(inputs_dir) / f"{name}.txt"
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    with path.open(encoding="utf-8", newline="") as handle:
        return handle.read()


def parse_lines(text: str) -> list[str]:
    """Split on newlines; a final newline does not start another line."""
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def parse_int(text: str) -> int:
    """The integer at the start of ``text`` (after whitespace); the rest is ignored."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"invalid integer: {text!r}")
    return int(match.group(1))


def parse_column_pair(text: str) -> tuple[list[int], list[int]]:
    """Numbers taken alternately into a left and a right column."""
    numbers = [int(token) for token in _UNSIGNED.findall(text)]
    if len(numbers) % 2:
        raise ValueError("expected an even count of numbers")
    return numbers[0::2], numbers[1::2]


def parse_signed_rows(text: str) -> list[list[int]]:
    """The possibly negative numbers of each line."""
    return [[int(token) for token in _SIGNED.findall(line)] for line in parse_lines(text)]


def parse_digits(text: str) -> list[int]:
    """Every character as its offset from the digit zero."""
    return [ord(ch) - ord("0") for ch in text]


def parse_numbers(text: str) -> list[int]:
    """All unsigned numbers in the text, in order."""
    return [int(token) for token in _UNSIGNED.findall(text)]


def parse_number_rows(text: str) -> list[list[int]]:
    """The unsigned numbers of each line."""
    return [[int(token) for token in _UNSIGNED.findall(line)] for line in parse_lines(text)]


def parse_grid(text: str) -> list[str]:
    """Rows of characters, one per line."""
    return parse_lines(text)