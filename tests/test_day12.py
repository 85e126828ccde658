import pytest

from puzzledays.day import Part
from puzzledays.day12 import Day12

SMALL = """\
AAAA
BBCD
BBCC
EEEC
"""

E_SHAPE = """\
EEEEE
EXXXX
EEEEE
EXXXX
EEEEE
"""

AB = """\
AAAAAA
AAABBA
AAABBA
ABBAAA
ABBAAA
AAAAAA
"""


def _day(text):
    day = Day12()
    day.initialize(text)
    return day


def _mirror_rows(text):
    return "\n".join(row[::-1] for row in text.splitlines())


def _transpose(text):
    return "\n".join("".join(column) for column in zip(*text.splitlines()))


def test_small_example_part_one():
    assert _day(SMALL).solve(Part.ONE) == "140"


def test_small_example_part_two():
    assert _day(SMALL).solve(Part.TWO) == "80"


def test_e_shape_part_two():
    assert _day(E_SHAPE).solve(Part.TWO) == "236"


@pytest.mark.parametrize("text", [SMALL, E_SHAPE, AB])
def test_sides_never_exceed_perimeter(text):
    day = _day(text)
    assert int(day.solve(Part.TWO)) <= int(day.solve(Part.ONE))


@pytest.mark.parametrize("transform", [_mirror_rows, _transpose])
def test_symmetry(transform):
    original = _day(AB)
    changed = _day(transform(AB))
    assert changed.solve(Part.ONE) == original.solve(Part.ONE)
    assert changed.solve(Part.TWO) == original.solve(Part.TWO)


def test_single_plot_regions_have_four_sides():
    day = _day("ABAB\nBABA\nABAB\n")
    assert day.solve(Part.ONE) == day.solve(Part.TWO)