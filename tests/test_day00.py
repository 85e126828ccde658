import pytest

from puzzledays.day import Part
from puzzledays.day00 import Day0


def test_both_parts_echo_the_number():
    day = Day0()
    day.initialize("1234\n")
    assert day.solve(Part.ONE) == "1234"
    assert day.solve(Part.TWO) == "1234"


def test_rejects_non_number():
    with pytest.raises(ValueError):
        Day0().initialize("hello")


def test_name():
    assert Day0().name() == "Day0"