from puzzledays.day import Part
from puzzledays.day01 import Day1

EXAMPLE = "3   4\n4   3\n2   5\n1   3\n3   9\n3   3\n"


def _solve(text, part):
    day = Day1()
    day.initialize(text)
    return day.solve(part)


def test_example_part_one():
    assert _solve(EXAMPLE, Part.ONE) == "11"


def test_example_part_two():
    assert _solve(EXAMPLE, Part.TWO) == "31"


def test_identical_columns_have_no_distance():
    assert _solve("5 5\n1 1\n9 9\n", Part.ONE) == "0"


def test_swapping_columns_keeps_distance():
    swapped = "".join(f"{b} {a}\n" for a, b in (line.split() for line in EXAMPLE.splitlines()))
    assert _solve(swapped, Part.ONE) == _solve(EXAMPLE, Part.ONE)


def test_no_common_values_scores_zero():
    assert _solve("1 2\n3 4\n", Part.TWO) == "0"