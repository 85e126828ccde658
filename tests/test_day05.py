import pytest

from puzzledays.day import Part
from puzzledays.day05 import Day5

RULES = (
    "47|53\n97|13\n97|61\n97|47\n75|29\n61|13\n75|53\n29|13\n97|29\n53|29\n61|53\n"
    "97|53\n61|29\n47|13\n75|47\n97|75\n47|61\n75|61\n47|29\n75|13\n53|13\n"
)
UPDATES = (
    "75,47,61,53,29\n97,61,53,29,13\n75,29,13\n75,97,47,61,53\n61,13,29\n97,13,75,29,47\n"
)
EXAMPLE = RULES + "\n" + UPDATES


def _solve(text, part):
    day = Day5()
    day.initialize(text)
    return day.solve(part)


def test_example_part_one():
    assert _solve(EXAMPLE, Part.ONE) == "143"


def test_example_part_two():
    assert _solve(EXAMPLE, Part.TWO) == "123"


def test_only_ordered_updates_count_in_part_one():
    assert _solve(RULES + "\n75,97,47,61,53\n", Part.ONE) == "0"


def test_fixing_picks_middle_of_sorted_update():
    # 97 must precede 75, so the fixed update is 97,75,47,61,53 with 47 in the middle.
    assert _solve(RULES + "\n75,97,47,61,53\n", Part.TWO) == "47"


def test_ordered_updates_contribute_nothing_to_part_two():
    assert _solve(RULES + "\n75,47,61,53,29\n", Part.TWO) == "0"


def test_missing_separator_raises():
    with pytest.raises(ValueError):
        Day5().initialize("47|53\n75,47\n")


def test_odd_rule_raises():
    with pytest.raises(ValueError):
        Day5().initialize("47|53|61\n\n47,53\n")