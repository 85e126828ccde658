import pytest

from puzzledays.day import Part
from puzzledays.day15 import Day15

ROW = "#####\n#@O.#\n#####\n"
ROOM = "#######\n#.....#\n#..O..#\n#..@..#\n#######\n"


def score(layout, moves, part):
    day = Day15()
    day.initialize(f"{layout}\n{moves}\n")
    return int(day.solve(part))


def test_pushing_box_right_moves_it_one_column():
    assert score(ROW, ">", Part.ONE) == score(ROW, "", Part.ONE) + 1


def test_box_against_wall_does_not_move():
    assert score(ROW, ">>>", Part.ONE) == score(ROW, ">", Part.ONE)


def test_pushing_box_up_moves_it_one_row():
    assert score(ROOM, "^", Part.ONE) == score(ROOM, "", Part.ONE) - 100


def test_wide_box_pushed_right_until_wall():
    base = score(ROW, "", Part.TWO)
    assert score(ROW, ">", Part.TWO) == base
    assert score(ROW, ">>", Part.TWO) == base + 1
    assert score(ROW, ">>>", Part.TWO) == base + 2
    assert score(ROW, ">>>>", Part.TWO) == base + 2


def test_wide_box_pushed_up_by_left_half():
    base = score(ROOM, "", Part.TWO)
    assert score(ROOM, "^", Part.TWO) == base - 100
    assert score(ROOM, "^^", Part.TWO) == base - 100


def test_wide_box_pushed_up_by_right_half():
    assert score(ROOM, ">^", Part.TWO) == score(ROOM, "", Part.TWO) - 100


def test_unknown_instruction_characters_are_ignored():
    assert score(ROW, ">x", Part.ONE) == score(ROW, ">", Part.ONE)


def test_robot_running_into_robot_is_an_error():
    with pytest.raises(RuntimeError):
        score("#####\n#@@.#\n#####\n", ">", Part.ONE)


def test_moves_without_robot_rejected():
    with pytest.raises(ValueError):
        score("#####\n#.O.#\n#####\n", ">", Part.ONE)