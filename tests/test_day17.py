import pytest

from puzzledays.day import Part
from puzzledays.day17 import Computer, Day17

ECHO = [2, 4, 1, 1, 0, 3, 5, 5, 3, 0]


def program_text(a, program):
    return f"Register A: {a}\nRegister B: 0\nRegister C: 0\n\nProgram: {','.join(map(str, program))}\n"


def make_day(a, program):
    day = Day17()
    day.initialize(program_text(a, program))
    return day


def test_worked_example_output():
    assert make_day(729, [0, 1, 5, 4, 3, 0]).solve(Part.ONE) == "4,6,3,5,6,3,5,2,1,0,"


def test_self_reproducing_value_prints_program():
    register = make_day(0, ECHO).solve(Part.TWO)
    printed = make_day(int(register), ECHO).solve(Part.ONE)
    assert printed == "".join(f"{value}," for value in ECHO)


def test_no_self_reproducing_value_rejected():
    with pytest.raises(ValueError):
        make_day(2024, [0, 3, 5, 4, 3, 0]).solve(Part.TWO)


def test_bst_takes_combo_modulo_eight():
    computer = Computer(c=9)
    computer.step(2, 6)
    assert computer.b == 1


def test_bxl_xors_literal():
    computer = Computer(b=29)
    computer.step(1, 7)
    assert computer.b == 26
    computer.step(1, 7)
    assert computer.b == 29


def test_bxc_xors_registers():
    computer = Computer(b=2024, c=43690)
    computer.step(4, 0)
    assert computer.b == 44354


def test_combo_operands():
    computer = Computer(a=11, b=12, c=13)
    assert [computer.combo(operand) for operand in range(7)] == [0, 1, 2, 3, 11, 12, 13]


def test_combo_seven_is_invalid():
    with pytest.raises(ValueError):
        Computer().combo(7)


def test_unknown_opcode_is_invalid():
    with pytest.raises(ValueError):
        Computer().step(8, 0)


def test_jump_only_when_a_is_nonzero():
    idle = Computer(a=0)
    idle.step(3, 4)
    assert idle.pointer == 0
    busy = Computer(a=5)
    busy.step(3, 4)
    assert busy.pointer == 4


def test_adv_and_bdv_divide_alike():
    first = Computer(a=40)
    first.step(0, 2)
    second = Computer(a=40)
    second.step(6, 2)
    third = Computer(a=40)
    third.step(7, 2)
    assert first.a == second.b == third.c


def test_out_appends_to_output():
    computer = Computer(b=13)
    computer.step(5, 5)
    computer.step(5, 3)
    assert computer.output == [13 % 8, 3]


def test_missing_registers_rejected():
    with pytest.raises(ValueError):
        Day17().initialize("Register A: 1\n")