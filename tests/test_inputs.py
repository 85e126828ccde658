import pytest

from puzzledays.inputs import (
    parse_column_pair,
    parse_digits,
    parse_grid,
    parse_int,
    parse_lines,
    parse_number_rows,
    parse_numbers,
    parse_signed_rows,
    read_input,
)


def test_read_input_returns_file_text(tmp_path):
    (tmp_path / "Day3.txt").write_bytes(b"abc\r\ndef\n")
    assert read_input("Day3", tmp_path) == "abc\r\ndef\n"


def test_read_input_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError, match="File not found"):
        read_input("Day99", tmp_path)


def test_parse_lines_drops_only_final_newline():
    assert parse_lines("a\nb\n") == ["a", "b"]
    assert parse_lines("a\n\nb") == ["a", "", "b"]
    assert parse_lines("") == []


def test_parse_int():
    assert parse_int("42\n") == 42
    assert parse_int("  -17 trailing") == -17


def test_parse_int_rejects_garbage():
    with pytest.raises(ValueError):
        parse_int("abc")


def test_parse_column_pair():
    assert parse_column_pair("3   4\n4   3\n2   5\n") == ([3, 4, 2], [4, 3, 5])


def test_parse_column_pair_rejects_odd_count():
    with pytest.raises(ValueError):
        parse_column_pair("1 2 3")


def test_parse_signed_rows():
    assert parse_signed_rows("p=0,4 v=3,-3\np=6,3 v=-1,-3\n") == [[0, 4, 3, -3], [6, 3, -1, -3]]


def test_parse_digits():
    assert parse_digits("2333") == [2, 3, 3, 3]


def test_parse_numbers():
    assert parse_numbers("125 17\n") == [125, 17]
    assert parse_numbers("Register A: 729") == [729]


def test_parse_number_rows_keeps_blank_lines():
    assert parse_number_rows("190: 10 19\n\n3267: 81 40 27\n") == [[190, 10, 19], [], [3267, 81, 40, 27]]


def test_parse_grid():
    grid = parse_grid("#.#\n.S.\n")
    assert grid == ["#.#", ".S."]
    assert grid[1][1] == "S"