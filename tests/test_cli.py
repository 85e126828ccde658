from pathlib import Path

from puzzledays.cli import all_days, main


def test_all_days_are_numbered_in_order():
    days = all_days("somewhere")
    assert [day.number for day in days] == list(range(len(days)))
    assert days[-1].name() == "Day20"


def test_all_days_share_inputs_dir(tmp_path):
    assert {day.inputs_dir for day in all_days(tmp_path)} == {Path(tmp_path)}


def test_main_prints_result_and_errors(tmp_path, capsys):
    (tmp_path / "Day0.txt").write_text("42\n")
    assert main(["--inputs", str(tmp_path)]) == 0
    captured = capsys.readouterr()
    assert "Day 0:\n\tPart 1: 42\n\tPart 2: 42\n\tTime: " in captured.out
    assert captured.err.count("File not found") == len(all_days(tmp_path)) - 1


def test_main_with_no_inputs_reports_every_day(tmp_path, capsys):
    main(["--inputs", str(tmp_path)])
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.count("File not found") == len(all_days(tmp_path))