# puzzledays

Solutions to twenty-one daily programming puzzles (days 0 to 20). They
cover grid walks, path searches, a small three-bit virtual machine, string
matching and more. Each day reads its own input file and solves both parts.
It then reports the two answers and the time it took.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Inputs

Each day reads a plain text file named after the day from an inputs
directory. The files are `Day0.txt`, `Day1.txt` and so on up to
`Day20.txt`. The directory is `inputs` in the current working directory
unless you choose another one.

If a day's file is missing, that day reports `File not found: <path>` on
standard error and the other days carry on.

## Running

```
puzzledays
puzzledays --inputs path/to/inputs
```

All days run at the same time. As each one finishes it prints a block of
this shape:

```
Day 1:
	Part 1: 1234
	Part 2: 5678
	Time: 12ms
```

A day that fails prints its error message on standard error instead.

## Using it from Python

Each day is a class in its own module, for example `puzzledays.day01.Day1`.
A day can be given its input text directly through `initialize`. The answer
to each part then comes from `solve`, as a string:

```python
from puzzledays.day import Part
from puzzledays.day01 import Day1

day = Day1()
day.initialize("3   4\n4   3\n2   5\n1   3\n3   9\n3   3\n")
print(day.solve(Part.ONE))  # "11"
print(day.solve(Part.TWO))  # "31"
```

`Day.load()` reads the day's file from the inputs directory passed to the
constructor (by default `inputs`). `Day.run()` loads the file, solves both
parts and returns a `DayResult`.

A few days take extra keyword options:

- `Day18(size=70, fallen=1024)` sets the grid size and how many bytes have
  fallen.
- `Day20(min_saving=100)` sets the smallest saving a cheat must give to be
  counted.

Other modules:

- `puzzledays.cli.all_days(inputs_dir)` builds every day against an inputs
  directory.
- `puzzledays.day.run_days(days, out, err)` runs days concurrently. It
  writes their reports to `out` and their errors to `err`. It returns the
  results in order, with `None` for each day that failed.
- `puzzledays.geometry` holds the shared grid helpers `Position`,
  `Direction` and `PositionAndDirection`.
- `puzzledays.inputs` holds the input readers and parsers.

## Limits

The command always runs every day. It cannot select single days or single
parts; use the classes from Python for that. The package does not fetch
puzzle inputs, so the input files must already be in place.