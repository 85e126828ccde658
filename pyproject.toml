[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "puzzledays"
version = "0.1.0"
description = "Solutions to a series of daily programming puzzles, run concurrently with timings."
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "grid", "search", "solutions"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
puzzledays = "puzzledays.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["puzzledays"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
