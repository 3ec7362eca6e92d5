[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aocpuzzles"
version = "0.1.0"
description = "Solvers for a series of daily programming puzzles: cube games, gear ratios, scratchcards, almanac maps, boat races, camel cards and a node network parser."
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "advent", "solver", "games"]
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
aoc-cubes = "aocpuzzles.cubes:main"
aoc-gears = "aocpuzzles.gears:main"
aoc-scratchcards = "aocpuzzles.scratchcards:main"
aoc-almanac = "aocpuzzles.almanac:main"
aoc-boat-race = "aocpuzzles.boat_race:main"
aoc-camel-cards = "aocpuzzles.camel_cards:main"

[tool.hatch.build.targets.wheel]
packages = ["aocpuzzles"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
