"""Boat races: count the button hold times that beat each record distance."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from math import isqrt, prod
from pathlib import Path

_NUMBER = re.compile(r"\d+")


@dataclass(frozen=True)
class Race:
    """A race's duration and the record distance to beat."""

    time: int
    distance: int = 0


def parse_races(time_line: str, distance_line: str) -> list[Race]:
    """Pair every number of the time line with the number at the same place in the distance line.

    Races without a matching distance keep a record of zero.
    """
    times = [int(number) for number in _NUMBER.findall(time_line)]
    distances = [int(number) for number in _NUMBER.findall(distance_line)]
    if len(distances) > len(times):
        raise ValueError("more distances than times")
    distances += [0] * (len(times) - len(distances))
    return [Race(time, distance) for time, distance in zip(times, distances)]


def _joined_number(line: str) -> int:
    digits = "".join(_NUMBER.findall(line))
    if not digits:
        raise ValueError(f"no digits in {line!r}")
    return int(digits)


def parse_single_race(time_line: str, distance_line: str) -> Race:
    """Read one race whose numbers are all the digits of each line run together."""
    return Race(_joined_number(time_line), _joined_number(distance_line))


def count_wins(time: int, distance: int) -> int:
    """Count hold times from 1 to ``time`` whose travelled distance exceeds ``distance``."""
    middle = time // 2
    if middle * (time - middle) <= distance:
        return 0
    root = isqrt(max(time * time - 4 * distance, 0))
    first = max((time - root) // 2, 1)
    while first * (time - first) <= distance:
        first += 1
    while first > 1 and (first - 1) * (time - first + 1) > distance:
        first -= 1
    return time - 2 * first + 1


def product_of_wins(races: Iterable[Race]) -> int:
    """Multiply the number of ways to win each race."""
    return prod(count_wins(race.time, race.distance) for race in races)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Count the ways to win the boat races.")
    parser.add_argument("path", nargs="?", default="input.txt")
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    args = parser.parse_args(argv)
    try:
        lines = Path(args.path).read_text().splitlines()
    except OSError:
        print("Unable to open file!", file=sys.stderr)
        return 1
    if len(lines) < 2:
        raise ValueError("expected a time line and a distance line")
    time_line, distance_line = lines[0], lines[1]
    if args.part == 1:
        print(product_of_wins(parse_races(time_line, distance_line)))
    else:
        race = parse_single_race(time_line, distance_line)
        print(count_wins(race.time, race.distance))
    return 0


if __name__ == "__main__":
    sys.exit(main())