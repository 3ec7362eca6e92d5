"""Gear ratios: sum the products of numbers touching a '*' exactly twice."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _digit_at(line: str, index: int) -> bool:
    return 0 <= index < len(line) and _is_digit(line[index])


def complete_number(line: str, index: int, direction: int) -> str:
    """Collect the run of digits starting at ``index`` moving in ``direction``."""
    digits: list[str] = []
    while _digit_at(line, index):
        digits.append(line[index])
        index += direction
    if direction < 0:
        digits.reverse()
    return "".join(digits)


def _vertical_factors(line: str, column: int, last_index: int) -> list[int]:
    if _digit_at(line, column):
        number = complete_number(line, column, -1)
        if column < last_index:
            number += complete_number(line, column + 1, 1)
        return [int(number)]
    found = []
    if _digit_at(line, max(column - 1, 0)):
        found.append(int(complete_number(line, column - 1, -1)))
    if _digit_at(line, min(column + 1, last_index)):
        found.append(int(complete_number(line, column + 1, 1)))
    return found


def gear_factors(lines: Sequence[str], row: int, column: int) -> list[int]:
    """Return the numbers adjacent to the cell at ``row``, ``column``.

    Left and right neighbours come first, then those above, then those below.
    """
    line = lines[row]
    last_index = len(lines[0]) - 1
    factors = []
    if column != 0 and _digit_at(line, column - 1):
        factors.append(int(complete_number(line, column - 1, -1)))
    if column != last_index and _digit_at(line, column + 1):
        factors.append(int(complete_number(line, column + 1, 1)))
    for neighbour in (row - 1, row + 1):
        if 0 <= neighbour < len(lines):
            factors.extend(_vertical_factors(lines[neighbour], column, last_index))
    return factors


def gear_ratio_sum(lines: Sequence[str]) -> int:
    """Sum the products of every '*' with exactly two adjacent numbers."""
    total = 0
    for row, line in enumerate(lines):
        for column, char in enumerate(line):
            if char != "*":
                continue
            factors = gear_factors(lines, row, column)
            if len(factors) == 2:
                total += factors[0] * factors[1]
    return total


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Sum the gear ratios of a schematic.")
    parser.add_argument("path", nargs="?", default="input.txt")
    args = parser.parse_args(argv)
    try:
        lines = Path(args.path).read_text().splitlines()
    except OSError:
        print("Unable to open file", file=sys.stderr)
        return 1
    print(gear_ratio_sum(lines))
    return 0


if __name__ == "__main__":
    sys.exit(main())