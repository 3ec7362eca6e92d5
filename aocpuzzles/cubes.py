"""Cube conundrum: minimum cube sets and their powers for each game."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterable
from math import prod
from pathlib import Path

BASE_COLOURS = ("red", "green", "blue")

_DRAW_SEPARATORS = re.compile(r"[;,]")


def parse_game(line: str) -> tuple[int, str]:
    """Split a ``Game N: ...`` line into its id and the text after the colon."""
    head, colon, rest = line.partition(":")
    _, space, identifier = head.partition(" ")
    if not colon or not space:
        raise ValueError(f"not a game line: {line!r}")
    return int(identifier), rest


def _draws(rest: str) -> Iterable[tuple[int, str]]:
    for draw in _DRAW_SEPARATORS.split(rest):
        parts = draw.split()
        if len(parts) != 2:
            raise ValueError(f"malformed draw: {draw!r}")
        count, colour = parts
        yield int(count), colour


def minimum_set(line: str) -> dict[str, int]:
    """Return the fewest cubes of each colour that make the game possible."""
    game_id, rest = parse_game(line)
    needed = dict.fromkeys(BASE_COLOURS, 0)
    if game_id == 0:
        return needed
    for count, colour in _draws(rest):
        if count > needed.get(colour, 0):
            needed[colour] = count
    return needed


def game_power(line: str) -> int:
    """Return the product of the red, green and blue minimum counts."""
    needed = minimum_set(line)
    return prod(needed[colour] for colour in BASE_COLOURS)


def total_power(lines: Iterable[str]) -> int:
    """Sum the powers of all games."""
    return sum(game_power(line) for line in lines)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Sum the powers of minimum cube sets.")
    parser.add_argument("path", nargs="?", default="marian_input.txt")
    args = parser.parse_args(argv)
    try:
        lines = Path(args.path).read_text().splitlines()
    except OSError:
        print("Unable to open file", file=sys.stderr)
        return 1
    total = 0
    for line in lines:
        needed = minimum_set(line)
        print(", ".join(f"{colour}: {needed[colour]}" for colour in BASE_COLOURS))
        total += prod(needed[colour] for colour in BASE_COLOURS)
    print(total)
    return 0


if __name__ == "__main__":
    sys.exit(main())