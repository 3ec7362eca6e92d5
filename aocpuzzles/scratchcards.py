"""Scratchcards: points per card and the cascade of won copies."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path


def parse_numbers(text: str) -> list[int]:
    """Read two-character number columns separated by one character."""
    return [int(text[start:start + 2]) for start in range(0, len(text), 3)]


def parse_card(line: str) -> tuple[list[int], list[int]]:
    """Return the winning numbers and the owned numbers of a card line."""
    colon = line.find(":")
    separator = line.find("|")
    if colon < 0 or separator < 0:
        raise ValueError(f"not a card line: {line!r}")
    start = colon + 2
    winning = parse_numbers(line[start:separator - 1])
    owned = parse_numbers(line[separator + 2:])
    return winning, owned


def count_matches(winning: Sequence[int], owned: Sequence[int]) -> int:
    """Count pairs of equal numbers between the owned and winning lists."""
    return sum(winning.count(number) for number in owned)


def card_points(winning: Sequence[int], owned: Sequence[int]) -> int:
    """One point for the first match, doubled for each further match."""
    matches = count_matches(winning, owned)
    return 2 ** (matches - 1) if matches else 0


def total_points(lines: Sequence[str]) -> int:
    """Sum the points of every card."""
    return sum(card_points(*parse_card(line)) for line in lines)


def total_cards(lines: Sequence[str]) -> int:
    """Count original cards plus all copies won, without running past the last card."""
    copies = [1] * len(lines)
    total = 0
    for index, line in enumerate(lines):
        matches = count_matches(*parse_card(line))
        total += copies[index]
        for following in range(index + 1, min(index + 1 + matches, len(lines))):
            copies[following] += copies[index]
    return total


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Score a pile of scratchcards.")
    parser.add_argument("path", nargs="?", default="input.txt")
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    args = parser.parse_args(argv)
    try:
        lines = Path(args.path).read_text().splitlines()
    except OSError:
        print("Unable to open file", file=sys.stderr)
        return 1
    print(total_points(lines) if args.part == 1 else total_cards(lines))
    return 0


if __name__ == "__main__":
    sys.exit(main())