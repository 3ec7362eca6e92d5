"""Seed almanac: map seeds through category maps to their locations."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, replace
from pathlib import Path

MAP_HEADERS = ("seed-", "soil", "fert", "water", "light", "temp", "hum")


@dataclass(frozen=True)
class MapEntry:
    """A source range (inclusive bounds) and where it starts in the destination."""

    source_start: int
    source_end: int
    dest_start: int


@dataclass(frozen=True)
class SeedInterval:
    """An inclusive range of seed numbers."""

    start: int
    end: int


def parse_seeds(line: str) -> list[int]:
    """Read the space separated numbers after the first space of a seeds line."""
    _, space, numbers = line.partition(" ")
    if not space:
        raise ValueError(f"not a seeds line: {line!r}")
    return [int(number) for number in numbers.split(" ")]


def _skip_to(lines: Iterator[str], prefix: str) -> str | None:
    for line in lines:
        if line.startswith(prefix):
            return line
    return None


def _parse_map(lines: Iterator[str], header: str, part: int) -> list[MapEntry]:
    if _skip_to(lines, header) is None:
        return []
    entries = []
    for line in lines:
        if not line:
            break
        fields = line.split(" ", 2)
        if len(fields) != 3:
            raise ValueError(f"malformed map line: {line!r}")
        dest, source, length = (int(field) for field in fields)
        end = source + length if part == 1 else source + length - 1
        entries.append(MapEntry(source, end, dest))
    return entries


def parse_almanac(text: str, part: int) -> tuple[list[int], list[list[MapEntry]]]:
    """Parse the seeds and the seven category maps.

    Part 1 reads each range's end as ``start + length``; part 2 as
    ``start + length - 1``.
    """
    if part not in (1, 2):
        raise ValueError(f"part must be 1 or 2, not {part!r}")
    lines = iter(text.splitlines())
    seeds_line = _skip_to(lines, "seeds")
    if seeds_line is None:
        raise ValueError("almanac has no seeds line")
    seeds = parse_seeds(seeds_line)
    maps = [_parse_map(lines, header, part) for header in MAP_HEADERS]
    return seeds, maps


def _map_value(value: int, entries: Sequence[MapEntry]) -> int:
    for entry in entries:
        if entry.source_start <= value <= entry.source_end:
            return entry.dest_start + value - entry.source_start
    return value


def lowest_location(seeds: Sequence[int], maps: Sequence[Sequence[MapEntry]]) -> int:
    """Return the lowest location any single seed maps to."""
    locations = []
    for seed in seeds:
        value = seed
        for entries in maps:
            value = _map_value(value, entries)
        locations.append(value)
    if not locations:
        raise ValueError("no seeds given")
    return min(locations)


def seed_intervals(seeds: Sequence[int]) -> list[SeedInterval]:
    """Pair the seed numbers as (start, length) into inclusive intervals."""
    if len(seeds) % 2:
        raise ValueError("seed ranges need an even count of numbers")
    starts, lengths = seeds[::2], seeds[1::2]
    return [SeedInterval(start, start + length - 1) for start, length in zip(starts, lengths)]


def merge_seed_intervals(seeds: Sequence[int]) -> list[SeedInterval]:
    """Merge overlapping seed intervals, taking them from the back."""
    remaining = seed_intervals(seeds)
    if not remaining:
        return []
    merged = [remaining.pop()]
    position = 0
    while position < len(merged) and remaining:
        current = merged[position]
        changed = True
        while changed:
            changed = False
            for index, other in enumerate(remaining):
                if other.start <= current.end and other.end >= current.start:
                    current = SeedInterval(min(current.start, other.start), max(current.end, other.end))
                    del remaining[index]
                    changed = True
                    break
        merged[position] = current
        if remaining:
            merged.append(remaining.pop())
        position += 1
    return merged


def resolve_interval(
    maps: Sequence[Sequence[MapEntry]], map_index: int, interval: SeedInterval
) -> int:
    """Map an interval through the maps from ``map_index`` on and return its lowest location.

    When the interval's start falls into an entry but its end runs past it,
    the overflow is split off and resolved separately from the same map.
    """
    current = interval
    lowest: int | None = None
    for index in range(map_index, len(maps)):
        for entry in maps[index]:
            if entry.source_start <= current.start <= entry.source_end:
                start = entry.dest_start + current.start - entry.source_start
                end = current.end
                if end > entry.source_end:
                    split = resolve_interval(maps, index, SeedInterval(entry.source_end + 1, end))
                    lowest = split if lowest is None else min(lowest, split)
                    end = entry.source_end
                current = replace(current, start=start, end=entry.dest_start + end - entry.source_start)
                break
    return current.start if lowest is None else min(lowest, current.start)


def lowest_location_of_ranges(seeds: Sequence[int], maps: Sequence[Sequence[MapEntry]]) -> int:
    """Return the lowest location of the merged seed ranges.

    Each merged interval is resolved starting from the map whose index equals
    its own position among the merged intervals.
    """
    merged = merge_seed_intervals(seeds)
    if not merged:
        raise ValueError("no seed ranges given")
    return min(resolve_interval(maps, index, interval) for index, interval in enumerate(merged))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Find the lowest seed location.")
    parser.add_argument("path", nargs="?", default="input.txt")
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    args = parser.parse_args(argv)
    try:
        text = Path(args.path).read_text()
    except OSError:
        print("Unable to open file", file=sys.stderr)
        return 1
    seeds, maps = parse_almanac(text, args.part)
    if args.part == 1:
        print(lowest_location(seeds, maps))
    else:
        print(lowest_location_of_ranges(seeds, maps))
    return 0


if __name__ == "__main__":
    sys.exit(main())