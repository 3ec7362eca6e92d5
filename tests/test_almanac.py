import pytest

from aocpuzzles.almanac import (
    MapEntry,
    SeedInterval,
    lowest_location,
    lowest_location_of_ranges,
    main,
    merge_seed_intervals,
    parse_almanac,
    parse_seeds,
    resolve_interval,
    seed_intervals,
)

ALMANAC = """seeds: 79 14 55 13

seed-to-soil map:
50 98 2
52 50 48

soil-to-fertilizer map:
0 15 37

fertilizer-to-water map:
49 53 8

water-to-light map:
88 18 7

light-to-temperature map:
45 77 23

temperature-to-humidity map:
0 69 1

humidity-to-location map:
60 56 37
56 93 4
"""


def test_parse_seeds():
    assert parse_seeds("seeds: 79 14 55 13") == [79, 14, 55, 13]


def test_parse_seeds_rejects_double_space():
    with pytest.raises(ValueError):
        parse_seeds("seeds: 79  14")


def test_parse_almanac_part_two_ends_are_inclusive():
    seeds, maps = parse_almanac(ALMANAC, 2)
    assert seeds == [79, 14, 55, 13]
    assert len(maps) == 7
    assert maps[0] == [MapEntry(98, 98 + 2 - 1, 50), MapEntry(50, 50 + 48 - 1, 52)]
    assert maps[6][1] == MapEntry(93, 93 + 4 - 1, 56)


def test_parse_almanac_part_one_end_includes_length():
    _, maps = parse_almanac(ALMANAC, 1)
    assert maps[0][0] == MapEntry(98, 98 + 2, 50)


def test_parse_almanac_rejects_unknown_part():
    with pytest.raises(ValueError):
        parse_almanac(ALMANAC, 3)


def test_parse_almanac_requires_seeds():
    with pytest.raises(ValueError):
        parse_almanac("seed-to-soil map:\n1 2 3\n", 1)


def test_missing_maps_are_empty():
    seeds, maps = parse_almanac("seeds: 12\n\nseed-to-soil map:\n0 10 2\n", 2)
    assert seeds == [12]
    assert maps[1:] == [[] for _ in range(6)]


def test_part_one_boundary_differs_from_part_two():
    text = "seeds: 12\n\nseed-to-soil map:\n0 10 2\n"
    seeds, maps_one = parse_almanac(text, 1)
    assert lowest_location(seeds, maps_one) == 2
    _, maps_two = parse_almanac(text, 2)
    assert lowest_location(seeds, maps_two) == 12


def test_lowest_location_with_identity_maps():
    seeds = [40, 7, 19]
    assert lowest_location(seeds, [[] for _ in range(7)]) == min(seeds)


def test_lowest_location_prefers_unmapped_seed():
    maps = [[MapEntry(10, 19, 100)]]
    assert lowest_location([15, 5], maps) == 5


def test_lowest_location_without_seeds():
    with pytest.raises(ValueError):
        lowest_location([], [[]])


def test_seed_intervals():
    assert seed_intervals([79, 14, 55, 13]) == [
        SeedInterval(79, 79 + 14 - 1),
        SeedInterval(55, 55 + 13 - 1),
    ]


def test_seed_intervals_odd_count():
    with pytest.raises(ValueError):
        seed_intervals([1, 2, 3])


def test_merge_overlapping_intervals():
    seeds = [1, 5, 3, 5]
    merged = merge_seed_intervals(seeds)
    assert merged == [SeedInterval(1, seed_intervals(seeds)[1].end)]


def test_merge_disjoint_intervals_keeps_back_to_front_order():
    seeds = [1, 2, 10, 2]
    assert merge_seed_intervals(seeds) == list(reversed(seed_intervals(seeds)))


def test_resolve_interval_splits_overflow():
    maps = [[MapEntry(0, 9, 100)]]
    assert resolve_interval(maps, 0, SeedInterval(5, 14)) == 10


def test_resolve_interval_past_last_map_is_unchanged():
    interval = SeedInterval(33, 40)
    assert resolve_interval([[MapEntry(0, 100, 500)]], 1, interval) == interval.start


def test_lowest_location_of_ranges_identity():
    seeds = [79, 14, 55, 13]
    assert lowest_location_of_ranges(seeds, [[] for _ in range(7)]) == min(seeds[::2])


def test_lowest_location_of_ranges_without_seeds():
    with pytest.raises(ValueError):
        lowest_location_of_ranges([], [[]])


def test_main_prints_both_parts(tmp_path, capsys):
    path = tmp_path / "almanac.txt"
    path.write_text(ALMANAC)
    assert main([str(path)]) == 0
    seeds, maps = parse_almanac(ALMANAC, 1)
    assert capsys.readouterr().out.strip() == str(lowest_location(seeds, maps))
    assert main([str(path), "--part", "2"]) == 0
    seeds, maps = parse_almanac(ALMANAC, 2)
    assert capsys.readouterr().out.strip() == str(lowest_location_of_ranges(seeds, maps))


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 1
    assert "Unable to open file" in capsys.readouterr().err