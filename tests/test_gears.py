import pytest

from aocpuzzles.gears import complete_number, gear_factors, gear_ratio_sum, main

SCHEMATIC = [
    "467..114..",
    "...*......",
    "..35..633.",
    "......#...",
    "617*......",
    ".....+.58.",
    "..592.....",
    "......755.",
    "...$.*....",
    ".664.598..",
]


@pytest.mark.parametrize(
    ("index", "direction", "expected"),
    [(4, -1, "123"), (2, 1, "123"), (3, 1, "23"), (0, 1, ""), (-1, -1, ""), (9, 1, "")],
)
def test_complete_number(index, direction, expected):
    assert complete_number("..123..", index, direction) == expected


def test_gear_factors_above_and_below():
    assert gear_factors(SCHEMATIC, 1, 3) == [467, 35]


def test_gear_factors_split_across_column():
    assert gear_factors(SCHEMATIC, 8, 5) == [755, 598]


def test_gear_factors_single_neighbour():
    assert gear_factors(SCHEMATIC, 4, 3) == [617]


def test_gear_factors_left_and_right():
    assert gear_factors(["12*34"], 0, 2) == [12, 34]


def test_gear_ratio_sum_example():
    assert gear_ratio_sum(SCHEMATIC) == 467835


def test_gear_ratio_sum_matches_factor_product():
    grid = ["12*34"]
    first, second = gear_factors(grid, 0, 2)
    assert gear_ratio_sum(grid) == first * second


def test_three_neighbours_do_not_count():
    grid = ["1.1", "1*.", "..."]
    assert len(gear_factors(grid, 1, 1)) == 3
    assert gear_ratio_sum(grid) == 0


def test_empty_schematic():
    assert gear_ratio_sum([]) == 0


def test_main_prints_sum(tmp_path, capsys):
    path = tmp_path / "schematic.txt"
    path.write_text("\n".join(SCHEMATIC) + "\n")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out.strip() == str(gear_ratio_sum(SCHEMATIC))


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 1
    assert "Unable to open file" in capsys.readouterr().err