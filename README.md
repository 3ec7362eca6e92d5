# aocpuzzles

Solvers for a set of daily programming puzzles. Each puzzle has its own
module. Six of them also have a command.

| Module                    | Puzzle                                       | Command            |
|---------------------------|----------------------------------------------|--------------------|
| `aocpuzzles.cubes`        | minimum cube sets and their power            | `aoc-cubes`        |
| `aocpuzzles.gears`        | gear ratios in an engine schematic           | `aoc-gears`        |
| `aocpuzzles.scratchcards` | scratchcard points and card copies           | `aoc-scratchcards` |
| `aocpuzzles.almanac`      | lowest location from seed maps               | `aoc-almanac`      |
| `aocpuzzles.boat_race`    | ways to win the boat races                   | `aoc-boat-race`    |
| `aocpuzzles.camel_cards`  | camel card winnings, with or without jokers  | `aoc-camel-cards`  |
| `aocpuzzles.network`      | parsing the node network                     | none               |

The package has no dependencies beyond the standard library.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

Every command takes an optional path to the puzzle input and prints the
answer. If the file cannot be read, it prints an error to standard error
and exits with status 1.

```
aoc-cubes [PATH]                      # default PATH: marian_input.txt
aoc-gears [PATH]                      # default PATH: input.txt
aoc-scratchcards [PATH] [--part 1|2]
aoc-almanac [PATH] [--part 1|2]
aoc-boat-race [PATH] [--part 1|2]
aoc-camel-cards [PATH] [--part 1|2]
```

`--part` defaults to 1. What the parts mean:

- `aoc-scratchcards`: part 1 sums the points of each card; part 2 counts
  the cards held once all won copies are added.
- `aoc-almanac`: part 1 maps each seed to a location; part 2 reads the
  seeds as `start length` pairs, merges overlapping ranges and maps the
  ranges.
- `aoc-boat-race`: part 1 multiplies the ways to win every race; part 2
  runs the digits of each line together into a single race.
- `aoc-camel-cards`: part 1 reads `J` as a jack; part 2 reads it as a joker.

`aoc-cubes` also prints the minimum red, green and blue counts of every
game before the total.

## As a library

The solvers work on lines or text, so they can be used without files:

```python
from aocpuzzles.cubes import total_power
from aocpuzzles.scratchcards import total_points, total_cards
from aocpuzzles.boat_race import count_wins
from aocpuzzles.camel_cards import total_winnings

with open("input.txt") as handle:
    lines = handle.read().splitlines()

print(total_power(lines))

# A race of 7 ms with a record of 9 mm can be won in 4 ways.
print(count_wins(7, 9))
```

Other entry points:

- `aocpuzzles.gears.gear_ratio_sum(lines)` sums the products for every `*`
  with exactly two adjacent numbers.
- `aocpuzzles.almanac.parse_almanac(text, part)` returns the seeds and the
  seven category maps as lists of `MapEntry`; `lowest_location` and
  `lowest_location_of_ranges` answer the two parts.
- `aocpuzzles.boat_race.parse_races` and `parse_single_race` build `Race`
  objects; `product_of_wins` multiplies their ways to win.
- `aocpuzzles.camel_cards.total_winnings(lines, jokers)` ranks hands and sums
  bid times rank. `rank_hands` and `parse_hand` give the `Hand` objects.
  A hand whose card values tie with a different hand of the same strength
  is left out of the ranking.
- `aocpuzzles.network.parse_network(lines)` returns the instruction line and
  the `Node` objects listed after the blank line.

Malformed input raises `ValueError`.

## What the package does not do

The network module only parses the instructions and nodes. It does not
follow the instructions through the network or count steps, and it has no
command.