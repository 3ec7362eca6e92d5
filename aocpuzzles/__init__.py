"""Solvers for daily programming puzzles: cubes, gears, scratchcards, almanac, boat races, camel cards and a network parser."""

__version__ = "0.1.0"