"""Desert network: read the left/right instructions and the node map."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Node:
    """A node's label and the labels it leads to on the left and right."""

    label: str
    left: str
    right: str


def parse_node(line: str) -> Node:
    """Read a fixed-width ``AAA = (BBB, CCC)`` line."""
    if len(line) < 12:
        raise ValueError(f"not a node line: {line!r}")
    return Node(line[0:3], line[7:10], line[12:15])


def parse_network(lines: Iterable[str]) -> tuple[str, list[Node]]:
    """Return the instruction line and the nodes listed after the blank line."""
    rows = iter(lines)
    instructions = next(rows, None)
    if instructions is None:
        raise ValueError("network has no instruction line")
    next(rows, None)
    return instructions, [parse_node(line) for line in rows]