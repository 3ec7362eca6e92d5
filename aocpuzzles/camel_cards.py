"""Camel cards: rank poker-like hands and sum their winnings."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

HAND_LENGTH = 5

FIVE_OF_KIND = 6
FOUR_OF_KIND = 5
FULL_HOUSE = 4
THREE_OF_KIND = 3
TWO_PAIR = 2
ONE_PAIR = 1
ALL_DIFF = 0

_ALPHABET = "AKQJT98765432"
_ALPHABET_WITHOUT_JOKER = "AKQT98765432"
_FACE_VALUES = {"A": 14, "K": 13, "Q": 12, "T": 10}


@dataclass(frozen=True)
class Hand:
    """A hand's card text, the values of its first five cards, its bid and its strength."""

    cards: str
    values: tuple[int, ...]
    bid: int
    strength: int


def card_values(cards: str, jokers: bool) -> tuple[int, ...]:
    """Return the values of the first five cards; a J is worth 1 when it is a joker."""
    if len(cards) < HAND_LENGTH:
        raise ValueError(f"a hand needs {HAND_LENGTH} cards: {cards!r}")
    values = []
    for card in cards[:HAND_LENGTH]:
        if card == "J":
            values.append(1 if jokers else 11)
        elif card in _FACE_VALUES:
            values.append(_FACE_VALUES[card])
        elif card.isdigit():
            values.append(int(card))
        else:
            raise ValueError(f"unknown card {card!r}")
    return tuple(values)


def _classify(cards: str, alphabet: str) -> int:
    three = two = False
    for symbol in alphabet:
        count = cards.count(symbol)
        if count == 5:
            return FIVE_OF_KIND
        if count == 4:
            return FOUR_OF_KIND
        if count == 3:
            if two:
                return FULL_HOUSE
            three = True
        elif count == 2:
            if three:
                return FULL_HOUSE
            if two:
                return TWO_PAIR
            two = True
    if three:
        return THREE_OF_KIND
    if two:
        return ONE_PAIR
    return ALL_DIFF


def hand_strength(cards: str) -> int:
    """Classify a hand with J as an ordinary card."""
    return _classify(cards, _ALPHABET)


def apply_jokers(cards: str, strength: int) -> int:
    """Raise ``strength`` by the best use of the hand's jokers."""
    jokers = cards.count("J")
    if jokers == 0:
        return strength
    if jokers == 1:
        return {
            FOUR_OF_KIND: FIVE_OF_KIND,
            THREE_OF_KIND: FOUR_OF_KIND,
            TWO_PAIR: FULL_HOUSE,
            ONE_PAIR: THREE_OF_KIND,
        }.get(strength, ONE_PAIR)
    if jokers == 2:
        return {THREE_OF_KIND: FIVE_OF_KIND, ONE_PAIR: FOUR_OF_KIND}.get(strength, THREE_OF_KIND)
    if jokers == 3:
        return FIVE_OF_KIND if strength == ONE_PAIR else FOUR_OF_KIND
    return FIVE_OF_KIND


def joker_strength(cards: str) -> int:
    """Classify a hand in which every J is a joker."""
    strength = _classify(cards, _ALPHABET_WITHOUT_JOKER)
    if strength in (FIVE_OF_KIND, FULL_HOUSE):
        return strength
    return apply_jokers(cards, strength)


def parse_hand(line: str, jokers: bool) -> Hand:
    """Read a ``CARDS BID`` line."""
    cards, space, bid = line.partition(" ")
    if not space:
        raise ValueError(f"not a hand line: {line!r}")
    strength = joker_strength(cards) if jokers else hand_strength(cards)
    return Hand(cards, card_values(cards, jokers), int(bid), strength)


def insert_hand(hand: Hand, sorted_hands: list[Hand]) -> None:
    """Insert ``hand`` into ``sorted_hands``, weakest first, in place.

    A hand whose card values tie with a different hand of the same strength
    is left out.
    """
    position = 0
    while position < len(sorted_hands) and hand.strength > sorted_hands[position].strength:
        position += 1
    if position == len(sorted_hands):
        sorted_hands.append(hand)
        return
    if hand.strength < sorted_hands[position].strength:
        sorted_hands.insert(position, hand)
        return
    while position < len(sorted_hands):
        other = sorted_hands[position]
        if hand.cards == other.cards or hand.strength != other.strength:
            sorted_hands.insert(position, hand)
            return
        for mine, theirs in zip(hand.values, other.values):
            if mine < theirs:
                sorted_hands.insert(position, hand)
                return
            if mine > theirs:
                break
        else:
            return
        position += 1
    sorted_hands.append(hand)


def rank_hands(hands: Iterable[Hand]) -> list[Hand]:
    """Return the hands ordered from weakest to strongest."""
    ranked: list[Hand] = []
    for hand in hands:
        insert_hand(hand, ranked)
    return ranked


def total_winnings(lines: Iterable[str], jokers: bool) -> int:
    """Sum each hand's bid times its rank."""
    ranked = rank_hands(parse_hand(line, jokers) for line in lines)
    return sum(hand.bid * rank for rank, hand in enumerate(ranked, start=1))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Total the winnings of camel card hands.")
    parser.add_argument("path", nargs="?", default="input.txt")
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    args = parser.parse_args(argv)
    try:
        lines = Path(args.path).read_text().splitlines()
    except OSError:
        print("unable to open file", file=sys.stderr)
        return 1
    print(total_winnings(lines, jokers=args.part == 2))
    return 0


if __name__ == "__main__":
    sys.exit(main())