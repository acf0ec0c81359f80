"""Default card domain: the classic 81-card deck and its matching rule.

The engine only relies on two things from this module: ``make_deck()`` and
``is_set(cards)``. Both can be swapped out by passing other callables into
``game_setup.initial_state`` and ``candidates.process_candidate``.
"""
from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from enum import StrEnum
from itertools import combinations, product


class Number(StrEnum):
    one = "one"
    two = "two"
    three = "three"


class Shading(StrEnum):
    solid = "solid"
    striped = "striped"
    open = "open"


class Color(StrEnum):
    red = "red"
    green = "green"
    purple = "purple"


class Shape(StrEnum):
    diamond = "diamond"
    squiggle = "squiggle"
    oval = "oval"


ATTRIBUTES: tuple[str, ...] = ("number", "shading", "color", "shape")


@dataclass(frozen=True, slots=True)
class Card:
    id: int
    number: Number
    shading: Shading
    color: Color
    shape: Shape

    def attributes(self) -> tuple[str, ...]:
        return tuple(getattr(self, a).value for a in ATTRIBUTES)


DeckFactory = Callable[[], Sequence[Card]]
SetPredicate = Callable[[Iterable[Card]], bool]


def make_deck() -> tuple[Card, ...]:
    """Every combination of the four attributes, ids assigned in product order."""

    return tuple(
        Card(id=i, number=n, shading=s, color=c, shape=sh)
        for i, (n, s, c, sh) in enumerate(product(Number, Shading, Color, Shape))
    )


def is_set(cards: Iterable[Card]) -> bool:
    """Three cards form a set when each attribute is all-equal or all-distinct."""

    triple = list(cards)
    if len(triple) != 3 or len({c.id for c in triple}) != 3:
        return False
    for attr in ATTRIBUTES:
        if len({getattr(c, attr) for c in triple}) == 2:
            return False
    return True


def find_sets(cards: Iterable[Card], *, predicate: SetPredicate = is_set) -> list[tuple[Card, Card, Card]]:
    ordered = sorted(cards, key=lambda c: c.id)
    return [t for t in combinations(ordered, 3) if predicate(t)]
