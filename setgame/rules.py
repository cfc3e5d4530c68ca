"""Set matching rules and board search helpers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from itertools import combinations
from typing import Hashable, Iterable, Sequence

from . import encoding
from .cards import Card

logger = logging.getLogger(__name__)

__all__ = [
    "Triple",
    "attribute_matches",
    "is_set",
    "third_card",
    "find_sets",
    "first_set",
    "has_set",
]


def attribute_matches(first: Hashable, second: Hashable, third: Hashable) -> bool:
    """Return ``True`` when all three values agree or all three differ."""

    return len({first, second, third}) != 2


def is_set(first: Card, second: Card, third: Card) -> bool:
    """Return whether the three given cards form a set.

    Each attribute must be identical across the cards or pairwise distinct.
    Three copies of one card satisfy the rule on every attribute.
    """

    return all(
        attribute_matches(a, b, c)
        for a, b, c in zip(
            encoding.attribute_indices(first.id),
            encoding.attribute_indices(second.id),
            encoding.attribute_indices(third.id),
        )
    )


def third_card(first: Card, second: Card) -> Card:
    """Return the unique card completing a set with ``first`` and ``second``."""

    indices = [
        (-a - b) % encoding.RANK_BASE
        for a, b in zip(encoding.attribute_indices(first.id), encoding.attribute_indices(second.id))
    ]
    return Card(encoding.encode(*indices))


@dataclass(frozen=True, slots=True)
class Triple:
    """A selection of three cards."""

    first: Card
    second: Card
    third: Card

    @classmethod
    def from_cards(cls, cards: Iterable[Card]) -> "Triple":
        items = tuple(cards)
        if len(items) != 3:
            raise ValueError(f"a triple needs exactly three cards, got {len(items)}")
        return cls(*items)

    @property
    def cards(self) -> tuple[Card, Card, Card]:
        return (self.first, self.second, self.third)

    def is_set(self) -> bool:
        """Return whether the three cards are a set."""

        return is_set(self.first, self.second, self.third)


def find_sets(board: Sequence[Card | None]) -> list[tuple[int, int, int]]:
    """Return every slot triple on ``board`` that forms a set.

    Empty slots (``None``) are skipped; triples are ordered lexicographically.
    """

    occupied = [(idx, card) for idx, card in enumerate(board) if card is not None]
    found: list[tuple[int, int, int]] = []
    for (i, a), (j, b), (k, c) in combinations(occupied, 3):
        if is_set(a, b, c):
            found.append((i, j, k))
    logger.debug("found %d set(s) among %d card(s)", len(found), len(occupied))
    return found


def first_set(board: Sequence[Card | None]) -> tuple[int, int, int] | None:
    """Return the lexicographically first set on ``board`` or ``None``."""

    occupied = [(idx, card) for idx, card in enumerate(board) if card is not None]
    for (i, a), (j, b), (k, c) in combinations(occupied, 3):
        if is_set(a, b, c):
            return (i, j, k)
    return None


def has_set(board: Sequence[Card | None]) -> bool:
    return first_set(board) is not None
