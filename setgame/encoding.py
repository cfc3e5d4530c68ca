"""Card identifier encoding utilities for Set."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .errors import InvalidAttributeError

DECK_SIZE: Final[int] = 81
RANK_BASE: Final[int] = 3
RANK_COLOR: Final[int] = RANK_BASE**3
RANK_COUNT: Final[int] = RANK_BASE**2
RANK_SHADE: Final[int] = RANK_BASE**1
ATTRIBUTE_NAMES: Final[tuple[str, ...]] = ("color", "count", "shade", "shape")


@dataclass(frozen=True, slots=True)
class CardDecoding:
    """Typed container describing a decoded card identifier."""

    color_idx: int
    count_idx: int
    shade_idx: int
    shape_idx: int

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.color_idx, self.count_idx, self.shade_idx, self.shape_idx)


def _validate_attribute(name: str, value: int) -> None:
    if not 0 <= value < RANK_BASE:
        raise InvalidAttributeError(f"{name} index {value} out of range")


def validate_card_id(card_identifier: int) -> None:
    """Raise :class:`InvalidAttributeError` unless ``card_identifier`` is in ``0..80``."""

    if not 0 <= card_identifier < DECK_SIZE:
        raise InvalidAttributeError(f"card identifier {card_identifier} out of range")


def encode(color_idx: int, count_idx: int, shade_idx: int, shape_idx: int) -> int:
    """Encode four attribute indices into a card identifier."""

    for name, value in zip(ATTRIBUTE_NAMES, (color_idx, count_idx, shade_idx, shape_idx)):
        _validate_attribute(name, value)
    return color_idx * RANK_COLOR + count_idx * RANK_COUNT + shade_idx * RANK_SHADE + shape_idx


def decode(card_identifier: int) -> CardDecoding:
    """Decode a card identifier into its attribute indices."""

    validate_card_id(card_identifier)
    color_idx, remainder = divmod(card_identifier, RANK_COLOR)
    count_idx, remainder = divmod(remainder, RANK_COUNT)
    shade_idx, shape_idx = divmod(remainder, RANK_SHADE)
    return CardDecoding(color_idx, count_idx, shade_idx, shape_idx)


def attribute_indices(card_identifier: int) -> tuple[int, int, int, int]:
    """Return ``(color, count, shade, shape)`` indices for ``card_identifier``."""

    return decode(card_identifier).as_tuple()


def add_ids(left: int, right: int) -> int:
    """Add two identifiers modulo the deck size."""

    validate_card_id(left)
    validate_card_id(right)
    return (left + right) % DECK_SIZE


def sub_ids(left: int, right: int) -> int:
    """Subtract ``right`` from ``left`` modulo the deck size."""

    validate_card_id(left)
    validate_card_id(right)
    return (left - right) % DECK_SIZE
