"""Card abstractions and helpers for Set."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, List, Sequence

from . import encoding
from .errors import InvalidAttributeError, InvalidCardError


class Color(IntEnum):
    """Ink color printed on a card."""

    RED = 0
    GREEN = 1
    PURPLE = 2

    @property
    def code(self) -> str:
        return _COLOR_CODES[self.value]


class Count(IntEnum):
    """Number of symbols printed on a card."""

    ONE = 0
    TWO = 1
    THREE = 2

    @property
    def code(self) -> str:
        return _COUNT_CODES[self.value]

    @property
    def symbols(self) -> int:
        return self.value + 1


class Shade(IntEnum):
    """Fill style of the printed symbols."""

    SOLID = 0
    STRIPED = 1
    OPEN = 2

    @property
    def code(self) -> str:
        return _SHADE_CODES[self.value]


class Shape(IntEnum):
    """Outline of the printed symbols."""

    DIAMOND = 0
    SQUIGGLE = 1
    OVAL = 2

    @property
    def code(self) -> str:
        return _SHAPE_CODES[self.value]


_COLOR_CODES = ("R", "G", "P")
_COUNT_CODES = ("1", "2", "3")
_SHADE_CODES = ("S", "T", "O")
_SHAPE_CODES = ("D", "S", "O")


@dataclass(frozen=True, slots=True)
class CardProperties:
    """The four attributes of a card.

    Names follow https://en.wikipedia.org/wiki/Set_(card_game).
    """

    color: Color
    count: Count
    shade: Shade
    shape: Shape

    def as_tuple(self) -> tuple[Color, Count, Shade, Shape]:
        return (self.color, self.count, self.shade, self.shape)


@dataclass(frozen=True, slots=True, order=True)
class Card:
    """Value object wrapping the compact card identifier."""

    id: int

    def __post_init__(self) -> None:
        if isinstance(self.id, bool) or not isinstance(self.id, int):
            raise InvalidCardError(f"card identifier must be an int, got {self.id!r}")
        try:
            encoding.validate_card_id(self.id)
        except InvalidAttributeError as exc:
            raise InvalidCardError(str(exc)) from exc

    @classmethod
    def from_properties(cls, properties: CardProperties) -> "Card":
        return cls(
            encoding.encode(
                int(properties.color),
                int(properties.count),
                int(properties.shade),
                int(properties.shape),
            )
        )

    @classmethod
    def from_attributes(cls, color: Color, count: Count, shade: Shade, shape: Shape) -> "Card":
        return cls.from_properties(CardProperties(color, count, shade, shape))

    @classmethod
    def from_code(cls, code: str) -> "Card":
        """Parse a four character code such as ``R1SD``.

        The characters are color (``R``/``G``/``P``), count (``1``-``3``),
        shade (``S``olid, s``T``riped, ``O``pen) and shape
        (``D``iamond, ``S``quiggle, ``O``val).
        """

        text = code.strip().upper()
        if len(text) != 4:
            raise InvalidCardError(f"invalid card code '{code}'")
        color_code, count_code, shade_code, shape_code = text
        try:
            color_idx = _COLOR_CODES.index(color_code)
            count_idx = _COUNT_CODES.index(count_code)
            shade_idx = _SHADE_CODES.index(shade_code)
            shape_idx = _SHAPE_CODES.index(shape_code)
            return cls(encoding.encode(color_idx, count_idx, shade_idx, shape_idx))
        except ValueError as exc:
            raise InvalidCardError(f"invalid card code '{code}'") from exc

    @property
    def properties(self) -> CardProperties:
        decoded = encoding.decode(self.id)
        return CardProperties(
            color=Color(decoded.color_idx),
            count=Count(decoded.count_idx),
            shade=Shade(decoded.shade_idx),
            shape=Shape(decoded.shape_idx),
        )

    @property
    def color(self) -> Color:
        return self.properties.color

    @property
    def count(self) -> Count:
        return self.properties.count

    @property
    def shade(self) -> Shade:
        return self.properties.shade

    @property
    def shape(self) -> Shape:
        return self.properties.shape

    @property
    def code(self) -> str:
        props = self.properties
        return f"{props.color.code}{props.count.code}{props.shade.code}{props.shape.code}"

    def __add__(self, other: object) -> "Card":
        if not isinstance(other, Card):
            return NotImplemented
        return Card(encoding.add_ids(self.id, other.id))

    def __sub__(self, other: object) -> "Card":
        if not isinstance(other, Card):
            return NotImplemented
        return Card(encoding.sub_ids(self.id, other.id))

    def __str__(self) -> str:
        return self.code


def full_deck() -> List[Card]:
    """Return the complete deck in canonical order."""

    return [Card(card_id) for card_id in range(encoding.DECK_SIZE)]


def cards_from_codes(codes: Iterable[str]) -> List[Card]:
    return [Card.from_code(code) for code in codes]


def format_codes(cards: Sequence[Card | None]) -> str:
    return " ".join(card.code if card is not None else "----" for card in cards)
