from __future__ import annotations

import pytest

from setgame.cards import (
    Card,
    CardProperties,
    Color,
    Count,
    Shade,
    Shape,
    cards_from_codes,
    format_codes,
    full_deck,
)
from setgame.errors import InvalidCardError


def test_full_deck_contains_every_card_once() -> None:
    deck = full_deck()

    assert len(deck) == 81
    assert len(set(deck)) == 81
    assert len({card.properties for card in deck}) == 81
    assert deck == sorted(deck)


@pytest.mark.parametrize(
    ("card_id", "properties"),
    [
        (0, CardProperties(Color.RED, Count.ONE, Shade.SOLID, Shape.DIAMOND)),
        (40, CardProperties(Color.GREEN, Count.TWO, Shade.STRIPED, Shape.SQUIGGLE)),
        (80, CardProperties(Color.PURPLE, Count.THREE, Shade.OPEN, Shape.OVAL)),
    ],
)
def test_card_into_properties(card_id: int, properties: CardProperties) -> None:
    assert Card(card_id).properties == properties


def test_properties_roundtrip_exhaustive() -> None:
    for card in full_deck():
        assert Card.from_properties(card.properties) == card
        assert Card.from_code(card.code) == card


@pytest.mark.parametrize(
    ("code", "card_id"),
    [("R1SD", 0), ("G2TS", 40), ("P3OO", 80), ("r1sd", 0), (" P1SD ", 54)],
)
def test_from_code(code: str, card_id: int) -> None:
    assert Card.from_code(code) == Card(card_id)


@pytest.mark.parametrize("code", ["", "R1S", "R1SDX", "X1SD", "R4SD", "R0SD", "RASD", "R1XD", "R\u0663SD", "R\uff11SD"])
def test_from_code_rejects_bad_codes(code: str) -> None:
    with pytest.raises(InvalidCardError):
        Card.from_code(code)


@pytest.mark.parametrize("card_id", [-1, 81])
def test_card_rejects_out_of_range_identifier(card_id: int) -> None:
    with pytest.raises(InvalidCardError):
        Card(card_id)


def test_attribute_accessors() -> None:
    card = Card.from_attributes(Color.PURPLE, Count.TWO, Shade.OPEN, Shape.DIAMOND)

    assert card.color is Color.PURPLE
    assert card.count is Count.TWO
    assert card.shade is Shade.OPEN
    assert card.shape is Shape.DIAMOND
    assert card.code == "P2OD"
    assert str(card) == "P2OD"


def test_card_add() -> None:
    assert Card(0) + Card(40) == Card(40)
    assert Card(40) + Card(40) == Card(80)
    assert Card(80) + Card(40) == Card(39)
    assert Card(80) + Card(1) == Card(0)


def test_card_sub() -> None:
    assert Card(80) - Card(40) == Card(40)
    assert Card(40) - Card(40) == Card(0)
    assert Card(0) - Card(40) == Card(41)
    assert Card(0) - Card(1) == Card(80)


def test_card_sub_exhaustive() -> None:
    deck = full_deck()
    for a in deck:
        for b in deck:
            assert (a - b) + b == a


def test_cards_from_codes() -> None:
    assert cards_from_codes(["R1SD", "P3OO"]) == [Card(0), Card(80)]


def test_format_codes() -> None:
    assert format_codes([Card(0), None, Card(80)]) == "R1SD ---- P3OO"
