"""Tests covering the set matching rules."""

from __future__ import annotations

import itertools

import pytest

from setgame import rules
from setgame.cards import Card, cards_from_codes, full_deck

RED_ONE_SOLID_DIAMOND = Card.from_code("R1SD")
GREEN_TWO_SOLID_DIAMOND = Card.from_code("G2SD")
PURPLE_THREE_SOLID_DIAMOND = Card.from_code("P3SD")
GREEN_TWO_STRIPED_OVAL = Card.from_code("G2TO")
PURPLE_THREE_OPEN_SQUIGGLE = Card.from_code("P3OS")


@pytest.mark.parametrize(
    ("values", "expected"),
    [((0, 0, 0), True), ((0, 1, 2), True), ((2, 0, 1), True), ((0, 0, 1), False), ((1, 2, 1), False)],
)
def test_attribute_matches(values: tuple[int, int, int], expected: bool) -> None:
    assert rules.attribute_matches(*values) is expected


@pytest.mark.parametrize(
    ("cards", "expected"),
    [
        # All the same card is technically a set
        ((RED_ONE_SOLID_DIAMOND, RED_ONE_SOLID_DIAMOND, RED_ONE_SOLID_DIAMOND), True),
        ((RED_ONE_SOLID_DIAMOND, GREEN_TWO_SOLID_DIAMOND, PURPLE_THREE_SOLID_DIAMOND), True),
        ((RED_ONE_SOLID_DIAMOND, GREEN_TWO_STRIPED_OVAL, PURPLE_THREE_OPEN_SQUIGGLE), True),
        ((RED_ONE_SOLID_DIAMOND, RED_ONE_SOLID_DIAMOND, PURPLE_THREE_SOLID_DIAMOND), False),
        ((RED_ONE_SOLID_DIAMOND, GREEN_TWO_SOLID_DIAMOND, PURPLE_THREE_OPEN_SQUIGGLE), False),
    ],
)
def test_is_set(cards: tuple[Card, Card, Card], expected: bool) -> None:
    assert rules.is_set(*cards) is expected
    assert rules.Triple(*cards).is_set() is expected


@pytest.mark.parametrize(
    "codes",
    [
        ("R1SD", "G2SD", "P3SD"),
        ("R1SD", "G2SD", "P3OS"),
        ("R1SD", "R2TS", "R3OO"),
        ("G1TO", "G1TO", "P2SD"),
    ],
)
def test_is_set_ignores_card_order(codes: tuple[str, str, str]) -> None:
    cards = cards_from_codes(codes)
    results = {rules.is_set(*perm) for perm in itertools.permutations(cards)}
    assert len(results) == 1


def test_identical_cards_always_form_a_set() -> None:
    for card in full_deck():
        assert rules.is_set(card, card, card)


def test_third_card_completes_every_pair() -> None:
    deck = full_deck()
    for a in deck:
        assert rules.third_card(a, a) == a
        for b in deck:
            assert rules.is_set(a, b, rules.third_card(a, b))


def test_third_card_example() -> None:
    assert rules.third_card(RED_ONE_SOLID_DIAMOND, GREEN_TWO_SOLID_DIAMOND) == PURPLE_THREE_SOLID_DIAMOND


def test_triple_from_cards_requires_three() -> None:
    with pytest.raises(ValueError):
        rules.Triple.from_cards([RED_ONE_SOLID_DIAMOND, GREEN_TWO_SOLID_DIAMOND])

    triple = rules.Triple.from_cards(
        [RED_ONE_SOLID_DIAMOND, GREEN_TWO_SOLID_DIAMOND, PURPLE_THREE_SOLID_DIAMOND]
    )
    assert triple.cards == (RED_ONE_SOLID_DIAMOND, GREEN_TWO_SOLID_DIAMOND, PURPLE_THREE_SOLID_DIAMOND)


def test_find_sets_skips_empty_slots() -> None:
    board = [
        RED_ONE_SOLID_DIAMOND,
        GREEN_TWO_SOLID_DIAMOND,
        PURPLE_THREE_SOLID_DIAMOND,
        None,
        Card.from_code("R1SS"),
    ]

    assert rules.find_sets(board) == [(0, 1, 2)]
    assert rules.first_set(board) == (0, 1, 2)
    assert rules.has_set(board)


def test_board_without_sets() -> None:
    board = [RED_ONE_SOLID_DIAMOND, GREEN_TWO_SOLID_DIAMOND, None, PURPLE_THREE_OPEN_SQUIGGLE]

    assert rules.find_sets(board) == []
    assert rules.first_set(board) is None
    assert not rules.has_set(board)
    assert not rules.has_set([])


def test_full_deck_contains_1080_sets() -> None:
    assert len(rules.find_sets(full_deck())) == 1080
