"""Deck and table state for a game of Set."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, List, Sequence

import numpy as np

from .cards import Card, full_deck
from .errors import DuplicateCardError

logger = logging.getLogger(__name__)

DEFAULT_BOARD_SIZE = 12
DEFAULT_COLUMNS = 3
DEFAULT_TICK_RATE = 0.25
DEFAULT_MAX_BOARD_SIZE = 21


class TablePhase(str, Enum):
    """Lifecycle of the undealt cards."""

    FRESH = "fresh"
    DEALING = "dealing"
    EXHAUSTED = "exhausted"


@dataclass(slots=True)
class GameConfig:
    """Runtime configuration for a single game."""

    seed: int | None = None
    board_size: int = DEFAULT_BOARD_SIZE
    columns: int = DEFAULT_COLUMNS
    tick_rate: float = DEFAULT_TICK_RATE
    max_board_size: int = DEFAULT_MAX_BOARD_SIZE

    def __post_init__(self) -> None:
        if self.board_size <= 0:
            raise ValueError("board_size must be positive")
        if self.columns <= 0:
            raise ValueError("columns must be positive")
        if self.tick_rate <= 0:
            raise ValueError("tick_rate must be positive")
        if self.max_board_size < self.board_size:
            raise ValueError("max_board_size must be at least board_size")
        if self.seed is not None and self.seed < 0:
            raise ValueError("seed must be non-negative")


def shuffled_order(seed: int, size: int) -> list[int]:
    """Return a reproducible permutation of ``range(size)`` for ``seed``."""

    rng = np.random.Generator(np.random.PCG64(seed))
    return [int(idx) for idx in rng.permutation(size)]


class Deck:
    """The remaining undealt cards; dealing pops from the end."""

    __slots__ = ("_cards", "_dealt")

    def __init__(self, cards: Iterable[Card]) -> None:
        self._cards: List[Card] = list(cards)
        if len(set(self._cards)) != len(self._cards):
            raise DuplicateCardError("deck contains duplicate cards")
        self._dealt = 0

    @classmethod
    def canonical(cls) -> "Deck":
        """Return a complete deck in canonical order."""

        return cls(full_deck())

    @classmethod
    def from_seed(cls, seed: int) -> "Deck":
        """Return a complete deck shuffled deterministically from ``seed``."""

        canonical = full_deck()
        order = shuffled_order(seed, len(canonical))
        logger.debug("shuffled deck with seed %d", seed)
        return cls(canonical[idx] for idx in order)

    @property
    def remaining(self) -> Sequence[Card]:
        return tuple(self._cards)

    @property
    def is_exhausted(self) -> bool:
        return not self._cards

    @property
    def phase(self) -> TablePhase:
        if not self._cards:
            return TablePhase.EXHAUSTED
        if self._dealt == 0:
            return TablePhase.FRESH
        return TablePhase.DEALING

    def deal(self) -> Card | None:
        """Remove and return the last card, or ``None`` once exhausted."""

        if not self._cards:
            return None
        self._dealt += 1
        return self._cards.pop()

    def deal_many(self, count: int) -> list[Card]:
        """Deal up to ``count`` cards; fewer are returned once exhausted."""

        dealt: list[Card] = []
        for _ in range(max(count, 0)):
            card = self.deal()
            if card is None:
                break
            dealt.append(card)
        return dealt

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __contains__(self, card: object) -> bool:
        return card in self._cards

    def __repr__(self) -> str:
        return f"Deck(remaining={len(self._cards)}, phase={self.phase.value!r})"


class Table:
    """The full game state: the undealt deck plus the visible board."""

    __slots__ = ("deck", "board", "base_size")

    def __init__(self, deck: Deck, base_size: int = DEFAULT_BOARD_SIZE) -> None:
        self.deck = deck
        self.board: List[Card | None] = []
        self.base_size = base_size

    @classmethod
    def from_seed(cls, seed: int, base_size: int = DEFAULT_BOARD_SIZE) -> "Table":
        """Set up a table without listing the deck order."""

        return cls(Deck.from_seed(seed), base_size=base_size)

    @property
    def phase(self) -> TablePhase:
        return self.deck.phase

    def board_mut(self) -> List[Card | None]:
        """Allow an external entity to manipulate the board."""

        return self.board

    def deal(self) -> Card | None:
        """Deal a single card from the deck."""

        return self.deck.deal()

    def deal_board(self, size: int | None = None) -> list[Card]:
        """Fill empty slots and extend the board up to ``size`` slots."""

        target = self.base_size if size is None else size
        dealt: list[Card] = []
        for idx, slot in enumerate(self.board):
            if slot is None:
                card = self.deck.deal()
                if card is None:
                    return dealt
                self.board[idx] = card
                dealt.append(card)
        while len(self.board) < target:
            card = self.deck.deal()
            if card is None:
                break
            self.board.append(card)
            dealt.append(card)
        logger.debug("dealt %d card(s); %d remain", len(dealt), len(self.deck))
        return dealt

    def add_cards(self, count: int = 3) -> list[Card]:
        """Extend the board by up to ``count`` cards."""

        dealt = self.deck.deal_many(count)
        self.board.extend(dealt)
        logger.debug("added %d card(s) to the board", len(dealt))
        return dealt

    def replace(self, indices: Iterable[int]) -> list[Card | None]:
        """Remove the cards at ``indices`` and refill their slots.

        Boards larger than the base size are compacted instead of refilled.
        Slots that cannot be refilled from an exhausted deck become ``None``.
        Returns the removed cards.
        """

        slots = sorted(set(indices))
        for idx in slots:
            if not 0 <= idx < len(self.board):
                raise IndexError(f"board slot {idx} out of range")
        removed = [self.board[idx] for idx in slots]
        if len(self.board) > self.base_size:
            for idx in reversed(slots):
                del self.board[idx]
            # Top up when compaction leaves fewer than base_size slots.
            while len(self.board) < self.base_size:
                card = self.deck.deal()
                if card is None:
                    break
                self.board.append(card)
        else:
            for idx in slots:
                self.board[idx] = self.deck.deal()
        logger.debug("replaced slots %s; %d card(s) remain", slots, len(self.deck))
        return removed
