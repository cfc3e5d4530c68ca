"""UI-independent controller for an interactive Set game."""

from __future__ import annotations

import logging
import random
from typing import Callable

from . import rules
from .cards import Card, format_codes
from .scoreboard import ClaimRecord, SessionHistory, SessionTotals
from .state import GameConfig, Table

logger = logging.getLogger(__name__)

MAX_EVENT_LOG = 12


def _append_event(log: list[str], message: str) -> None:
    """Append ``message`` to ``log`` maintaining a bounded log length."""

    log.append(message)
    excess = len(log) - MAX_EVENT_LOG
    if excess > 0:
        del log[:excess]


def random_seed() -> int:
    return random.SystemRandom().randrange(0, 2**63)


class GameSession:
    """Game state plus cursor, selection and scoring for one player."""

    def __init__(self, config: GameConfig | None = None) -> None:
        self.config = config or GameConfig()
        self.seed = self.config.seed if self.config.seed is not None else random_seed()
        self.table = Table.from_seed(self.seed, base_size=self.config.board_size)
        self.table.deal_board()
        self.selected_card = 0
        self.selection: set[int] = set()
        self.hint: tuple[int, int, int] | None = None
        self.history = SessionHistory()
        self.events: list[str] = []
        self.status = "Find a set"
        self.ticks = 0
        self.should_quit = False
        self._key_handlers: dict[str, Callable[[], None]] = {
            "q": self.quit,
            " ": self.toggle_selection,
            "x": self.toggle_selection,
            "a": self.add_cards,
            "h": self.show_hint,
        }
        logger.info("new session seed=%d board=%d", self.seed, len(self.table.board))

    @property
    def board(self) -> list[Card | None]:
        return self.table.board

    @property
    def columns(self) -> int:
        return self.config.columns

    @property
    def elapsed(self) -> float:
        """Seconds played, derived from the tick counter."""

        return self.ticks * self.config.tick_rate

    @property
    def totals(self) -> SessionTotals:
        return self.history.totals()

    @property
    def is_over(self) -> bool:
        return self.table.deck.is_exhausted and not rules.has_set(self.board)

    def _log(self, message: str) -> None:
        self.status = message
        _append_event(self.events, message)

    def on_up(self) -> None:
        if self.selected_card - self.columns >= 0:
            self.selected_card -= self.columns

    def on_down(self) -> None:
        if self.selected_card + self.columns < len(self.board):
            self.selected_card += self.columns

    def on_left(self) -> None:
        if self.selected_card % self.columns > 0:
            self.selected_card -= 1

    def on_right(self) -> None:
        if self.selected_card % self.columns < self.columns - 1 and self.selected_card + 1 < len(self.board):
            self.selected_card += 1

    def on_key(self, key: str) -> None:
        handler = self._key_handlers.get(key)
        if handler is not None:
            handler()

    def on_tick(self) -> None:
        self.ticks += 1

    def quit(self) -> None:
        self.should_quit = True

    def toggle_selection(self) -> None:
        """Toggle the card under the cursor; three selected cards are claimed."""

        idx = self.selected_card
        if not 0 <= idx < len(self.board) or self.board[idx] is None:
            return
        if idx in self.selection:
            self.selection.remove(idx)
            return
        self.selection.add(idx)
        if len(self.selection) == 3:
            self.claim(sorted(self.selection))

    def claim(self, indices: list[int]) -> bool:
        """Evaluate the cards at ``indices``; a set is removed and replaced."""

        self.selection.clear()
        if len(indices) != 3 or len(set(indices)) != 3:
            raise ValueError("a claim needs three distinct board slots")
        cards = [self.board[idx] for idx in indices]
        if any(card is None for card in cards):
            raise ValueError("a claim needs three occupied board slots")
        triple = rules.Triple.from_cards(card for card in cards if card is not None)
        valid = triple.is_set()
        self.history.record(ClaimRecord(tick=self.ticks, cards=triple.cards, valid=valid))
        logger.debug("claim %s valid=%s", format_codes(triple.cards), valid)
        if valid:
            self.table.replace(indices)
            self.hint = None
            self._log(f"Set! {format_codes(triple.cards)}")
            if self.selected_card >= len(self.board):
                self.selected_card = max(len(self.board) - 1, 0)
            if self.is_over:
                self._log("No sets remain: game over")
        else:
            self._log(f"Not a set: {format_codes(triple.cards)}")
        return valid

    def add_cards(self) -> None:
        """Deal three extra cards when the board shows no set."""

        if rules.has_set(self.board):
            self._log("There is still a set on the board")
            return
        if self.table.deck.is_exhausted:
            self._log("The deck is empty")
            return
        if len(self.board) + 3 > self.config.max_board_size:
            self._log("The board is full")
            return
        dealt = self.table.add_cards(3)
        self._log(f"Dealt {len(dealt)} more card(s)")

    def show_hint(self) -> None:
        self.hint = rules.first_set(self.board)
        if self.hint is None:
            self._log("No set on the board; press a to deal more")
        else:
            self.history.record_hint()
            self._log("Hint: slots " + ", ".join(str(idx) for idx in self.hint))
