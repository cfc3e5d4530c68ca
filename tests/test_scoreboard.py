from __future__ import annotations

import pytest

from setgame import scoreboard
from setgame.cards import Card


def _claim(tick: int, valid: bool) -> scoreboard.ClaimRecord:
    return scoreboard.ClaimRecord(tick=tick, cards=(Card(0), Card(1), Card(2)), valid=valid)


def test_session_history_accumulates_totals() -> None:
    history = scoreboard.SessionHistory()
    history.record(_claim(3, valid=True))
    history.record(_claim(9, valid=False))
    history.record(_claim(12, valid=True))
    history.record_hint()

    totals = history.totals()

    assert totals == scoreboard.SessionTotals(sets_found=2, misses=1, hints_used=1)
    assert totals.score == 1
    assert [claim.tick for claim in history.claims] == [3, 9, 12]


def test_empty_history() -> None:
    assert scoreboard.SessionHistory().totals() == scoreboard.SessionTotals(0, 0, 0)


def test_claim_requires_three_cards() -> None:
    history = scoreboard.SessionHistory()

    with pytest.raises(ValueError):
        history.record(scoreboard.ClaimRecord(tick=0, cards=(Card(0), Card(1)), valid=False))
