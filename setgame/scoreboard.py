"""Helpers for tracking claims made during a Set session."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from .cards import Card

__all__ = ["ClaimRecord", "SessionTotals", "SessionHistory"]


@dataclass(frozen=True, slots=True)
class ClaimRecord:
    """A single attempt to claim three cards as a set."""

    tick: int
    cards: Sequence[Card]
    valid: bool


@dataclass(frozen=True, slots=True)
class SessionTotals:
    """Aggregate totals accumulated across all recorded claims."""

    sets_found: int
    misses: int
    hints_used: int

    @property
    def score(self) -> int:
        return self.sets_found - self.misses


@dataclass(slots=True)
class SessionHistory:
    """Mutable tracker that accumulates claims for a session."""

    claims: list[ClaimRecord] = field(default_factory=list)
    _hints: int = field(default=0, init=False, repr=False)

    def record(self, claim: ClaimRecord) -> None:
        """Record ``claim`` and update cumulative totals."""

        if len(claim.cards) != 3:
            raise ValueError("a claim must contain exactly three cards")
        self.claims.append(claim)

    def record_hint(self) -> None:
        self._hints += 1

    def totals(self) -> SessionTotals:
        """Return the cumulative totals for the session."""

        found = sum(1 for claim in self.claims if claim.valid)
        return SessionTotals(
            sets_found=found,
            misses=len(self.claims) - found,
            hints_used=self._hints,
        )
