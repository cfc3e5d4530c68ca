"""Exception types raised by the Set card model."""

from __future__ import annotations

__all__ = [
    "SetGameError",
    "InvalidAttributeError",
    "InvalidCardError",
    "DuplicateCardError",
]


class SetGameError(Exception):
    """Base class for all errors raised by :mod:`setgame`."""


class InvalidAttributeError(SetGameError, ValueError):
    """An attribute index or card identifier falls outside its valid range."""


class InvalidCardError(InvalidAttributeError):
    """A card could not be built from the supplied identifier or code."""


class DuplicateCardError(SetGameError, ValueError):
    """A deck was assembled with the same card more than once."""
