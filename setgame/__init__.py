"""Top-level package for the Set card game."""

from . import cards, encoding, rules, session, state
from .cards import Card, CardProperties, Color, Count, Shade, Shape
from .rules import is_set

__all__ = [
    "Card",
    "CardProperties",
    "Color",
    "Count",
    "Shade",
    "Shape",
    "cards",
    "encoding",
    "is_set",
    "rules",
    "session",
    "state",
]
