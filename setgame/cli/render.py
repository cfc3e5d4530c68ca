"""Rendering helpers dedicated to the CLI experience."""

from __future__ import annotations

from typing import Sequence

from rich.text import Text

from ..cards import Card, Color, Shade, Shape

_SYMBOLS: dict[Shape, dict[Shade, str]] = {
    Shape.DIAMOND: {
        Shade.SOLID: "◆",
        Shade.STRIPED: "⬖",
        Shade.OPEN: "◇",
    },
    Shape.OVAL: {
        Shade.SOLID: "●",
        Shade.STRIPED: "◐",
        Shade.OPEN: "○",
    },
    Shape.SQUIGGLE: {
        Shade.SOLID: "⧓",
        Shade.STRIPED: "⧑",
        Shade.OPEN: "⋈",
    },
}

_COLORS: dict[Color, str] = {
    Color.RED: "red",
    Color.GREEN: "green",
    Color.PURPLE: "magenta",
}

CARD_TEXT_WIDTH = 5


def card_symbol(shape: Shape, shade: Shade) -> str:
    """Return the glyph drawn for ``shape`` filled with ``shade``."""

    return _SYMBOLS[shape][shade]


def card_color(color: Color) -> str:
    """Return the Rich color name used for ``color``."""

    return _COLORS[color]


def card_text(card: Card) -> str:
    """Return the symbols of ``card`` padded to a fixed width."""

    props = card.properties
    symbol = card_symbol(props.shape, props.shade)
    symbols = " ".join(symbol for _ in range(props.count.symbols))
    return symbols.ljust(CARD_TEXT_WIDTH)


def format_card(card: Card | None) -> str:
    """Return a Rich-markup label for ``card``."""

    if card is None:
        return "[dim]·[/dim]"
    color = card_color(card.color)
    return f"[{color}]{card_text(card).rstrip()}[/{color}]"


def format_cards(cards: Sequence[Card | None]) -> str:
    return "  ".join(format_card(card) for card in cards)


def card_renderable(card: Card | None) -> Text:
    """Return a styled :class:`~rich.text.Text` for ``card``."""

    if card is None:
        return Text(" " * CARD_TEXT_WIDTH)
    return Text(card_text(card), style=card_color(card.color))
