"""Composable view primitives for the Set CLI."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence, Set

from rich import box
from rich.align import Align
from rich.console import RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .. import rules
from ..cards import Card
from ..scoreboard import SessionTotals
from .render import card_renderable

CARD_WIDTH = 12
CARD_HEIGHT = 5


@dataclass(slots=True)
class BoardView:
    """Renderable laying the board out as a grid of card tiles."""

    board: Sequence[Card | None]
    columns: int = 3
    cursor: int | None = None
    selection: Set[int] = field(default_factory=set)
    hint: Sequence[int] = ()

    def _border_style(self, idx: int) -> str:
        if idx in self.selection:
            return "bold yellow"
        if idx in self.hint:
            return "bold cyan"
        return "white"

    def _tile(self, idx: int, card: Card | None) -> Panel:
        title = f"[bold magenta]{idx}[/bold magenta]"
        if idx == self.cursor:
            title = f"[reverse]{title}[/reverse]"
        return Panel(
            Align.center(card_renderable(card), vertical="middle"),
            title=title,
            title_align="left",
            width=CARD_WIDTH,
            height=CARD_HEIGHT,
            box=box.HEAVY if idx == self.cursor else box.ROUNDED,
            border_style=self._border_style(idx),
        )

    def render(self) -> RenderableType:
        grid = Table.grid(padding=(0, 1))
        for _ in range(self.columns):
            grid.add_column()
        row: list[RenderableType] = []
        for idx, card in enumerate(self.board):
            row.append(self._tile(idx, card))
            if len(row) == self.columns:
                grid.add_row(*row)
                row = []
        if row:
            grid.add_row(*row)
        return grid


@dataclass(slots=True)
class StatusView:
    """Renderable summarising seed, deck and score."""

    seed: int
    deck_size: int
    board: Sequence[Card | None]
    totals: SessionTotals
    elapsed: float

    def render(self) -> RenderableType:
        grid = Table.grid(expand=True)
        grid.add_column(justify="left")
        grid.add_row(f"[cyan]Seed[/cyan]: {self.seed}")
        grid.add_row(f"[cyan]Deck[/cyan]: {self.deck_size} card(s)")
        grid.add_row(f"[cyan]Sets on board[/cyan]: {len(rules.find_sets(self.board))}")
        grid.add_row(f"[cyan]Found[/cyan]: {self.totals.sets_found}")
        grid.add_row(f"[cyan]Misses[/cyan]: {self.totals.misses}")
        grid.add_row(f"[cyan]Hints[/cyan]: {self.totals.hints_used}")
        minutes, seconds = divmod(int(self.elapsed), 60)
        grid.add_row(f"[cyan]Time[/cyan]: {minutes:02d}:{seconds:02d}")
        return Panel(grid, title="Game", box=box.SQUARE, border_style="blue")


def board_table(board: Sequence[Card | None], title: str = "Board") -> Table:
    """Return a plain Rich table listing the slots of ``board``."""

    table = Table(title=title, box=box.SIMPLE_HEAVY)
    table.add_column("Slot", justify="right")
    table.add_column("Code", justify="center")
    table.add_column("Card", justify="left")
    for idx, card in enumerate(board):
        table.add_row(str(idx), card.code if card is not None else "—", card_renderable(card))
    return table


def sets_table(board: Sequence[Card | None], triples: Sequence[tuple[int, int, int]]) -> Table:
    table = Table(title="Sets", box=box.SIMPLE)
    table.add_column("Slots", justify="left")
    table.add_column("Cards", justify="left")
    for triple in triples:
        cards = Text(" | ").join(card_renderable(board[idx]) for idx in triple)
        table.add_row(", ".join(str(idx) for idx in triple), cards)
    return table
