"""Typer entry-point wiring for the Set CLI."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from .. import rules
from ..cards import Card
from ..errors import InvalidCardError
from ..logging_utils import get_logger, setup_logging
from ..session import random_seed
from ..state import DEFAULT_BOARD_SIZE, DEFAULT_TICK_RATE, Deck, GameConfig, Table
from .render import format_cards
from .textual import run_textual_app
from .views import board_table, sets_table

app = typer.Typer(add_completion=False, rich_markup_mode="rich")
console = Console()
logger = get_logger(__name__)


def _resolve_seed(seed: int | None) -> int:
    return seed if seed is not None else random_seed()


def _parse_cards(codes: list[str]) -> list[Card]:
    cards: list[Card] = []
    for code in codes:
        try:
            cards.append(Card.from_code(code))
        except InvalidCardError as exc:
            raise typer.BadParameter(str(exc)) from exc
    return cards


@app.command()
def play(
    seed: int | None = typer.Option(None, min=0, help="Random seed for reproducible games (omit for randomness)."),
    board_size: int = typer.Option(DEFAULT_BOARD_SIZE, min=3, help="Number of cards dealt to the board."),
    tick_rate: float = typer.Option(DEFAULT_TICK_RATE, min=0.01, help="Seconds between UI ticks."),
    log_level: str | None = typer.Option(None, help="Logging level (defaults to $SETGAME_LOG_LEVEL or WARNING)."),
    log_file: Path | None = typer.Option(None, help="Write log records to this file."),
) -> None:
    """Play an interactive game in the terminal."""

    setup_logging(log_level, log_file)
    try:
        config = GameConfig(seed=_resolve_seed(seed), board_size=board_size, tick_rate=tick_rate)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    logger.info("starting game with seed %d", config.seed)
    run_textual_app(config)


@app.command()
def deal(
    seed: int | None = typer.Option(None, min=0, help="Random seed for the shuffle (omit for randomness)."),
    count: int = typer.Option(DEFAULT_BOARD_SIZE, min=1, max=81, help="Number of cards to deal."),
) -> None:
    """Deal a board and list the sets it contains."""

    resolved = _resolve_seed(seed)
    table = Table.from_seed(resolved, base_size=count)
    table.deal_board()
    console.print(board_table(table.board, title=f"Board (seed {resolved})"))
    triples = rules.find_sets(table.board)
    if triples:
        console.print(sets_table(table.board, triples))
    else:
        console.print("[yellow]No sets on this board.[/yellow]")


@app.command()
def check(
    codes: list[str] = typer.Argument(..., help="Three card codes such as R1SD G2SD P3SD."),
) -> None:
    """Report whether three cards form a set."""

    if len(codes) != 3:
        raise typer.BadParameter("exactly three card codes are required")
    cards = _parse_cards(codes)
    label = format_cards(cards)
    if rules.is_set(*cards):
        console.print(f"{label}  [bold green]is a set[/bold green]")
        return
    console.print(f"{label}  [bold red]is not a set[/bold red]")
    raise typer.Exit(code=1)


@app.command()
def deck(
    seed: int | None = typer.Option(None, min=0, help="Shuffle with this seed; omit for canonical order."),
) -> None:
    """Print the deck in dealing order."""

    source = Deck.canonical() if seed is None else Deck.from_seed(seed)
    order = list(reversed(list(source)))
    title = "Canonical deck" if seed is None else f"Deck (seed {seed})"
    console.print(board_table(order, title=title))


def main() -> None:
    """Entry-point for ``python -m setgame.cli``."""

    app()


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    main()
