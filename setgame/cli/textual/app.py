"""Textual-powered interactive Set interface."""

from __future__ import annotations

import logging

from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.reactive import reactive
from textual.widgets import Footer, Header, Static

from ...session import GameSession
from ...state import GameConfig
from ..views import BoardView, StatusView

logger = logging.getLogger(__name__)

MAX_EVENT_LINES = 18


class EventLog(Static):
    """Simple rolling log rendered inside a panel."""

    lines: reactive[tuple[str, ...]] = reactive((), init=False)

    def on_mount(self) -> None:  # pragma: no cover - widget lifecycle glue
        self._refresh()

    def set_lines(self, messages: list[str]) -> None:
        self.lines = tuple(messages[-MAX_EVENT_LINES:])

    def watch_lines(self, value: tuple[str, ...]) -> None:
        self._refresh(value)

    def _refresh(self, lines: tuple[str, ...] | None = None) -> None:
        content = Table.grid(padding=(0, 1))
        content.expand = True
        content.add_column(justify="left")
        rows = lines if lines is not None else self.lines
        if rows:
            for line in rows:
                content.add_row(Text(line))
        else:
            content.add_row(Text.from_markup("[dim]Event log will appear here[/dim]"))
        self.update(Panel(content, title="Events", border_style="magenta"))


class StatusStrip(Static):
    """Single line status helper."""

    message: reactive[str] = reactive("", init=False)

    def watch_message(self, value: str) -> None:
        self.update(Panel(Text(value or "Ready"), border_style="green"))


class SetTextualApp(App):
    """Textual Set game UI."""

    CSS = """
    Screen {
        layout: vertical;
        height: 100%;
    }

    #main {
        layout: horizontal;
        height: 1fr;
    }

    #board {
        width: auto;
        padding: 0 1;
    }

    #side {
        layout: vertical;
        width: 1fr;
        padding: 0 1;
    }

    StatusStrip {
        width: 100%;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("ctrl+c", "quit", "Quit", show=False),
        Binding("up", "move('up')", "Up", show=False),
        Binding("down", "move('down')", "Down", show=False),
        Binding("left", "move('left')", "Left", show=False),
        Binding("right", "move('right')", "Right", show=False),
        Binding("space", "session_key(' ')", "Select"),
        Binding("x", "session_key('x')", "Select", show=False),
        Binding("a", "session_key('a')", "Add cards"),
        Binding("h", "session_key('h')", "Hint"),
    ]

    TITLE = "Set"

    def __init__(self, config: GameConfig) -> None:
        super().__init__()
        self.session = GameSession(config)
        self.sub_title = f"seed {self.session.seed}"

        # Widgets initialised in compose
        self.status_strip: StatusStrip | None = None
        self.board_panel: Static | None = None
        self.info_panel: Static | None = None
        self.event_log: EventLog | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=False)
        self.status_strip = StatusStrip(id="status")
        yield self.status_strip

        self.board_panel = Static(id="board")
        self.info_panel = Static(id="info")
        self.event_log = EventLog(id="events")
        yield Horizontal(
            self.board_panel,
            Vertical(self.info_panel, self.event_log, id="side"),
            id="main",
        )
        yield Footer()

    def on_mount(self) -> None:
        self.set_interval(self.session.config.tick_rate, self._on_tick)
        self._refresh_ui()

    def _on_tick(self) -> None:
        self.session.on_tick()
        if self.info_panel is not None:
            self.info_panel.update(self._status_view().render())

    def action_move(self, direction: str) -> None:
        handlers = {
            "up": self.session.on_up,
            "down": self.session.on_down,
            "left": self.session.on_left,
            "right": self.session.on_right,
        }
        handlers[direction]()
        self._refresh_ui()

    def action_session_key(self, key: str) -> None:
        self.session.on_key(key)
        self._refresh_ui()

    async def action_quit(self) -> None:
        self.session.quit()
        logger.info("quit after %.2fs with %s", self.session.elapsed, self.session.totals)
        self.exit()

    def _status_view(self) -> StatusView:
        session = self.session
        return StatusView(
            seed=session.seed,
            deck_size=len(session.table.deck),
            board=session.board,
            totals=session.totals,
            elapsed=session.elapsed,
        )

    def _refresh_ui(self) -> None:
        session = self.session
        if self.board_panel is not None:
            view = BoardView(
                board=session.board,
                columns=session.columns,
                cursor=session.selected_card,
                selection=set(session.selection),
                hint=session.hint or (),
            )
            self.board_panel.update(view.render())
        if self.info_panel is not None:
            self.info_panel.update(self._status_view().render())
        if self.status_strip is not None:
            self.status_strip.message = session.status
        if self.event_log is not None:
            self.event_log.set_lines(session.events)


def run_textual_app(config: GameConfig) -> None:
    """Launch the Textual UI."""

    app = SetTextualApp(config)
    app.run()
