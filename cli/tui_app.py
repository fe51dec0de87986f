from __future__ import annotations

import logging

from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.containers import Vertical
from textual.widgets import Footer, RichLog, Static

from config.console_config import ConsoleConfig
from engine.console import Console, ConsoleSnapshot
from engine.focus import Pane
from engine.keys import BACKSPACE, DOWN, ENTER, ESCAPE, UP, KeyEvent

logger = logging.getLogger(__name__)

_NAMED_KEYS: dict[str, KeyEvent] = {
    "enter": ENTER,
    "escape": ESCAPE,
    "up": UP,
    "down": DOWN,
    "backspace": BACKSPACE,
}


def key_event_from_textual(key: str, character: str | None) -> KeyEvent | None:
    named = _NAMED_KEYS.get(key)
    if named is not None:
        return named
    if character is not None and len(character) == 1 and character.isprintable():
        return KeyEvent.character(character)
    return None


def _render_header(config: ConsoleConfig) -> Text:
    return Text.assemble((config.title, "bold"), "  ", (config.version_label, "dim"))


def _render_input(text: str, placeholder: str) -> Text:
    if not text:
        return Text(placeholder, style="dim")
    return Text(text)


def _lines_since(lines: tuple[str, ...], revision: int, cleared_revision: int) -> tuple[str, ...]:
    # Each append bumps the revision by one, so the newest (revision - cleared) lines postdate the clear.
    fresh = min(len(lines), max(0, revision - cleared_revision))
    return lines[len(lines) - fresh :]


def _render_completion(snapshot: ConsoleSnapshot) -> Text:
    view = snapshot.completion
    lines: list[Text] = []
    for idx, label in enumerate(view.candidates):
        if idx == view.selected_index:
            lines.append(Text(label, style="reverse"))
        else:
            lines.append(Text(label))
    return Text("\n").join(lines)


class LogPane(RichLog):
    PANE = Pane.LOG_AND_HEADER

    async def on_key(self, event: events.Key) -> None:
        self.app.route_key(event)

    def on_focus(self, event: events.Focus) -> None:
        self.app.engine.focus.focus(self.PANE)


class CommandLine(Static, can_focus=True):
    PANE = Pane.INPUT

    async def on_key(self, event: events.Key) -> None:
        self.app.route_key(event)

    def on_focus(self, event: events.Focus) -> None:
        self.app.engine.focus.focus(self.PANE)


class QuickAdbTuiApp(App[None]):
    TITLE = "quick-adb"
    REFRESH_INTERVAL_S = 0.1
    CSS = """
    #header {
        border: round $primary;
        padding: 0 1;
        height: auto;
    }
    #log-pane {
        height: 1fr;
        border: round $primary;
        border-title-style: bold;
    }
    #cmd {
        border: round $accent;
        padding: 0 1;
        height: 3;
    }
    #completion {
        border: round $secondary;
        padding: 0 1;
        height: auto;
        display: none;
    }
    """

    BINDINGS = [
        ("ctrl+l", "clear_log", "Clear Log"),
        ("ctrl+c", "quit", "Quit"),
    ]

    def __init__(self, engine: Console | None = None) -> None:
        super().__init__()
        self.engine = engine or Console.from_config(ConsoleConfig())
        self._rendered_revision = -1
        self._cleared_revision = 0

    def compose(self) -> ComposeResult:
        config = self.engine.config
        yield Static(_render_header(config), id="header")
        with Vertical(id="log-pane"):
            yield LogPane(id="log", highlight=False, markup=False, wrap=True)
        yield CommandLine(_render_input("", config.placeholder), id="cmd")
        yield Static(id="completion")
        yield Footer()

    def on_mount(self) -> None:
        self.query_one("#log-pane", Vertical).border_title = f" {self.engine.config.log_title} "
        self.query_one(CommandLine).focus()
        self.set_interval(self.REFRESH_INTERVAL_S, self.refresh_panes)
        self.refresh_panes()
        logger.info("Console started with %d commands", len(self.engine.registry))

    def on_unmount(self) -> None:
        logger.info("Console stopped after %d submitted commands", len(self.engine.history))

    def action_clear_log(self) -> None:
        revision, _ = self.engine.log_buffer.versioned_snapshot()
        self._cleared_revision = revision
        self._rendered_revision = revision
        self.query_one(LogPane).clear()

    def route_key(self, event: events.Key) -> None:
        key = key_event_from_textual(event.key, event.character)
        if key is None:
            return
        outcome = self.engine.feed(key)
        if outcome.consumed:
            event.stop()
            event.prevent_default()
        self.refresh_panes()

    def refresh_panes(self) -> None:
        snapshot = self.engine.snapshot()
        self._render_log(snapshot)

        cmd = self.query_one(CommandLine)
        cmd.update(_render_input(snapshot.input_text, self.engine.config.placeholder))

        completion = self.query_one("#completion", Static)
        if snapshot.completion.active:
            completion.update(_render_completion(snapshot))
            completion.styles.display = "block"
        else:
            completion.update("")
            completion.styles.display = "none"

    def _render_log(self, snapshot: ConsoleSnapshot) -> None:
        if snapshot.log_revision == self._rendered_revision:
            return
        log = self.query_one(LogPane)
        log.clear()
        for line in _lines_since(snapshot.log_lines, snapshot.log_revision, self._cleared_revision):
            log.write(Text(line))
        self._rendered_revision = snapshot.log_revision


if __name__ == "__main__":
    QuickAdbTuiApp().run()
