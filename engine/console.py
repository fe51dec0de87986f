from __future__ import annotations

from dataclasses import dataclass
import logging

from config.console_config import ConsoleConfig
from engine.commands import CommandRegistry
from engine.completion import CompletionState, CompletionView
from engine.dispatcher import EventDispatcher, SubmitHandler
from engine.focus import FocusRouter, Pane
from engine.input_line import InputLine
from engine.keys import KeyEvent, Outcome
from engine.log_buffer import LogBuffer

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ConsoleSnapshot:
    log_lines: tuple[str, ...]
    log_revision: int
    input_text: str
    completion: CompletionView
    focus: Pane


class Console:
    """Session state aggregate: log, input line, completion and focus.

    All UI-side mutation happens on one thread through ``feed``/``handle_key``;
    ``append_log`` may be called from any thread.
    """

    def __init__(self, config: ConsoleConfig | None = None, on_submit: SubmitHandler | None = None) -> None:
        self.config = config or ConsoleConfig()
        self.log_buffer = LogBuffer(self.config.log_capacity)
        self.registry = CommandRegistry(self.config.commands)
        self.completion = CompletionState(self.registry)
        self.input_line = InputLine()
        self.focus = FocusRouter()
        self.dispatcher = EventDispatcher(
            self.completion,
            self.input_line,
            self.log_buffer,
            trigger=self.config.completion_trigger,
            on_submit=on_submit,
        )
        self.focus.register(Pane.INPUT, self.dispatcher.dispatch)

    @classmethod
    def from_config(cls, config: ConsoleConfig, on_submit: SubmitHandler | None = None) -> "Console":
        config.validate()
        console = cls(config, on_submit=on_submit)
        for line in config.welcome_lines:
            console.append_log(line)
        logger.debug(
            "Console ready: capacity=%d commands=%d focus=%s",
            config.log_capacity,
            len(console.registry),
            console.focus.focused.value,
        )
        return console

    @property
    def history(self) -> tuple[str, ...]:
        return tuple(self.dispatcher.history)

    def append_log(self, line: str) -> None:
        self.log_buffer.append(line)

    def handle_key(self, event: KeyEvent) -> Outcome:
        if event.is_character(self.config.help_key):
            self.append_log(self.config.help_text)
            return Outcome.CONSUMED
        return self.focus.route(event)

    def feed(self, event: KeyEvent) -> Outcome:
        outcome = self.handle_key(event)
        if outcome.consumed or self.focus.focused is not Pane.INPUT:
            return outcome
        return self.input_line.apply_default(event)

    def snapshot(self) -> ConsoleSnapshot:
        revision, lines = self.log_buffer.versioned_snapshot()
        return ConsoleSnapshot(
            log_lines=lines,
            log_revision=revision,
            input_text=self.input_line.text,
            completion=self.completion.view(),
            focus=self.focus.focused,
        )
