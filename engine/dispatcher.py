from __future__ import annotations

from collections import deque
import logging
from typing import Callable

from engine.completion import CompletionState
from engine.input_line import InputLine
from engine.keys import KeyEvent, KeyKind, Outcome
from engine.log_buffer import LogBuffer

logger = logging.getLogger(__name__)

SubmitHandler = Callable[[str], None]


class EventDispatcher:
    """Per-keystroke decision procedure for the input pane.

    Rules are tried in ``RULES`` order; each returns an ``Outcome`` when it
    applies or ``None`` to defer to the next rule.
    """

    RULES = ("_completion_rule", "_escape_rule", "_trigger_rule", "_submit_rule", "_fallthrough_rule")

    def __init__(
        self,
        completion: CompletionState,
        input_line: InputLine,
        log_buffer: LogBuffer,
        *,
        trigger: str = "/",
        on_submit: SubmitHandler | None = None,
    ) -> None:
        self.completion = completion
        self.input_line = input_line
        self.log_buffer = log_buffer
        self.trigger = trigger
        self.on_submit = on_submit
        # Same bound as the log buffer.
        self.history: deque[str] = deque(maxlen=log_buffer.capacity)

    def dispatch(self, event: KeyEvent) -> Outcome:
        for name in self.RULES:
            outcome = getattr(self, name)(event)
            if outcome is not None:
                return outcome
        return Outcome.NOT_CONSUMED

    def _completion_rule(self, event: KeyEvent) -> Outcome | None:
        if not self.completion.active:
            return None
        if self.completion.handle(event, self.input_line).consumed:
            return Outcome.CONSUMED
        return None

    def _escape_rule(self, event: KeyEvent) -> Outcome | None:
        if event.kind is not KeyKind.ESCAPE:
            return None
        self.input_line.clear()
        self.completion.deactivate()
        return Outcome.CONSUMED

    def _trigger_rule(self, event: KeyEvent) -> Outcome | None:
        if not event.is_character(self.trigger):
            return None
        self.completion.activate()
        # The trigger character still reaches the line editor.
        return Outcome.NOT_CONSUMED

    def _submit_rule(self, event: KeyEvent) -> Outcome | None:
        if event.kind is not KeyKind.ENTER:
            return None
        line = self.input_line.text
        self.log_buffer.append(f"> {line}")
        self.input_line.clear()
        self.completion.deactivate()
        self.history.append(line)
        logger.info("Command submitted: %r", line)
        if self.on_submit is not None:
            self.on_submit(line)
        return Outcome.CONSUMED

    def _fallthrough_rule(self, event: KeyEvent) -> Outcome | None:
        return Outcome.NOT_CONSUMED
