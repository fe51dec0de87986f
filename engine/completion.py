from __future__ import annotations

from dataclasses import dataclass
import logging

from engine.commands import CommandRegistry
from engine.input_line import InputLine
from engine.keys import KeyEvent, KeyKind, Outcome

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CompletionView:
    active: bool
    candidates: tuple[str, ...]
    selected_index: int | None


class CompletionState:
    """Inactive/Active popup state over the full command registry.

    ``selected_index`` is only meaningful while active; readers should go
    through ``selected_command`` or ``view()`` which hide it otherwise.
    """

    def __init__(self, registry: CommandRegistry) -> None:
        self._registry = registry
        self.active = False
        self.selected_index = 0

    @property
    def registry(self) -> CommandRegistry:
        return self._registry

    @property
    def selected_command(self) -> str | None:
        if not self.active:
            return None
        return self._registry[self.selected_index]

    def activate(self) -> None:
        self.selected_index = 0
        self.active = True
        logger.debug("Completion activated with %d candidates", len(self._registry))

    def deactivate(self) -> None:
        self.active = False

    def move_down(self) -> None:
        self.selected_index = (self.selected_index + 1) % len(self._registry)

    def move_up(self) -> None:
        n = len(self._registry)
        self.selected_index = (self.selected_index - 1 + n) % n

    def commit_text(self) -> str:
        return f"/{self._registry[self.selected_index]} "

    def handle(self, event: KeyEvent, input_line: InputLine) -> Outcome:
        if not self.active:
            return Outcome.NOT_CONSUMED
        if event.kind is KeyKind.DOWN:
            self.move_down()
            return Outcome.CONSUMED
        if event.kind is KeyKind.UP:
            self.move_up()
            return Outcome.CONSUMED
        if event.kind is KeyKind.ENTER:
            # Whole-line replacement: anything typed before the trigger is dropped.
            text = self.commit_text()
            input_line.replace(text)
            self.deactivate()
            logger.debug("Completion committed: %r", text)
            return Outcome.CONSUMED
        return Outcome.NOT_CONSUMED

    def view(self) -> CompletionView:
        return CompletionView(
            active=self.active,
            candidates=self._registry.names,
            selected_index=self.selected_index if self.active else None,
        )
