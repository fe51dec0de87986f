from __future__ import annotations

from enum import Enum
import logging
from typing import Callable, Iterable

from engine.keys import KeyEvent, Outcome

logger = logging.getLogger(__name__)

PaneHandler = Callable[[KeyEvent], Outcome]


class Pane(Enum):
    LOG_AND_HEADER = "log_and_header"
    INPUT = "input"
    COMPLETIONS = "completions"


PANE_ORDER: tuple[Pane, ...] = (Pane.LOG_AND_HEADER, Pane.INPUT, Pane.COMPLETIONS)


class FocusRouter:
    """Single selector over a fixed pane order; keys go to the focused pane only."""

    def __init__(self, panes: Iterable[Pane] = PANE_ORDER, default: Pane = Pane.INPUT) -> None:
        self._panes = tuple(panes)
        if not self._panes:
            raise ValueError("FocusRouter requires at least one pane.")
        if len(set(self._panes)) != len(self._panes):
            raise ValueError("FocusRouter panes must be unique.")
        self._selector = self._index_of(default)
        self._handlers: dict[Pane, PaneHandler] = {}

    @property
    def panes(self) -> tuple[Pane, ...]:
        return self._panes

    @property
    def selector(self) -> int:
        return self._selector

    @property
    def focused(self) -> Pane:
        return self._panes[self._selector]

    def focus(self, pane: Pane) -> None:
        index = self._index_of(pane)
        if index != self._selector:
            logger.debug("Focus moved: %s -> %s", self.focused.value, pane.value)
        self._selector = index

    def cycle(self, step: int = 1) -> Pane:
        self._selector = (self._selector + step) % len(self._panes)
        return self.focused

    def register(self, pane: Pane, handler: PaneHandler) -> None:
        self._index_of(pane)
        self._handlers[pane] = handler

    def route(self, event: KeyEvent) -> Outcome:
        handler = self._handlers.get(self.focused)
        if handler is None:
            return Outcome.NOT_CONSUMED
        return handler(event)

    def _index_of(self, pane: Pane) -> int:
        try:
            return self._panes.index(pane)
        except ValueError:
            raise ValueError(f"Unknown pane: {pane!r}") from None
