from __future__ import annotations

from engine.keys import KeyEvent, KeyKind, Outcome


class InputLine:
    """Not-yet-submitted command text. Edits only ever happen at the end."""

    def __init__(self, text: str = "") -> None:
        self._text = text

    @property
    def text(self) -> str:
        return self._text

    def replace(self, text: str) -> None:
        self._text = text

    def insert(self, text: str) -> None:
        self._text += text

    def backspace(self) -> None:
        self._text = self._text[:-1]

    def clear(self) -> None:
        self._text = ""

    def apply_default(self, event: KeyEvent) -> Outcome:
        if event.kind is KeyKind.CHARACTER and event.char.isprintable():
            self.insert(event.char)
            return Outcome.CONSUMED
        if event.kind is KeyKind.BACKSPACE:
            self.backspace()
            return Outcome.CONSUMED
        return Outcome.NOT_CONSUMED

    def __repr__(self) -> str:
        return f"InputLine({self._text!r})"
