from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class KeyKind(Enum):
    CHARACTER = "character"
    ENTER = "enter"
    ESCAPE = "escape"
    UP = "up"
    DOWN = "down"
    BACKSPACE = "backspace"


class Outcome(Enum):
    CONSUMED = "consumed"
    NOT_CONSUMED = "not_consumed"

    @property
    def consumed(self) -> bool:
        return self is Outcome.CONSUMED


@dataclass(frozen=True, slots=True)
class KeyEvent:
    kind: KeyKind
    char: str = ""

    @staticmethod
    def character(char: str) -> "KeyEvent":
        if len(char) != 1:
            raise ValueError(f"Character events carry exactly one character, got {char!r}")
        return KeyEvent(kind=KeyKind.CHARACTER, char=char)

    def is_character(self, char: str) -> bool:
        return self.kind is KeyKind.CHARACTER and self.char == char


ENTER = KeyEvent(KeyKind.ENTER)
ESCAPE = KeyEvent(KeyKind.ESCAPE)
UP = KeyEvent(KeyKind.UP)
DOWN = KeyEvent(KeyKind.DOWN)
BACKSPACE = KeyEvent(KeyKind.BACKSPACE)
