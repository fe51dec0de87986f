from __future__ import annotations

from typing import Iterable, Iterator


DEFAULT_COMMANDS: tuple[str, ...] = (
    "connect",
    "disconnect",
    "devices",
    "logcat",
    "screenrecord",
    "screenshot",
    "help",
    "version",
)


class CommandRegistry:
    """Immutable ordered catalog of command names offered as completions."""

    __slots__ = ("_names",)

    def __init__(self, names: Iterable[str] = DEFAULT_COMMANDS) -> None:
        resolved = tuple(names)
        if not resolved:
            raise ValueError("CommandRegistry requires at least one command.")
        seen: set[str] = set()
        for name in resolved:
            if not isinstance(name, str) or not name.strip():
                raise ValueError(f"Command names must be non-empty strings, got {name!r}")
            if name in seen:
                raise ValueError(f"Duplicate command name: {name}")
            seen.add(name)
        self._names = resolved

    @property
    def names(self) -> tuple[str, ...]:
        return self._names

    def __len__(self) -> int:
        return len(self._names)

    def __getitem__(self, index: int) -> str:
        return self._names[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __repr__(self) -> str:
        return f"CommandRegistry({list(self._names)!r})"
