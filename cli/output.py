from __future__ import annotations

from engine.commands import CommandRegistry


def print_commands(registry: CommandRegistry, trigger: str = "/") -> None:
    print("Available commands:")
    for name in registry:
        print(f"  {trigger}{name}")


def print_version(version_label: str) -> None:
    print(version_label)
