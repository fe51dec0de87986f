from __future__ import annotations

from dataclasses import dataclass

from engine.commands import DEFAULT_COMMANDS
from engine.log_buffer import DEFAULT_LOG_CAPACITY


DEFAULT_HELP_TEXT = "Help: Type commands. '/' triggers completions. Enter to run."
DEFAULT_WELCOME_LINES: tuple[str, ...] = (
    "quick-adb v0.0.1",
    "Welcome to the prototype. Type a command below.",
)


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    title: str = "QUICK ADB"
    version_label: str = "quick-adb v0.0.1"
    log_title: str = "Command Log"
    placeholder: str = "Type a command. Use '/' to trigger completions."
    log_capacity: int = DEFAULT_LOG_CAPACITY
    commands: tuple[str, ...] = DEFAULT_COMMANDS
    welcome_lines: tuple[str, ...] = DEFAULT_WELCOME_LINES
    help_key: str = "?"
    completion_trigger: str = "/"
    help_text: str = DEFAULT_HELP_TEXT

    def validate(self) -> None:
        # bool is a subclass of int; reject it explicitly.
        if isinstance(self.log_capacity, bool) or not isinstance(self.log_capacity, int):
            raise ValueError("ConsoleConfig.log_capacity must be an integer.")
        if self.log_capacity < 1:
            raise ValueError("ConsoleConfig.log_capacity must be >= 1.")

        if not self.commands:
            raise ValueError("ConsoleConfig.commands must not be empty.")
        for name in self.commands:
            if not isinstance(name, str) or not name.strip():
                raise ValueError(f"ConsoleConfig.commands contains an empty name: {name!r}")
        if len(set(self.commands)) != len(self.commands):
            raise ValueError("ConsoleConfig.commands must not contain duplicates.")

        for field_name, value in (("help_key", self.help_key), ("completion_trigger", self.completion_trigger)):
            if not isinstance(value, str) or len(value) != 1 or not value.isprintable() or value.isspace():
                raise ValueError(f"ConsoleConfig.{field_name} must be a single printable character.")
        if self.help_key == self.completion_trigger:
            raise ValueError("ConsoleConfig.help_key and completion_trigger must differ.")

        if not self.title.strip():
            raise ValueError("ConsoleConfig.title must be a non-empty string.")

    @staticmethod
    def from_strings(
        log_capacity: str | int = DEFAULT_LOG_CAPACITY,
        commands: str | tuple[str, ...] = DEFAULT_COMMANDS,
        help_key: str = "?",
        completion_trigger: str = "/",
        title: str = "QUICK ADB",
        version_label: str = "quick-adb v0.0.1",
    ) -> "ConsoleConfig":
        if isinstance(commands, str):
            names = tuple(part.strip() for part in commands.split(",") if part.strip())
        else:
            names = tuple(commands)

        try:
            capacity = int(log_capacity)
        except (TypeError, ValueError):
            raise ValueError(f"ConsoleConfig.log_capacity must be an integer, got {log_capacity!r}") from None

        cfg = ConsoleConfig(
            title=title,
            version_label=version_label,
            log_capacity=capacity,
            commands=names,
            help_key=help_key,
            completion_trigger=completion_trigger,
        )
        cfg.validate()
        return cfg
