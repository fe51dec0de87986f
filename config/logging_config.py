from __future__ import annotations

from dataclasses import dataclass
import logging
import os
from pathlib import Path


DEFAULT_LOG_DIR = "~/.local/share/quick-adb/logs"
_LEVEL_NAMES = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    level_name: str = "INFO"
    log_dir: Path = Path(DEFAULT_LOG_DIR).expanduser()
    file_path: Path | None = None
    stderr: bool = False

    @property
    def level(self) -> int:
        return getattr(logging, self.level_name)

    def validate(self) -> None:
        if self.level_name not in _LEVEL_NAMES:
            raise ValueError(f"LoggingConfig.level_name must be one of {sorted(_LEVEL_NAMES)}, got {self.level_name!r}")
        if not isinstance(self.stderr, bool):
            raise ValueError("LoggingConfig.stderr must be a boolean.")

    @staticmethod
    def from_strings(
        level_name: str | None = None,
        log_dir: str | Path | None = None,
        file_path: str | Path | None = None,
        stderr: bool | str = False,
    ) -> "LoggingConfig":
        def _to_bool(v: bool | str) -> bool:
            if isinstance(v, bool):
                return v
            s = v.strip().lower()
            if s in {"1", "true", "t", "yes", "y", "on"}:
                return True
            if s in {"0", "false", "f", "no", "n", "off", ""}:
                return False
            raise ValueError(f"Expected a boolean or boolean-string, got {v!r}")

        cfg = LoggingConfig(
            level_name=str(level_name or "INFO").strip().upper(),
            log_dir=Path(os.path.expanduser(str(log_dir or DEFAULT_LOG_DIR))),
            file_path=Path(os.path.expanduser(str(file_path))) if file_path else None,
            stderr=_to_bool(stderr),
        )
        cfg.validate()
        return cfg
