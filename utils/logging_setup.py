"""Logging bootstrap for the quick-adb runtime.

Handlers are wired here and nowhere else; every module logs through
``logging.getLogger(__name__)`` and propagates to its top-level package logger.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
import logging
from logging.handlers import RotatingFileHandler
import os
from pathlib import Path

from config.logging_config import LoggingConfig


@dataclass(frozen=True)
class LoggingRuntime:
    """Resolved runtime logging configuration."""

    level_name: str
    level: int
    file_path: str


_RUNTIME: LoggingRuntime | None = None
_HANDLERS: list[logging.Handler] = []

PROJECT_LOGGERS: tuple[str, ...] = ("app", "cli", "config", "engine", "utils")


def _safe_name(value: str) -> str:
    candidate = "".join(ch if (ch.isalnum() or ch in {"-", "_"}) else "-" for ch in value)
    cleaned = candidate.strip("-_")
    return cleaned or "session"


def _default_log_path(log_dir: Path, session_name: str) -> str:
    log_dir.mkdir(parents=True, exist_ok=True)
    ts = datetime.now(timezone.utc).strftime("%Y%m%d-%H%M%S")
    return str(log_dir / f"{_safe_name(session_name)}-{ts}-{os.getpid()}.log")


def _make_stream_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("[%(name)s] %(levelname)s %(message)s"))
    return handler


def _make_file_handler(level: int, file_path: str) -> logging.Handler:
    handler = RotatingFileHandler(
        file_path,
        maxBytes=20 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s [%(threadName)s] %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )
    return handler


def configure(cfg: LoggingConfig, session_name: str = "quick-adb") -> LoggingRuntime:
    """Install the rotating file handler (and optionally stderr) on the project loggers.

    Idempotent: repeated calls return the originally configured runtime.
    The stderr handler is opt-in because the TUI owns the terminal.
    """
    global _RUNTIME
    if _RUNTIME is not None:
        return _RUNTIME

    cfg.validate()
    file_path = str(cfg.file_path) if cfg.file_path else _default_log_path(cfg.log_dir, session_name)
    Path(file_path).parent.mkdir(parents=True, exist_ok=True)

    handlers = [_make_file_handler(cfg.level, file_path)]
    if cfg.stderr:
        handlers.append(_make_stream_handler(cfg.level))
    _HANDLERS.extend(handlers)

    # All project module loggers propagate to one of these package loggers.
    for name in PROJECT_LOGGERS:
        logger = logging.getLogger(name)
        logger.setLevel(cfg.level)
        logger.propagate = False
        for handler in handlers:
            logger.addHandler(handler)

    # Keep third-party logging quiet unless it is warning+.
    root = logging.getLogger()
    if root.level < logging.WARNING:
        root.setLevel(logging.WARNING)

    logging.captureWarnings(True)

    _RUNTIME = LoggingRuntime(level_name=cfg.level_name, level=cfg.level, file_path=file_path)
    return _RUNTIME


def get_runtime() -> LoggingRuntime | None:
    """Return configured logging runtime, if configure() has run."""
    return _RUNTIME


def reset() -> None:
    """Detach handlers installed by configure(); used between test cases."""
    global _RUNTIME
    for name in PROJECT_LOGGERS:
        logger = logging.getLogger(name)
        for handler in _HANDLERS:
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)
        logger.propagate = True
    for handler in _HANDLERS:
        handler.close()
    _HANDLERS.clear()
    logging.captureWarnings(False)
    _RUNTIME = None
