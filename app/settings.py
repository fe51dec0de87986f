from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Mapping

from config.console_config import ConsoleConfig
from config.logging_config import LoggingConfig


@dataclass(frozen=True, slots=True)
class AppConfig:
    console: ConsoleConfig
    logging: LoggingConfig


def build_settings(env: Mapping[str, str] | None = None) -> AppConfig:
    environ = os.environ if env is None else env

    console = ConsoleConfig.from_strings()

    logging_cfg = LoggingConfig.from_strings(
        level_name=environ.get("QUICK_ADB_LOG_LEVEL"),
        log_dir=environ.get("QUICK_ADB_LOG_DIR"),
        file_path=environ.get("QUICK_ADB_LOG_FILE"),
        stderr=environ.get("QUICK_ADB_LOG_STDERR", "false"),
    )

    return AppConfig(console=console, logging=logging_cfg)
