from __future__ import annotations

from typing import Any

from app.settings import AppConfig
from engine.console import Console
from engine.dispatcher import SubmitHandler


def build_container(app_cfg: AppConfig, on_submit: SubmitHandler | None = None) -> dict[str, Any]:
    """
    Dependency container builder
    Responsibility
    - Takes a fully loaded config object
    - Constructs the console engine exactly once, seeded with its welcome lines
    - Hands back the shared pieces the shell needs
    """
    console = Console.from_config(app_cfg.console, on_submit=on_submit)
    return {
        "config": app_cfg,
        "console": console,
        "registry": console.registry,
        "log_buffer": console.log_buffer,
    }
