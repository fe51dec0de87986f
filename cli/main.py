from __future__ import annotations

import argparse
from dataclasses import replace
import logging
from typing import Sequence

from app.container import build_container
from app.settings import build_settings
from cli.output import print_commands, print_version
from cli.tui_app import QuickAdbTuiApp
from config.logging_config import LoggingConfig
from utils.logging_setup import configure

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="quick-adb")
    parser.add_argument("--log-level", default=None)
    sub = parser.add_subparsers(dest="command")

    sub.add_parser("tui")
    sub.add_parser("commands")
    sub.add_parser("version")

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    command = args.command or "tui"

    try:
        app_cfg = build_settings()
        if args.log_level:
            override = LoggingConfig.from_strings(
                level_name=args.log_level,
                log_dir=app_cfg.logging.log_dir,
                file_path=app_cfg.logging.file_path,
                stderr=app_cfg.logging.stderr,
            )
            app_cfg = replace(app_cfg, logging=override)
    except ValueError as exc:
        print(f"Error: {exc}")
        return 1

    if command == "version":
        print_version(app_cfg.console.version_label)
        return 0

    deps = build_container(app_cfg)
    if command == "commands":
        print_commands(deps["registry"], trigger=app_cfg.console.completion_trigger)
        return 0

    runtime = configure(app_cfg.logging)
    logger.info("Logging to %s at %s", runtime.file_path, runtime.level_name)
    QuickAdbTuiApp(engine=deps["console"]).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
