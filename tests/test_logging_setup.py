from __future__ import annotations

import logging
import tempfile
import unittest
from logging.handlers import RotatingFileHandler
from pathlib import Path

from config.logging_config import LoggingConfig
from utils import logging_setup


def _flush(logger: logging.Logger) -> None:
    for handler in logger.handlers:
        handler.flush()


class LoggingSetupTests(unittest.TestCase):
    def setUp(self) -> None:
        logging_setup.reset()
        self._root_level = logging.getLogger().level

    def tearDown(self) -> None:
        logging_setup.reset()
        logging.getLogger().setLevel(self._root_level)

    def test_configure_installs_rotating_file_handler(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            cfg = LoggingConfig.from_strings(level_name="DEBUG", log_dir=tmpdir)
            runtime = logging_setup.configure(cfg, session_name="unit test")

            self.assertEqual(runtime.level, logging.DEBUG)
            self.assertTrue(runtime.file_path.startswith(tmpdir))
            self.assertIn("unit-test-", Path(runtime.file_path).name)
            engine_logger = logging.getLogger("engine")
            handlers = [h for h in engine_logger.handlers if isinstance(h, RotatingFileHandler)]
            self.assertTrue(any(h.baseFilename == runtime.file_path for h in handlers))

            logging.getLogger("engine.console").info("hello from the engine")
            _flush(engine_logger)
            self.assertIn("hello from the engine", Path(runtime.file_path).read_text(encoding="utf-8"))
            logging_setup.reset()

    def test_every_project_package_logger_is_configured(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            logging_setup.configure(LoggingConfig.from_strings(level_name="DEBUG", file_path=f"{tmpdir}/a.log"))
            for name in ("app", "cli", "config", "engine", "utils"):
                logger = logging.getLogger(name)
                self.assertEqual(logger.level, logging.DEBUG)
                self.assertFalse(logger.propagate)
                self.assertEqual(len(logger.handlers), 1)
            logging_setup.reset()

    def test_third_party_debug_stays_out_of_the_log_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = f"{tmpdir}/a.log"
            logging_setup.configure(LoggingConfig.from_strings(level_name="DEBUG", file_path=path))

            self.assertGreaterEqual(logging.getLogger().level, logging.WARNING)
            logging.getLogger("thirdparty.chatty").debug("chatty third-party detail")
            logging.getLogger("engine.dispatcher").debug("engine detail")
            _flush(logging.getLogger("engine"))

            text = Path(path).read_text(encoding="utf-8")
            self.assertIn("engine detail", text)
            self.assertNotIn("chatty third-party detail", text)
            logging_setup.reset()

    def test_reset_detaches_package_handlers(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            logging_setup.configure(LoggingConfig.from_strings(file_path=f"{tmpdir}/a.log"))
            logging_setup.reset()
            engine_logger = logging.getLogger("engine")
            self.assertEqual(engine_logger.handlers, [])
            self.assertTrue(engine_logger.propagate)
            self.assertEqual(engine_logger.level, logging.NOTSET)

    def test_configure_is_idempotent(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            first = logging_setup.configure(LoggingConfig.from_strings(file_path=f"{tmpdir}/a.log"))
            second = logging_setup.configure(LoggingConfig.from_strings(file_path=f"{tmpdir}/b.log"))
            self.assertIs(first, second)
            self.assertIs(logging_setup.get_runtime(), first)
            self.assertEqual(first.file_path, f"{tmpdir}/a.log")
            logging_setup.reset()

    def test_stderr_handler_is_opt_in(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            logging_setup.configure(LoggingConfig.from_strings(file_path=f"{tmpdir}/a.log", stderr=True))
            added = logging.getLogger("engine").handlers
            self.assertEqual(len(added), 2)
            self.assertTrue(any(type(h) is logging.StreamHandler for h in added))
            logging_setup.reset()

    def test_reset_clears_runtime(self) -> None:
        self.assertIsNone(logging_setup.get_runtime())


if __name__ == "__main__":
    unittest.main()
