"""
Unit tests for the extinit logger implementations.
"""

import logging

from extinit.core.di import resolve_or_default
from extinit.core.container import get_container
from extinit.core.interfaces.logger import ILogger
from extinit.services.logging import ExtinitLogger, NullLogger


class TestExtinitLogger:
    def test_writes_to_log_file(self, tmp_path):
        log_file = tmp_path / "logs" / "extinit.log"
        logger = ExtinitLogger(name="extinit.test.file", file_enabled=True, log_file=log_file)

        logger.warning("Failed to initialize dependency [%s]: %s", "b", "ValueError: boom")
        logger.info("not written at warning level")
        for handler in logging.getLogger("extinit.test.file").handlers:
            handler.flush()

        content = log_file.read_text()
        assert "[WARNING] extinit.test.file: Failed to initialize dependency [b]" in content
        assert "not written" not in content

    def test_set_level(self, tmp_path):
        log_file = tmp_path / "extinit.log"
        logger = ExtinitLogger(name="extinit.test.level", file_enabled=True, log_file=log_file)

        logger.set_level("debug")
        logger.debug("Activating extension [%s] in namespace [%s]", "a/1.0", None)
        for handler in logging.getLogger("extinit.test.level").handlers:
            handler.flush()

        assert "Activating extension [a/1.0] in namespace [None]" in log_file.read_text()

    def test_console_output(self, capsys):
        logger = ExtinitLogger(name="extinit.test.console", level="error", console_enabled=True)

        logger.warning("hidden")
        logger.error("Unexpected error initializing local extension [%s]", "a/1.0")

        err = capsys.readouterr().err
        assert "hidden" not in err
        assert "Unexpected error initializing local extension [a/1.0]" in err

    def test_no_handlers_by_default(self):
        ExtinitLogger(name="extinit.test.quiet")

        assert logging.getLogger("extinit.test.quiet").handlers == []


class TestNullLogger:
    def test_accepts_everything(self):
        logger = NullLogger()

        logger.debug("x %s", 1)
        logger.info("x")
        logger.warning("x", exc_info=True)
        logger.error("x", exc_info=True)
        logger.set_level("debug")


class TestResolveOrDefault:
    def test_default_when_unregistered(self):
        assert isinstance(resolve_or_default(ILogger, NullLogger), NullLogger)

    def test_registered_service_wins(self):
        logger = ExtinitLogger(name="extinit.test.registered")
        get_container().register_singleton(ILogger, implementation=logger)

        assert resolve_or_default(ILogger, NullLogger) is logger
