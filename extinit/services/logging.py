"""
Diagnostics logging for extinit.

Initialization failures are reported only through this channel, so the
logger can mirror records to stderr and to a rotating log file.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, ClassVar

from ..core.interfaces.logger import ILogger

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class ExtinitLogger(ILogger):
    """
    ILogger backed by a stdlib ``logging.Logger``.

    The underlying logger passes everything; each attached handler applies
    the configured threshold. Records never reach the root logger so an
    embedding application's logging setup is left alone.
    """

    DEFAULT_LOG_FILE = Path.home() / ".extinit" / "extinit.log"
    ROTATE_BYTES = 5 * 1024 * 1024
    ROTATE_KEEP = 5

    LEVELS: ClassVar[dict[str, int]] = {
        "debug": logging.DEBUG,
        "info": logging.INFO,
        "warning": logging.WARNING,
        "error": logging.ERROR,
    }

    def __init__(
        self,
        name: str = "extinit",
        level: str = "warning",
        console_enabled: bool = False,
        file_enabled: bool = False,
        log_file: Path | None = None,
    ) -> None:
        """
        Args:
            name: Name of the stdlib logger to drive
            level: Threshold for every handler (debug, info, warning, error)
            console_enabled: Mirror records to stderr
            file_enabled: Append records to ``log_file``
            log_file: Log file location (default: ~/.extinit/extinit.log)
        """
        self._logger = logging.getLogger(name)
        self._logger.setLevel(logging.DEBUG)
        self._logger.propagate = False
        for existing in list(self._logger.handlers):
            self._logger.removeHandler(existing)

        threshold = self._to_level(level)
        self.log_file: Path | None = None

        if console_enabled:
            self._attach(logging.StreamHandler(sys.stderr), threshold)

        if file_enabled:
            self.log_file = log_file or self.DEFAULT_LOG_FILE
            self.log_file.parent.mkdir(parents=True, exist_ok=True)
            self._attach(
                RotatingFileHandler(
                    self.log_file, maxBytes=self.ROTATE_BYTES, backupCount=self.ROTATE_KEEP
                ),
                threshold,
            )

    @classmethod
    def _to_level(cls, level: str) -> int:
        return cls.LEVELS.get(level.lower(), logging.WARNING)

    def _attach(self, handler: logging.Handler, threshold: int) -> None:
        handler.setLevel(threshold)
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
        self._logger.addHandler(handler)

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.debug(message, *args, **kwargs)

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.info(message, *args, **kwargs)

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.warning(message, *args, **kwargs)

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.error(message, *args, **kwargs)

    def set_level(self, level: str) -> None:
        """Apply a new threshold to every attached handler."""
        threshold = self._to_level(level)
        for handler in self._logger.handlers:
            handler.setLevel(threshold)


class NullLogger(ILogger):
    """Discards everything. Used when no logger is registered."""

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def set_level(self, level: str) -> None:
        pass
