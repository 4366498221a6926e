"""
Diagnostics interface.

Initialization failures are never raised to the caller of
``ExtensionInitializer.initialize``; this is the only place they surface.
Messages for the user of a command go through IPresenter.
"""

from abc import ABC, abstractmethod
from typing import Any


class ILogger(ABC):
    """
    Leveled diagnostics sink.

    Methods take stdlib-style ``%`` arguments and accept ``exc_info``.
    """

    @abstractmethod
    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Degraded but continuing, e.g. an optional dependency failed."""
        pass

    @abstractmethod
    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        """An extension could not be initialized."""
        pass

    @abstractmethod
    def set_level(self, level: str) -> None:
        """
        Change the threshold.

        Args:
            level: 'debug', 'info', 'warning' or 'error'
        """
        pass
