"""
Output interface for the CLI.

Everything a command shows to the user goes through an IPresenter;
diagnostics go through ILogger instead.
"""

from abc import ABC, abstractmethod


class IPresenter(ABC):
    """User-facing output of extinit commands."""

    @abstractmethod
    def print(self, message: str) -> None:
        """Show a plain line."""
        pass

    @abstractmethod
    def print_warning(self, message: str) -> None:
        """Show a line the user should notice but that is not a failure."""
        pass

    @abstractmethod
    def print_error(self, message: str) -> None:
        """Show a failure."""
        pass

    @abstractmethod
    def print_table(self, headers: list[str], rows: list[list[str]]) -> None:
        """
        Show rows aligned under headers.

        Args:
            headers: Column titles
            rows: One list of cell values per row; an empty list prints nothing
        """
        pass
