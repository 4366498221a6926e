"""Output presenters for the extinit CLI."""

from .console import ConsolePresenter

__all__ = ["ConsolePresenter"]
