"""
extinit plugin architecture.

This package contains provider implementations:
- handlers: Extension handlers, one per extension type

New handlers can be added without modifying existing code by registering
them with the service container, or through the ``extinit.handlers``
entry point group.
"""

from . import handlers

__all__ = ["handlers"]
