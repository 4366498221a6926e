"""
Click command implementations for extinit CLI.

Each module corresponds to an extinit command (e.g., initialize.py
implements 'extinit initialize'). Commands are registered with the main
CLI group via the register_commands() function in extinit.cli.
"""

from .initialize import initialize
from .list import list_extensions

COMMANDS = [
    initialize,
    list_extensions,
]

__all__ = [
    "COMMANDS",
    "initialize",
    "list_extensions",
]
