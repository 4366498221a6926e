"""
Extension handler plugins.

Each module provides a handler for one extension type. Handlers are
discovered and registered with the service container at bootstrap.
"""

from .base import BaseExtensionHandler
from .python import PythonModuleHandler

__all__ = [
    "BaseExtensionHandler",
    "PythonModuleHandler",
]
