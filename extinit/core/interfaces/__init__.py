"""
Interface definitions for extinit's collaborators.

These define the contracts that implementations must follow, enabling
dependency inversion between the initializer and the host application.
"""

from .handler import IExtensionHandler, IExtensionHandlerManager
from .logger import ILogger
from .presenter import IPresenter
from .repositories import ICoreExtensionRepository, IInstalledExtensionRepository

__all__ = [
    "ICoreExtensionRepository",
    "IExtensionHandler",
    "IExtensionHandlerManager",
    "IInstalledExtensionRepository",
    "ILogger",
    "IPresenter",
]
