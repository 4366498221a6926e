"""
Pydantic models for extinit.

Re-exports the models used across services, CLI and tests.
"""

from .base import ExtinitBaseModel, ImmutableModel
from .config import CoreConfig, LoggingConfig, LogLevel, ManifestConfig
from .extension import ExtensionDependency, ExtensionId, InstalledExtension

__all__ = [
    "CoreConfig",
    "ExtensionDependency",
    "ExtensionId",
    "ExtinitBaseModel",
    "ImmutableModel",
    "InstalledExtension",
    "LogLevel",
    "LoggingConfig",
    "ManifestConfig",
]
