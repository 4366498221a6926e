"""
Core of extinit: container, bootstrap, handler plugin registry, settings,
interfaces and the exception hierarchy.
"""

from .bootstrap import bootstrap, is_initialized, reset
from .container import ServiceContainer, get_container, resolve, try_resolve
from .exceptions import (
    ActivationError,
    ConfigFileError,
    DependencyCycleError,
    DependencyInitializationError,
    ExtensionException,
    ExtensionHandlerNotFoundError,
    ExtinitConfigError,
    ExtinitException,
    ExtinitPluginError,
    ManifestError,
    PluginLoadError,
    SelfDependencyError,
    UnsatisfiedDependencyError,
)
from .registry import discover_plugins, register_plugin

__all__ = [
    "ActivationError",
    "ConfigFileError",
    "DependencyCycleError",
    "DependencyInitializationError",
    "ExtensionException",
    "ExtensionHandlerNotFoundError",
    "ExtinitConfigError",
    "ExtinitException",
    "ExtinitPluginError",
    "ManifestError",
    "PluginLoadError",
    "SelfDependencyError",
    "ServiceContainer",
    "UnsatisfiedDependencyError",
    "bootstrap",
    "discover_plugins",
    "get_container",
    "is_initialized",
    "register_plugin",
    "reset",
    "resolve",
    "try_resolve",
]
