"""
extinit - namespace-aware initialization of installed extensions.

Initializes the extensions installed in a host application, resolving
each extension's dependencies per namespace before handing it to the
handler that activates extensions of its type.

    from extinit import ExtensionInitializer
    ExtensionInitializer(installed, handlers, core).initialize()
"""

from .core.models.extension import ExtensionDependency, ExtensionId, InstalledExtension
from .services.initialization import (
    DependencyChainContext,
    ExtensionInitializer,
    InitializationState,
)

__all__ = [
    "DependencyChainContext",
    "ExtensionDependency",
    "ExtensionId",
    "ExtensionInitializer",
    "InitializationState",
    "InstalledExtension",
]
