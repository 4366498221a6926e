"""Extension initialization: orchestrator, dependency chain context and per-call state."""

from .context import DependencyChainContext
from .initializer import ExtensionInitializer
from .state import InitializationState

__all__ = [
    "DependencyChainContext",
    "ExtensionInitializer",
    "InitializationState",
]
