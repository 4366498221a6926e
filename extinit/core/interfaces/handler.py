"""
Extension handler interface definitions.

Handlers perform the actual, side-effecting activation of an extension of
a given type. New extension types plug in by registering a handler; the
initializer never branches on type.
"""

from abc import ABC, abstractmethod

from ..models.extension import InstalledExtension


class IExtensionHandler(ABC):
    """Activates extensions of one declared type."""

    @property
    @abstractmethod
    def type(self) -> str:
        """
        Extension type handled.

        Examples: 'python', 'jar', 'xar'
        """
        pass

    @abstractmethod
    def initialize(self, extension: InstalledExtension, namespace: str | None) -> None:
        """
        Activate the extension in the namespace.

        Raises:
            ActivationError: If the extension could not be activated
        """
        pass


class IExtensionHandlerManager(ABC):
    """Entry point the initializer uses to activate any extension."""

    @abstractmethod
    def initialize(self, extension: InstalledExtension, namespace: str | None) -> None:
        """
        Activate the extension in the namespace.

        Args:
            extension: Record to activate
            namespace: Target namespace (None for root)

        Raises:
            ActivationError: If the extension could not be activated
        """
        pass
