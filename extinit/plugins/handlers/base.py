"""
Base extension handler.

Defines the shared helpers of extension handler plugins.
"""

from abc import abstractmethod

from ...core.exceptions import ActivationError
from ...core.interfaces.handler import IExtensionHandler
from ...core.models.extension import InstalledExtension


class BaseExtensionHandler(IExtensionHandler):
    """
    Abstract base class for extension handlers.

    Implements the Strategy pattern for activating one extension type.
    """

    @property
    @abstractmethod
    def type(self) -> str:
        """Return the extension type handled (e.g., 'python')."""
        pass

    @abstractmethod
    def initialize(self, extension: InstalledExtension, namespace: str | None) -> None:
        """Activate the extension in the namespace."""
        pass

    def require_property(
        self, extension: InstalledExtension, key: str, namespace: str | None = None
    ) -> str:
        """
        Get a property the handler cannot work without.

        Raises:
            ActivationError: If the property is missing or empty
        """
        value = extension.properties.get(key)
        if not value:
            raise ActivationError(
                f"Extension [{extension}] has no [{key}] property",
                extension=str(extension.id),
                extension_type=extension.type,
                namespace=namespace,
            )
        return value
