"""
Repository interface definitions for installed and core extensions.

The initializer only reads from these; how extensions get installed and
persisted is the business of the implementations.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from ..models.extension import InstalledExtension


class IInstalledExtensionRepository(ABC):
    """Directory of the extensions installed locally."""

    @abstractmethod
    def get_installed_extensions(
        self, namespace: str | None = None
    ) -> Sequence[InstalledExtension]:
        """
        List installed extensions.

        Args:
            namespace: Restrict to extensions available in this namespace.
                When None, every installed extension is returned.

        Returns:
            Installed extension records
        """
        pass

    @abstractmethod
    def get_installed_extension(
        self, feature: str, namespace: str | None
    ) -> InstalledExtension | None:
        """
        Find the installed extension providing a feature in a namespace.

        Args:
            feature: Extension id or one of its features
            namespace: Namespace to look into (None for root)

        Returns:
            The installed record, or None if nothing provides the feature
        """
        pass


class ICoreExtensionRepository(ABC):
    """Extensions bundled with the host runtime."""

    @abstractmethod
    def exists(self, feature: str) -> bool:
        """Return True if the feature is already provided by the core."""
        pass
