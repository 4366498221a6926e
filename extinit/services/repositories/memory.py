"""
In-memory repository implementations.

Hold a fixed set of installed extension records and core features, e.g.
as loaded from a manifest or built by an embedding application.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from ...core.interfaces.repositories import (
    ICoreExtensionRepository,
    IInstalledExtensionRepository,
)
from ...core.models.extension import InstalledExtension


class InMemoryInstalledExtensionRepository(IInstalledExtensionRepository):
    """
    Installed extensions held in memory, in insertion order.

    An extension installed on root is available in every namespace, so
    namespace lookups fall back to root records.
    """

    def __init__(self, extensions: Iterable[InstalledExtension] = ()) -> None:
        self._extensions: list[InstalledExtension] = []
        for extension in extensions:
            self.add(extension)

    def add(self, extension: InstalledExtension) -> None:
        """Add an installed extension, replacing any record with the same id."""
        self._extensions = [e for e in self._extensions if e.id != extension.id]
        self._extensions.append(extension)

    def get_installed_extensions(
        self, namespace: str | None = None
    ) -> Sequence[InstalledExtension]:
        if namespace is None:
            return list(self._extensions)
        return [e for e in self._extensions if e.is_installed(namespace)]

    def get_installed_extension(
        self, feature: str, namespace: str | None
    ) -> InstalledExtension | None:
        # Namespace specific install wins over root install
        if namespace is not None:
            for extension in self._extensions:
                if (
                    extension.namespaces is not None
                    and namespace in extension.namespaces
                    and extension.provides(feature)
                ):
                    return extension

        for extension in self._extensions:
            if extension.namespaces is None and extension.provides(feature):
                return extension

        return None

    def __len__(self) -> int:
        return len(self._extensions)


class StaticCoreExtensionRepository(ICoreExtensionRepository):
    """Core extensions given as a fixed set of ids/features."""

    def __init__(self, features: Iterable[str] = ()) -> None:
        self._features = frozenset(features)

    def exists(self, feature: str) -> bool:
        return feature in self._features

    @property
    def features(self) -> frozenset[str]:
        return self._features
