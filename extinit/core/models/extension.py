"""
Extension models.

Immutable descriptions of installed extensions and their dependencies, as
consumed by the initializer.
"""

from __future__ import annotations

from pydantic import Field

from .base import ImmutableModel


class ExtensionId(ImmutableModel):
    """Identity of an installed extension (id + resolved version)."""

    id: str = Field(min_length=1, description="Extension identifier")
    version: str | None = Field(default=None, description="Installed version")

    def __str__(self) -> str:
        if self.version:
            return f"{self.id}/{self.version}"
        return self.id


class ExtensionDependency(ImmutableModel):
    """A dependency declared by an extension."""

    id: str = Field(min_length=1, description="Id or feature of the required extension")
    version_constraint: str | None = Field(
        default=None, description="Version range, already resolved at install time"
    )
    optional: bool = Field(
        default=False, description="Failure only produces a warning when True"
    )

    def __str__(self) -> str:
        if self.version_constraint:
            return f"{self.id}-{self.version_constraint}"
        return self.id


class InstalledExtension(ImmutableModel):
    """
    An extension installed in the local repository.

    ``namespaces`` is ``None`` when the extension is installed on the root
    namespace only. Records are compared by value but the initializer relies
    on object identity to detect an extension resolving to itself, so a
    repository must hand out the same record object for the same install.
    """

    id: ExtensionId
    type: str = Field(min_length=1, description="Extension type, selects the handler")
    dependencies: tuple[ExtensionDependency, ...] = ()
    namespaces: frozenset[str] | None = None
    features: frozenset[str] = frozenset()
    properties: dict[str, str] = Field(default_factory=dict)
    valid: bool = True
    invalid_namespaces: frozenset[str] = frozenset()

    def is_valid(self, namespace: str | None) -> bool:
        """Check if the extension can be initialized in the passed namespace."""
        if not self.valid:
            return False
        return namespace is None or namespace not in self.invalid_namespaces

    def is_installed(self, namespace: str | None) -> bool:
        """Check if the extension is installed in the passed namespace (or at root)."""
        return self.namespaces is None or (
            namespace is not None and namespace in self.namespaces
        )

    def provides(self, feature: str) -> bool:
        """Check if the extension id or one of its features matches ``feature``."""
        return feature == self.id.id or feature in self.features

    def __str__(self) -> str:
        return str(self.id)
