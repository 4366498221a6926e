"""
Dependency chain context.

Immutable record of the (extension, dependency) hops taken to reach the
current resolution step. Each recursive step derives a new node; nodes are
never modified, so branches of the walk cannot corrupt each other's trail.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from ...core.models.extension import ExtensionDependency, InstalledExtension


@dataclass(frozen=True)
class DependencyChainContext:
    """A node of the dependency chain, linked to the hop before it.

    Attributes:
        parent: Context of the previous hop (None at the initiating call)
        extension: Extension whose dependency is being resolved
        dependency: Dependency being resolved for ``extension``
    """

    parent: DependencyChainContext | None = None
    extension: InstalledExtension | None = None
    dependency: ExtensionDependency | None = None

    def derive(
        self, extension: InstalledExtension, dependency: ExtensionDependency
    ) -> DependencyChainContext:
        """Return the context for resolving ``dependency`` of ``extension``."""
        return DependencyChainContext(parent=self, extension=extension, dependency=dependency)

    def hops(self) -> Iterator[DependencyChainContext]:
        """Iterate hops from the initiating call to this one."""
        nodes = []
        node: DependencyChainContext | None = self
        while node is not None:
            if node.extension is not None or node.dependency is not None:
                nodes.append(node)
            node = node.parent
        return reversed(nodes)

    def contains(self, extension: InstalledExtension) -> bool:
        """Check if this exact record is already being resolved on the chain."""
        return any(hop.extension is extension for hop in self.hops())

    @property
    def depth(self) -> int:
        return sum(1 for _ in self.hops())

    def describe(self) -> str:
        """Human readable chain, e.g. ``a/1.0 -> b -> c (optional)``."""
        parts: list[str] = []
        for hop in self.hops():
            if not parts and hop.extension is not None:
                parts.append(str(hop.extension))
            if hop.dependency is not None:
                label = str(hop.dependency)
                if hop.dependency.optional:
                    label += " (optional)"
                parts.append(label)
        return " -> ".join(parts)

    def __str__(self) -> str:
        return self.describe() or "<root>"
