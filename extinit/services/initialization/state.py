"""
Per-call initialization state.

Memo table of the outcomes already reached during one top-level
``ExtensionInitializer.initialize`` call.
"""

from __future__ import annotations

from collections.abc import Iterator

from ...core.models.extension import ExtensionId


class InitializationState:
    """
    Outcomes of initialization attempts, per namespace and extension.

    ``True`` means the extension was initialized in the namespace, ``False``
    that it was attempted and failed; a missing entry means it was never
    visited. Created fresh for every top-level call and never shared.
    """

    def __init__(self) -> None:
        self._outcomes: dict[str | None, dict[ExtensionId, bool]] = {}

    def get(self, namespace: str | None, extension_id: ExtensionId) -> bool | None:
        """Return the recorded outcome, or None if never visited."""
        in_namespace = self._outcomes.get(namespace)
        if in_namespace is None:
            return None
        return in_namespace.get(extension_id)

    def record(self, namespace: str | None, extension_id: ExtensionId, initialized: bool) -> None:
        """Record the outcome for an extension in a namespace."""
        self._outcomes.setdefault(namespace, {})[extension_id] = initialized

    def namespaces(self) -> list[str | None]:
        return list(self._outcomes)

    def items(self) -> Iterator[tuple[str | None, ExtensionId, bool]]:
        for namespace, outcomes in self._outcomes.items():
            for extension_id, initialized in outcomes.items():
                yield namespace, extension_id, initialized

    def __len__(self) -> int:
        return sum(len(outcomes) for outcomes in self._outcomes.values())
