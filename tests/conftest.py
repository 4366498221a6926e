"""
Shared pytest fixtures for extinit tests.

This module provides:
- reset_container: Fresh service container for every test
- make_extension: Builder for InstalledExtension records
- write_manifest: Helper writing a TOML manifest to a temp directory
"""

from collections.abc import Callable
from pathlib import Path

import pytest

from extinit.core.bootstrap import reset
from extinit.core.models.extension import ExtensionDependency, ExtensionId, InstalledExtension


@pytest.fixture(autouse=True)
def reset_container():
    """Reset the global container and bootstrap state around each test."""
    reset()
    yield
    reset()


def _dep(extension_id: str, optional: bool = False) -> ExtensionDependency:
    """Shorthand for a dependency on ``extension_id``."""
    return ExtensionDependency(id=extension_id, optional=optional)


@pytest.fixture
def make_extension() -> Callable[..., InstalledExtension]:
    """
    Build InstalledExtension records.

    Dependencies may be given as ids (mandatory) or ExtensionDependency.
    """

    def _make(
        extension_id: str,
        *,
        type: str = "python",
        dependencies=(),
        namespaces=None,
        features=(),
        valid: bool = True,
        invalid_namespaces=(),
        version: str | None = "1.0",
    ) -> InstalledExtension:
        return InstalledExtension(
            id=ExtensionId(id=extension_id, version=version),
            type=type,
            dependencies=tuple(
                d if isinstance(d, ExtensionDependency) else _dep(d) for d in dependencies
            ),
            namespaces=frozenset(namespaces) if namespaces is not None else None,
            features=frozenset(features),
            valid=valid,
            invalid_namespaces=frozenset(invalid_namespaces),
        )

    return _make


@pytest.fixture
def write_manifest(tmp_path: Path) -> Callable[[str], Path]:
    """Write manifest content to ``tmp_path/extensions.toml``."""

    def _write(content: str, name: str = "extensions.toml") -> Path:
        path = tmp_path / name
        path.write_text(content)
        return path

    return _write
