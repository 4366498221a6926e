"""
Manifest loading.

Reads the set of installed extensions and core features from a TOML file:

    [core]
    extensions = ["org.host:runtime"]

    [[extensions]]
    id = "org.example:api"
    version = "1.0"
    type = "python"
    namespaces = ["wiki:dev"]     # omit for root-only
    features = ["example-api"]
    properties = { module = "example.api" }

    [[extensions.dependencies]]
    id = "org.example:common"
    optional = true
"""

from __future__ import annotations

import tomllib
from pathlib import Path

from pydantic import Field, ValidationError

from ...core.exceptions import ManifestError
from ...core.models.base import ImmutableModel
from ...core.models.extension import ExtensionDependency, ExtensionId, InstalledExtension
from .memory import InMemoryInstalledExtensionRepository, StaticCoreExtensionRepository


class ManifestDependency(ImmutableModel):
    """A dependency entry in the manifest."""

    id: str = Field(min_length=1)
    version: str | None = None
    optional: bool = False

    def to_dependency(self) -> ExtensionDependency:
        return ExtensionDependency(
            id=self.id, version_constraint=self.version, optional=self.optional
        )


class ManifestEntry(ImmutableModel):
    """An installed extension entry in the manifest."""

    id: str = Field(min_length=1)
    version: str | None = None
    type: str = Field(min_length=1)
    namespaces: list[str] | None = None
    features: list[str] = Field(default_factory=list)
    properties: dict[str, str] = Field(default_factory=dict)
    valid: bool = True
    invalid_namespaces: list[str] = Field(default_factory=list)
    dependencies: list[ManifestDependency] = Field(default_factory=list)

    def to_installed_extension(self) -> InstalledExtension:
        return InstalledExtension(
            id=ExtensionId(id=self.id, version=self.version),
            type=self.type,
            dependencies=tuple(d.to_dependency() for d in self.dependencies),
            namespaces=frozenset(self.namespaces) if self.namespaces is not None else None,
            features=frozenset(self.features),
            properties=dict(self.properties),
            valid=self.valid,
            invalid_namespaces=frozenset(self.invalid_namespaces),
        )


class ManifestCore(ImmutableModel):
    extensions: list[str] = Field(default_factory=list)


class Manifest(ImmutableModel):
    """Parsed manifest content."""

    core: ManifestCore = ManifestCore()
    extensions: list[ManifestEntry] = Field(default_factory=list)

    def installed_repository(self) -> InMemoryInstalledExtensionRepository:
        """Build the installed repository described by the manifest."""
        return InMemoryInstalledExtensionRepository(
            entry.to_installed_extension() for entry in self.extensions
        )

    def core_repository(self, extra: list[str] | None = None) -> StaticCoreExtensionRepository:
        """Build the core repository, adding ``extra`` features from settings."""
        return StaticCoreExtensionRepository([*self.core.extensions, *(extra or [])])


def load_manifest(path: Path) -> Manifest:
    """
    Load a manifest file.

    Args:
        path: TOML manifest path

    Returns:
        The parsed Manifest

    Raises:
        ManifestError: If the file cannot be read, parsed or validated
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ManifestError(
            f"Failed to parse manifest: {e}", file_path=str(path), cause=e
        ) from e
    except OSError as e:
        raise ManifestError(
            f"Failed to read manifest: {e}", file_path=str(path), cause=e
        ) from e

    try:
        return Manifest.model_validate(data)
    except ValidationError as e:
        raise ManifestError(
            f"Invalid manifest: {e.error_count()} validation error(s)",
            file_path=str(path),
            context={"errors": [err["msg"] for err in e.errors()]},
            cause=e,
        ) from e
