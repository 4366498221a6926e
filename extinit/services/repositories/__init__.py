"""Reference repositories for installed and core extensions."""

from .manifest import Manifest, load_manifest
from .memory import InMemoryInstalledExtensionRepository, StaticCoreExtensionRepository

__all__ = [
    "InMemoryInstalledExtensionRepository",
    "Manifest",
    "StaticCoreExtensionRepository",
    "load_manifest",
]
