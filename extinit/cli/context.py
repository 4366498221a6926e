"""
Click context extension for extinit CLI.

Provides ExtinitContext dataclass that holds extinit-specific data
passed through the Click command chain via ctx.obj.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..core.settings import ExtinitSettings, load_settings
from ..services.repositories.manifest import Manifest, load_manifest


@dataclass
class ExtinitContext:
    """Extended context passed through Click command chain.

    Attributes:
        cwd: Current working directory
        settings: Loaded settings
        verbose: Whether diagnostics are logged to stderr
    """

    cwd: Path
    settings: ExtinitSettings
    verbose: bool = False

    @classmethod
    def create(cls, cwd: Path | None = None, verbose: bool = False) -> ExtinitContext:
        """Create an ExtinitContext for the current environment.

        Args:
            cwd: Working directory override (defaults to Path.cwd())
            verbose: Log debug diagnostics to stderr

        Returns:
            Configured ExtinitContext instance
        """
        if cwd is None:
            cwd = Path.cwd()

        settings = load_settings(start_dir=str(cwd))
        if verbose:
            settings.logging.console = True
            settings.logging.level = "debug"

        return cls(cwd=cwd, settings=settings, verbose=verbose)

    def manifest_path(self, override: Path | None = None) -> Path:
        """Resolve the manifest location, relative paths against cwd."""
        path = override or Path(self.settings.manifest.path)
        if not path.is_absolute():
            path = self.cwd / path
        return path

    def load_manifest(self, override: Path | None = None) -> Manifest:
        """
        Load the installed-extension manifest.

        Raises:
            ManifestError: If the manifest is unreadable or malformed
        """
        return load_manifest(self.manifest_path(override))
