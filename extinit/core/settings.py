"""
Layered configuration for extinit.

Values come from, highest priority first: keyword arguments, EXTINIT_*
environment variables (``EXTINIT_LOGGING__LEVEL=debug``), the TOML config
file, then the model defaults.
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from .models.config import CoreConfig, LoggingConfig, ManifestConfig

CONFIG_DIR = ".extinit"
CONFIG_NAME = "config.toml"
PYPROJECT = "pyproject.toml"


def _log():
    from ..services.logging import NullLogger
    from .di import resolve_or_default
    from .interfaces.logger import ILogger

    return resolve_or_default(ILogger, NullLogger)


def _read_toml(path: Path) -> dict[str, Any]:
    with path.open("rb") as f:
        return tomllib.load(f)


def _has_tool_section(pyproject: Path) -> bool:
    try:
        return "extinit" in _read_toml(pyproject).get("tool", {})
    except (tomllib.TOMLDecodeError, OSError) as e:
        _log().debug("Ignoring unreadable %s: %s", pyproject, e)
        return False


def find_config_file(start_dir: str | None = None) -> Path | None:
    """
    Locate the config file for a directory.

    Walks from ``start_dir`` (default: cwd) towards the filesystem root and
    returns the first ``.extinit/config.toml``, or ``pyproject.toml`` holding
    a ``[tool.extinit]`` table.
    """
    start = Path(start_dir) if start_dir else Path.cwd()

    for directory in (start, *start.parents):
        candidate = directory / CONFIG_DIR / CONFIG_NAME
        if candidate.is_file():
            return candidate

        pyproject = directory / PYPROJECT
        if pyproject.is_file() and _has_tool_section(pyproject):
            return pyproject

    return None


class TomlConfigSource(PydanticBaseSettingsSource):
    """
    Settings source reading one TOML file.

    An unreadable file yields no values; the problem is kept in ``error``
    so commands can report it instead of failing at startup.
    """

    def __init__(
        self,
        settings_cls: type[BaseSettings],
        config_path: Path | None = None,
        start_dir: str | None = None,
    ):
        super().__init__(settings_cls)
        self.path = config_path or find_config_file(start_dir)
        self.error: str | None = None
        self._values: dict[str, Any] | None = None

    def load(self) -> dict[str, Any]:
        """Read the file once, returning the values meant for extinit."""
        if self._values is None:
            self._values = self._read()
        return self._values

    def _read(self) -> dict[str, Any]:
        if self.path is None:
            return {}

        try:
            data = _read_toml(self.path)
        except tomllib.TOMLDecodeError as e:
            _log().warning("Failed to parse config file %s: %s", self.path, e)
            self.error = f"Failed to parse config file: {e}"
            return {}
        except OSError as e:
            _log().warning("Failed to read config file %s: %s", self.path, e)
            self.error = f"Failed to read config file: {e}"
            return {}

        if self.path.name == PYPROJECT:
            return data.get("tool", {}).get("extinit", {})
        return data

    @property
    def loaded_from(self) -> str | None:
        """The file values were read from, None when absent or unreadable."""
        if self.path is None:
            return None
        self.load()
        return None if self.error is not None else str(self.path)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self.load().get(field_name), field_name, False

    def __call__(self) -> dict[str, Any]:
        return {
            name: value
            for name, value in self.load().items()
            if name in self.settings_cls.model_fields
        }


# Source prepared by load_settings() for the next ExtinitSettings instance
_pending_source: TomlConfigSource | None = None


class ExtinitSettings(BaseSettings):
    """Settings of the extinit CLI and bootstrap."""

    model_config = SettingsConfigDict(
        env_prefix="EXTINIT_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    logging: LoggingConfig = LoggingConfig()
    core: CoreConfig = CoreConfig()
    manifest: ManifestConfig = ManifestConfig()

    _config_file: str | None = None
    _config_error: str | None = None

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        toml_source = _pending_source or TomlConfigSource(settings_cls)
        return init_settings, env_settings, toml_source

    @property
    def config_file(self) -> str | None:
        """Path of the TOML file the settings were read from, if any."""
        return self._config_file

    @property
    def config_error(self) -> str | None:
        """Why the TOML file could not be used, if it could not."""
        return self._config_error


def load_settings(
    config_path: Path | None = None,
    start_dir: str | None = None,
    **overrides: Any,
) -> ExtinitSettings:
    """
    Build settings from every source.

    Args:
        config_path: Use this TOML file instead of searching for one
        start_dir: Directory the search starts from (default: cwd)
        **overrides: Section values taking precedence over everything else

    Returns:
        Settings carrying the config file used and any error reading it
    """
    global _pending_source

    source = TomlConfigSource(ExtinitSettings, config_path, start_dir)
    _pending_source = source
    try:
        settings = ExtinitSettings(**overrides)
    finally:
        _pending_source = None

    settings._config_file = source.loaded_from
    settings._config_error = source.error
    return settings
