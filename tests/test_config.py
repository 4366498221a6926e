"""
Tests for extinit configuration loading.

Tests verify:
- Defaults match the Pydantic model defaults
- .extinit/config.toml and pyproject.toml [tool.extinit] are found and read
- Environment variables override file values
- Unreadable config files are reported, not raised
"""

from pathlib import Path

import pytest

from extinit.core.models.config import CoreConfig, LoggingConfig, ManifestConfig
from extinit.core.settings import ExtinitSettings, find_config_file, load_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep EXTINIT_* variables of the outer environment out of the tests."""
    for name in (
        "EXTINIT_LOGGING__LEVEL",
        "EXTINIT_LOGGING__CONSOLE",
        "EXTINIT_MANIFEST__PATH",
        "EXTINIT_CORE__EXTENSIONS",
    ):
        monkeypatch.delenv(name, raising=False)


def _write_config(root: Path, content: str) -> Path:
    config_dir = root / ".extinit"
    config_dir.mkdir()
    config_path = config_dir / "config.toml"
    config_path.write_text(content)
    return config_path


class TestConfigModels:
    """Defaults of the config sections."""

    def test_defaults(self) -> None:
        assert LoggingConfig().level == "warning"
        assert not LoggingConfig().console
        assert not LoggingConfig().file
        assert CoreConfig().extensions == []
        assert ManifestConfig().path == "extensions.toml"

    def test_level_is_case_insensitive(self) -> None:
        assert LoggingConfig(level="DEBUG").level == "debug"

    def test_unknown_level_rejected(self) -> None:
        with pytest.raises(ValueError):
            LoggingConfig(level="verbose")


class TestFindConfigFile:
    """Locating the config file."""

    def test_finds_config_in_parent(self, tmp_path: Path) -> None:
        """The search walks up from the start directory."""
        config_path = _write_config(tmp_path, "")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)

        assert find_config_file(str(nested)) == config_path

    def test_finds_pyproject_section(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text('[tool.extinit.manifest]\npath = "exts.toml"\n')

        assert find_config_file(str(tmp_path)) == pyproject

    def test_ignores_pyproject_without_section(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text('[project]\nname = "demo"\n')

        found = find_config_file(str(tmp_path))

        assert found is None or not str(found).startswith(str(tmp_path))

    def test_ignores_broken_pyproject(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text("[tool.extinit\n")

        found = find_config_file(str(tmp_path))

        assert found is None or not str(found).startswith(str(tmp_path))


class TestLoadSettings:
    """Merging config sources."""

    def test_reads_config_file(self, tmp_path: Path) -> None:
        config_path = _write_config(
            tmp_path,
            """
[logging]
level = "info"
console = true

[core]
extensions = ["org.example:platform"]

[manifest]
path = "conf/extensions.toml"
""",
        )

        settings = load_settings(start_dir=str(tmp_path))

        assert settings.logging.level == "info"
        assert settings.logging.console
        assert settings.core.extensions == ["org.example:platform"]
        assert settings.manifest.path == "conf/extensions.toml"
        assert settings.config_file == str(config_path)
        assert settings.config_error is None

    def test_reads_pyproject_section(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text(
            '[project]\nname = "demo"\n\n[tool.extinit.manifest]\npath = "exts.toml"\n'
        )

        settings = load_settings(start_dir=str(tmp_path))

        assert settings.manifest.path == "exts.toml"
        assert settings.config_file == str(tmp_path / "pyproject.toml")

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        config_path = tmp_path / "custom.toml"
        config_path.write_text('[logging]\nlevel = "error"\n')

        settings = load_settings(config_path=config_path)

        assert settings.logging.level == "error"

    def test_environment_overrides_file(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        _write_config(tmp_path, '[logging]\nlevel = "info"\n')
        monkeypatch.setenv("EXTINIT_LOGGING__LEVEL", "debug")

        settings = load_settings(start_dir=str(tmp_path))

        assert settings.logging.level == "debug"

    def test_overrides_win(self, tmp_path: Path) -> None:
        _write_config(tmp_path, '[manifest]\npath = "a.toml"\n')

        settings = load_settings(start_dir=str(tmp_path), manifest=ManifestConfig(path="b.toml"))

        assert settings.manifest.path == "b.toml"

    def test_invalid_toml_reports_error(self, tmp_path: Path) -> None:
        """A broken config file falls back to defaults with config_error set."""
        _write_config(tmp_path, "[logging\nlevel = ")

        settings = load_settings(start_dir=str(tmp_path))

        assert settings.logging.level == "warning"
        assert settings.config_file is None
        assert settings.config_error is not None
        assert settings.config_error.startswith("Failed to parse config file")

    def test_direct_construction_uses_defaults(self) -> None:
        settings = ExtinitSettings(manifest=ManifestConfig(path="x.toml"))

        assert settings.manifest.path == "x.toml"
        assert settings.config_error is None
