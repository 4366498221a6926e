"""
Unit tests for the 'extinit initialize' and 'extinit list' CLI commands.

Tests run the real command group against a manifest in a temp directory:
- Activation order and status table
- Dry run, namespace and type filters
- Failure reporting
- Missing and malformed manifests
"""

import sys
import types

import pytest
from click.testing import CliRunner

from extinit.cli import cli

MANIFEST = """
[core]
extensions = ["org.host:runtime"]

[[extensions]]
id = "org.example:api"
version = "1.0"
type = "python"
properties = { module = "extinit_cli_plugin" }

[[extensions.dependencies]]
id = "org.example:common"

[[extensions.dependencies]]
id = "org.host:runtime"

[[extensions]]
id = "org.example:common"
version = "2.1"
type = "python"
properties = { module = "extinit_cli_plugin" }

[[extensions]]
id = "org.example:wiki-macros"
version = "0.3"
type = "python"
namespaces = ["wiki:dev"]
properties = { module = "extinit_cli_plugin", hook = "setup" }

[[extensions.dependencies]]
id = "org.example:common"
"""


@pytest.fixture
def runner():
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def plugin_module(monkeypatch):
    """Importable module recording hook calls."""
    module = types.ModuleType("extinit_cli_plugin")
    module.calls = []
    module.initialize = lambda namespace: module.calls.append(("initialize", namespace))
    module.setup = lambda namespace: module.calls.append(("setup", namespace))
    monkeypatch.setitem(sys.modules, "extinit_cli_plugin", module)
    return module


@pytest.fixture
def project(tmp_path, monkeypatch, write_manifest):
    """A working directory holding the default manifest."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("EXTINIT_MANIFEST__PATH", raising=False)
    write_manifest(MANIFEST)
    return tmp_path


def _table_rows(output: str) -> list[list[str]]:
    """Split the rows printed below the table rule."""
    lines = output.splitlines()
    start = next(i for i, line in enumerate(lines) if line.startswith("---")) + 1
    return [
        line.split()
        for line in lines[start:]
        if line.strip() and not line.startswith(("Error", "Warning"))
    ]


class TestInitializeCommand:
    """Tests for 'extinit initialize'."""

    def test_initializes_dependencies_first(self, runner, project, plugin_module):
        """Dependencies are activated before their dependents, once each."""
        result = runner.invoke(cli, ["initialize"])

        assert result.exit_code == 0, result.output
        rows = _table_rows(result.output)
        assert [row[1] for row in rows] == [
            "org.example:common/2.1",
            "org.example:api/1.0",
            "org.example:wiki-macros/0.3",
        ]
        assert [row[3] for row in rows] == ["<root>", "<root>", "wiki:dev"]
        assert all(row[4] == "ok" for row in rows)
        assert plugin_module.calls == [
            ("initialize", None),
            ("initialize", None),
            ("setup", "wiki:dev"),
        ]

    def test_dry_run_activates_nothing(self, runner, project, plugin_module):
        result = runner.invoke(cli, ["initialize", "--dry-run"])

        assert result.exit_code == 0, result.output
        rows = _table_rows(result.output)
        assert len(rows) == 3
        assert all(row[4] == "planned" for row in rows)
        assert plugin_module.calls == []
        assert "Dry run: no extension was activated." in result.output

    def test_namespace_filter_skips_root_only_extensions(self, runner, project, plugin_module):
        """Root dependencies still initialize, root-only top-level ones do not."""
        result = runner.invoke(cli, ["initialize", "-n", "wiki:dev"])

        assert result.exit_code == 0, result.output
        rows = _table_rows(result.output)
        assert [(row[1], row[3]) for row in rows] == [
            ("org.example:common/2.1", "<root>"),
            ("org.example:wiki-macros/0.3", "wiki:dev"),
        ]

    def test_type_filter(self, runner, project, plugin_module):
        result = runner.invoke(cli, ["initialize", "-t", "jar"])

        assert result.exit_code == 0, result.output
        assert "No extension initialized." in result.output
        assert plugin_module.calls == []

    def test_failures_are_reported_and_isolated(
        self, runner, tmp_path, monkeypatch, write_manifest, plugin_module
    ):
        """An extension without handler fails alone; its dependent is skipped."""
        monkeypatch.chdir(tmp_path)
        path = write_manifest(
            """
[[extensions]]
id = "org.example:archive"
type = "jar"

[[extensions]]
id = "org.example:viewer"
type = "python"
properties = { module = "extinit_cli_plugin" }

[[extensions.dependencies]]
id = "org.example:archive"

[[extensions]]
id = "org.example:standalone"
type = "python"
properties = { module = "extinit_cli_plugin" }
""",
            name="broken.toml",
        )

        result = runner.invoke(cli, ["initialize", "-m", str(path)])

        assert result.exit_code == 0, result.output
        rows = _table_rows(result.output)
        assert [(row[1], row[4]) for row in rows] == [
            ("org.example:archive", "failed"),
            ("org.example:standalone", "ok"),
        ]
        assert "Error: org.example:archive: No handler for extension type [jar]" in result.output
        assert plugin_module.calls == [("initialize", None)]

    def test_missing_manifest(self, runner, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        result = runner.invoke(cli, ["initialize"])

        assert result.exit_code == 1
        assert "no extension manifest found" in result.output

    def test_malformed_manifest(self, runner, tmp_path, monkeypatch, write_manifest):
        monkeypatch.chdir(tmp_path)
        write_manifest('[[extensions]]\nid = "org.example:api"\n')

        result = runner.invoke(cli, ["initialize"])

        assert result.exit_code == 1
        assert "Invalid manifest" in result.output

    def test_manifest_path_from_config(self, runner, tmp_path, monkeypatch, plugin_module):
        """manifest.path in .extinit/config.toml locates the manifest."""
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".extinit").mkdir()
        (tmp_path / ".extinit" / "config.toml").write_text(
            '[manifest]\npath = "conf/installed.toml"\n'
        )
        (tmp_path / "conf").mkdir()
        (tmp_path / "conf" / "installed.toml").write_text(MANIFEST)

        result = runner.invoke(cli, ["initialize", "--dry-run"])

        assert result.exit_code == 0, result.output
        assert len(_table_rows(result.output)) == 3


class TestListCommand:
    """Tests for 'extinit list'."""

    def test_lists_installed_extensions(self, runner, project):
        result = runner.invoke(cli, ["list"])

        assert result.exit_code == 0, result.output
        rows = _table_rows(result.output)
        assert [row[0] for row in rows] == [
            "org.example:api/1.0",
            "org.example:common/2.1",
            "org.example:wiki-macros/0.3",
        ]
        assert rows[0][2] == "<root>"
        assert rows[2][2] == "wiki:dev"
        assert rows[1][3] == "-"

    def test_marks_optional_dependencies(self, runner, tmp_path, monkeypatch, write_manifest):
        monkeypatch.chdir(tmp_path)
        write_manifest(
            """
[[extensions]]
id = "org.example:api"
type = "python"

[[extensions.dependencies]]
id = "org.example:extras"
optional = true
"""
        )

        result = runner.invoke(cli, ["list"])

        assert result.exit_code == 0, result.output
        assert "org.example:extras?" in result.output

    def test_empty_namespace(self, runner, tmp_path, monkeypatch, write_manifest):
        monkeypatch.chdir(tmp_path)
        write_manifest("")

        result = runner.invoke(cli, ["list", "-n", "wiki:dev"])

        assert result.exit_code == 0, result.output
        assert "No extension installed." in result.output


class TestGroup:
    def test_help_without_command(self, runner):
        result = runner.invoke(cli, [])

        assert result.exit_code == 0
        assert "initialize" in result.output
        assert "list" in result.output
