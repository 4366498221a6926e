"""
Native Click implementation of the list command.

Usage: extinit list [-n NAMESPACE] [-m MANIFEST]
"""

from __future__ import annotations

from pathlib import Path

import click

from ...core.container import get_container
from ...core.exceptions import ManifestError
from ...core.interfaces.presenter import IPresenter
from ..context import ExtinitContext
from ..decorators import require_manifest


@click.command("list")
@click.option("--namespace", "-n", default=None, help="Only show this namespace.")
@click.option(
    "--manifest",
    "-m",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Installed-extension manifest (default: manifest.path setting).",
)
@click.pass_obj
@require_manifest
def list_extensions(ctx: ExtinitContext, namespace: str | None, manifest: Path | None) -> None:
    """Show installed extensions.

    With --namespace, root installed extensions are listed too since they
    are available from every namespace.
    """
    try:
        loaded = ctx.load_manifest(manifest)
    except ManifestError as e:
        raise click.ClickException(str(e)) from e

    installed = loaded.installed_repository().get_installed_extensions(namespace)
    presenter: IPresenter = get_container().resolve(IPresenter)  # type: ignore[type-abstract]

    if not installed:
        presenter.print("No extension installed.")
        return

    rows = []
    for extension in installed:
        namespaces = (
            ", ".join(sorted(extension.namespaces))
            if extension.namespaces is not None
            else "<root>"
        )
        dependencies = ", ".join(
            f"{d}?" if d.optional else str(d) for d in extension.dependencies
        )
        rows.append([str(extension.id), extension.type, namespaces, dependencies or "-"])
    presenter.print_table(["Extension", "Type", "Namespaces", "Dependencies"], rows)
