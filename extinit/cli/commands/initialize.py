"""
Native Click implementation of the initialize command.

Usage: extinit initialize [-n NAMESPACE] [-t TYPE] [-m MANIFEST] [--dry-run]
"""

from __future__ import annotations

from pathlib import Path

import click

from ...core.container import get_container
from ...core.exceptions import ManifestError
from ...core.interfaces.handler import IExtensionHandlerManager
from ...core.interfaces.presenter import IPresenter
from ...core.interfaces.repositories import ICoreExtensionRepository
from ...services.handlers.manager import RecordingHandlerManager
from ...services.initialization.initializer import ExtensionInitializer
from ..context import ExtinitContext
from ..decorators import require_manifest


@click.command("initialize")
@click.option("--namespace", "-n", default=None, help="Only initialize this namespace.")
@click.option(
    "--type", "-t", "extension_type", default=None, help="Only initialize this extension type."
)
@click.option(
    "--manifest",
    "-m",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Installed-extension manifest (default: manifest.path setting).",
)
@click.option("--dry-run", is_flag=True, help="Show the activation order without activating.")
@click.pass_obj
@require_manifest
def initialize(
    ctx: ExtinitContext,
    namespace: str | None,
    extension_type: str | None,
    manifest: Path | None,
    dry_run: bool,
) -> None:
    """Initialize installed extensions, dependencies first.

    Failures are reported per extension and never stop the others.
    Extensions installed on root only are skipped when --namespace is given.

    \b
    Examples:

        extinit initialize                   # Everything, every namespace

        extinit initialize -n wiki:dev       # Extensions of one namespace

        extinit initialize -t python --dry-run
    """
    try:
        loaded = ctx.load_manifest(manifest)
    except ManifestError as e:
        raise click.ClickException(str(e)) from e

    container = get_container()
    container.register_singleton(
        ICoreExtensionRepository,  # type: ignore[type-abstract]
        implementation=loaded.core_repository(extra=ctx.settings.core.extensions),
    )

    recorder = RecordingHandlerManager(
        None if dry_run else container.resolve(IExtensionHandlerManager)  # type: ignore[type-abstract]
    )
    initializer = ExtensionInitializer.from_container(
        loaded.installed_repository(), handler_manager=recorder, container=container
    )
    initializer.initialize(namespace, extension_type)

    presenter: IPresenter = container.resolve(IPresenter)  # type: ignore[type-abstract]
    if not recorder.records:
        presenter.print("No extension initialized.")
        return

    rows = []
    for step, record in enumerate(recorder.records, 1):
        if recorder.dry_run:
            status = "planned"
        else:
            status = "ok" if record.succeeded else "failed"
        rows.append(
            [
                str(step),
                str(record.extension.id),
                record.extension.type,
                record.namespace or "<root>",
                status,
            ]
        )
    presenter.print_table(["#", "Extension", "Type", "Namespace", "Status"], rows)
    if recorder.dry_run:
        presenter.print_warning("Dry run: no extension was activated.")

    failures = recorder.failures()
    if failures:
        presenter.print("")
        for record in failures:
            presenter.print_error(f"{record.extension.id}: {record.error}")
