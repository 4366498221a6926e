"""
Precondition decorators for extinit commands.
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING, Any, TypeVar

import click

if TYPE_CHECKING:
    from .context import ExtinitContext

F = TypeVar("F", bound=Callable[..., Any])


def require_manifest(f: F) -> F:
    """Exit with status 1 unless the installed-extension manifest exists.

    The command's ``manifest`` option wins over the ``manifest.path``
    setting. Stack it below ``@click.pass_obj``:

        @click.command("list")
        @click.option("--manifest", "-m", type=click.Path(path_type=Path))
        @click.pass_obj
        @require_manifest
        def list_extensions(ctx: ExtinitContext, manifest: Path | None): ...
    """

    @functools.wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        ctx: ExtinitContext | None = args[0] if args else kwargs.get("ctx")
        if ctx is None:
            raise click.ClickException(
                "ExtinitContext missing: apply @click.pass_obj above @require_manifest."
            )

        path: Path = ctx.manifest_path(kwargs.get("manifest"))
        if path.exists():
            return f(*args, **kwargs)

        click.echo(f"Error: no extension manifest found at {path}.")
        click.echo("")
        click.echo("Pass --manifest or set manifest.path in .extinit/config.toml.")
        raise SystemExit(1)

    return wrapper  # type: ignore[return-value]
