"""
The ``extinit`` command group.

Commands are declared in extinit.cli.commands and attached by
register_commands() on import.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

import click

from ..core.bootstrap import bootstrap
from .context import ExtinitContext

try:
    __version__ = version("extinit")
except PackageNotFoundError:
    __version__ = "0.1.0"


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="extinit")
@click.option("--verbose", "-v", is_flag=True, help="Log diagnostics to stderr.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """extinit - initialize installed extensions

    Activates the extensions listed in an installed-extension manifest,
    dependencies first, in every namespace they are installed in.

    \b
    Commands:
        extinit list                 Show installed extensions
        extinit initialize           Initialize installed extensions
        extinit initialize -n NS     Initialize extensions of one namespace
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        return

    ctx.obj = ExtinitContext.create(verbose=verbose)
    bootstrap(ctx.obj.settings)


def register_commands() -> None:
    """Attach every command of extinit.cli.commands to the group."""
    from .commands import COMMANDS

    for cmd in COMMANDS:
        cli.add_command(cmd)


register_commands()


__all__ = [
    "ExtinitContext",
    "__version__",
    "cli",
    "register_commands",
]
