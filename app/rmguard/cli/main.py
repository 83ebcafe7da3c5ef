"""Main CLI application entry point.

Defines the Typer application and global options.
"""

from pathlib import Path
from typing import Annotated

import typer

from rmguard import __version__
from rmguard.cli.commands import check, config, rm, roots
from rmguard.utils.formatting import configure_logging

# Create main Typer app
app = typer.Typer(
    name="rmguard",
    help="Safely remove paths installed by a package manager.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"rmguard version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Trace every guard decision.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Only report errors.",
        ),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to config file (default: ~/.config/rmguard/config.toml).",
        ),
    ] = None,
) -> None:
    """rmguard - Safely remove paths installed by a package manager.

    Refuses to delete anything that cannot be shown to live inside the
    package manager's managed directories.
    """
    configure_logging(verbose=verbose, quiet=quiet)

    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["config_path"] = config_path


# Register commands
app.command(name="rm")(rm.remove)
app.command(name="check")(check.check)
app.command(name="roots")(roots.roots)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
