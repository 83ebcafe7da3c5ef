"""Configuration commands.

Creates and displays the guard configuration file.
"""

from pathlib import Path
from typing import Annotated

import typer

from rmguard.cli.types import get_config_path
from rmguard.core.config import (
    ConfigError,
    GuardConfig,
    config_exists,
    require_config,
    save_config,
)
from rmguard.core.paths import get_config_path as default_config_path
from rmguard.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Create and show the guard configuration.",
    invoke_without_command=True,
    no_args_is_help=True,
)


@app.command()
def init(
    ctx: typer.Context,
    prefix: Annotated[
        Path,
        typer.Option("--prefix", "-p", help="Install prefix."),
    ],
    global_prefix: Annotated[
        Path | None,
        typer.Option("--global-prefix", "-g", help="Global install prefix."),
    ] = None,
    force_purge: Annotated[
        bool,
        typer.Option("--force-purge", help="Always purge verified paths recursively."),
    ] = False,
    overwrite: Annotated[
        bool,
        typer.Option("--overwrite", help="Replace an existing config file."),
    ] = False,
) -> None:
    """Write a config using the standard layout below the prefixes."""
    path = get_config_path(ctx) or default_config_path()

    if config_exists(path) and not overwrite:
        print_error(f"Config already exists: {path}")
        print_info("Use --overwrite to replace it.")
        raise typer.Exit(code=1)

    try:
        config = GuardConfig.for_prefix(
            prefix.expanduser().absolute(),
            global_prefix.expanduser().absolute() if global_prefix else None,
            force=force_purge,
        )
        saved = save_config(config, path)
    except (ValueError, ConfigError) as e:
        print_error(f"Failed to write config: {e}")
        raise typer.Exit(code=1) from e

    print_success(f"Config written to {saved}")


@app.command()
def show(ctx: typer.Context) -> None:
    """Show the active configuration."""
    config = require_config(get_config_path(ctx))

    console.print(f"[header]prefix[/]            {config.prefix}")
    for name in ("global_prefix", "module_dir", "global_module_dir", "bin_dir", "global_bin_dir"):
        value = getattr(config, name)
        console.print(f"[header]{name:<17}[/] {value if value is not None else '[muted]-[/]'}")
    console.print(f"[header]force[/]             {str(config.force).lower()}")
