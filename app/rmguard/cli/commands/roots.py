"""Managed roots command."""

import typer
from rich.table import Table

from rmguard.cli.types import load_guard
from rmguard.utils.formatting import console


def roots(ctx: typer.Context) -> None:
    """List the managed roots, in match priority order."""
    guard = load_guard(ctx)

    table = Table(
        title="Managed Roots",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("#", width=3, justify="right")
    table.add_column("Root", style="bold")

    for index, root in enumerate(guard.config.managed_roots, start=1):
        table.add_row(str(index), root)

    console.print(table)
    if guard.config.force:
        console.print("[warning]force is enabled: gentle removals purge recursively[/]")
