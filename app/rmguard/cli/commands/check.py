"""Decision preview command.

Runs the deletion guard without removing anything and shows what a
removal would do.
"""

from typing import Annotated

import typer
from rich.table import Table

from rmguard.cli.types import load_guard
from rmguard.guard.errors import ClobberError, ProtectedPathError
from rmguard.guard.models import Decision, RemovalInstruction
from rmguard.utils.formatting import console, print_error


def check(
    ctx: typer.Context,
    target: Annotated[
        str,
        typer.Argument(help="Path to check (absolute or relative to the prefix)."),
    ],
    gently: Annotated[
        bool,
        typer.Option("--gently/--no-gently", help="Check as a gentle removal."),
    ] = True,
    base: Annotated[
        str | None,
        typer.Option("--base", "-b", help="Boundary directory (default: prefix)."),
    ] = None,
) -> None:
    """Show whether a path may be removed, without removing it."""
    guard = load_guard(ctx)

    try:
        decision = guard.decide(target, gently, base)
    except ProtectedPathError as e:
        print_error(f"{e.path} is a managed root and may not be deleted.")
        raise typer.Exit(code=1) from e
    except ClobberError as e:
        print_error(f"Refusing to delete {e.path}: not in {e.parent}")
        raise typer.Exit(code=1) from e
    except OSError as e:
        print_error(f"Failed to check {target}: {e}")
        raise typer.Exit(code=1) from e

    console.print(_decision_table(decision))


def _decision_table(decision: Decision) -> Table:
    """Build a table describing a guard decision."""
    table = Table(
        title="Guard Decision",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Target", style="bold")
    table.add_column("Decision", width=8, justify="center")
    table.add_column("Boundary")
    table.add_column("Mode", width=7)

    if isinstance(decision, RemovalInstruction):
        table.add_row(
            decision.target,
            "[removed]remove[/removed]",
            f"[boundary]{decision.base or '-'}[/boundary]",
            "purge" if decision.purge else "gentle",
        )
    else:
        table.add_row(
            decision.target,
            "[kept]skip[/kept]",
            f"[muted]{decision.reason.value}[/muted]",
            "-",
        )

    return table
