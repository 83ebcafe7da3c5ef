"""Guarded remove command.

Removes a path after the deletion guard has verified it belongs to the
managed tree (with --gently), or purges it unconditionally.
"""

from typing import Annotated

import typer

from rmguard.cli.types import load_guard
from rmguard.guard.errors import ClobberError, ProtectedPathError, RemovalError
from rmguard.guard.gently import gently_rm
from rmguard.guard.models import GentlyRmResult, RmOutcome, SkipReason
from rmguard.guard.remover import Remover
from rmguard.utils.formatting import print_error, print_info, print_success, print_warning


def remove(
    ctx: typer.Context,
    target: Annotated[
        str,
        typer.Argument(help="Path to remove (absolute or relative to the prefix)."),
    ],
    gently: Annotated[
        bool,
        typer.Option("--gently", "-g", help="Only remove paths verified to be managed."),
    ] = False,
    base: Annotated[
        str | None,
        typer.Option("--base", "-b", help="Boundary directory (default: prefix)."),
    ] = None,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Purge verified paths recursively."),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show what would be removed."),
    ] = False,
) -> None:
    """Remove a package-managed path."""
    guard = load_guard(ctx, force=force)
    remover = Remover(dry_run=dry_run)

    try:
        result = gently_rm(target, gently, base, guard=guard, remover=remover)
    except ProtectedPathError as e:
        print_error(f"{e.path} is a managed root and may not be deleted.")
        raise typer.Exit(code=1) from e
    except ClobberError as e:
        print_error(f"Refusing to delete {e.path}: not in {e.parent}")
        raise typer.Exit(code=1) from e
    except (RemovalError, OSError) as e:
        print_error(f"Failed to remove {target}: {e}")
        raise typer.Exit(code=1) from e

    _print_result(result)


def _print_result(result: GentlyRmResult) -> None:
    """Display the outcome of a removal."""
    if result.outcome == RmOutcome.DRY_RUN:
        print_info(f"Dry-run: would remove {result.target}")
        return

    if result.outcome == RmOutcome.REMOVED:
        print_success(f"Removed {result.target}")
        pruned = result.removal.pruned if result.removal else ()
        if pruned:
            print_info(f"Pruned {len(pruned)} empty parent director{'y' if len(pruned) == 1 else 'ies'}.")
        return

    if result.skip is not None:
        if result.skip.reason == SkipReason.NOT_INSTALLED_BY_PARENT:
            print_warning(f"Not removing {result.target}: installed outside the requested base.")
        else:
            print_info(f"{result.target} no longer exists.")
        return

    print_info(f"Nothing removed at {result.target}.")
