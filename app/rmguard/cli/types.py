"""Shared helpers for CLI commands.

Loads configuration from the path given on the command line and
builds the guard objects the commands operate on.
"""

from pathlib import Path

import typer

from rmguard.core.config import GuardConfig, require_config
from rmguard.guard.guard import DeletionGuard


def get_config_path(ctx: typer.Context) -> Path | None:
    """Get the config path passed to the main callback, if any.

    Args:
        ctx: Typer context of the running command.

    Returns:
        Explicit config path, or None to use the default location.
    """
    if isinstance(ctx.obj, dict):
        path = ctx.obj.get("config_path")
        if isinstance(path, Path):
            return path
    return None


def load_guard(ctx: typer.Context, force: bool = False) -> DeletionGuard:
    """Load configuration and build a DeletionGuard.

    Args:
        ctx: Typer context of the running command.
        force: Override the configured force flag with True.

    Returns:
        DeletionGuard with a fresh resolution cache.

    Raises:
        typer.Exit: If the configuration cannot be loaded.
    """
    config: GuardConfig = require_config(get_config_path(ctx))
    if force and not config.force:
        config = config.model_copy(update={"force": True})
    return DeletionGuard(config)
