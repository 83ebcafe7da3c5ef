"""CLI package for rmguard.

This package contains the Typer application and all subcommands.
"""

from rmguard.cli.main import app

__all__ = ["app"]
