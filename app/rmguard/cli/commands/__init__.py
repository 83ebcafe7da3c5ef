"""CLI commands for rmguard.

This package contains all subcommand implementations.
"""

from rmguard.cli.commands import check, config, rm, roots

__all__ = ["check", "config", "rm", "roots"]
