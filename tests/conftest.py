"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Callable
from pathlib import Path

import pytest
from rmguard.core.config import GuardConfig, save_config
from rmguard.guard.guard import DeletionGuard
from rmguard.guard.remover import Remover

SH_SHIM = """#!/bin/sh
basedir=$(dirname "$(echo "$0" | sed -e 's,\\\\,/,g')")

if [ -x "$basedir/node" ]; then
  "$basedir/node"  "$basedir/{dest}" "$@"
  ret=$?
else
  node  "$basedir/{dest}" "$@"
  ret=$?
fi
exit $ret
"""


@pytest.fixture
def prefix(tmp_path: Path) -> Path:
    """Install prefix with the standard module and bin directories."""
    root = tmp_path / "inst"
    (root / "lib" / "pkgs").mkdir(parents=True)
    (root / "bin").mkdir()
    return root


@pytest.fixture
def config(prefix: Path) -> GuardConfig:
    """Config whose only managed root is the prefix."""
    return GuardConfig(prefix=prefix)


@pytest.fixture
def guard(config: GuardConfig) -> DeletionGuard:
    """Guard with a fresh resolution cache."""
    return DeletionGuard(config)


@pytest.fixture
def remover() -> Remover:
    """Remover that really deletes."""
    return Remover()


@pytest.fixture
def installed_package(prefix: Path) -> Path:
    """An installed package directory with an executable script."""
    pkg = prefix / "lib" / "pkgs" / "foo"
    (pkg / "bin").mkdir(parents=True)
    (pkg / "bin" / "foo.js").write_text("console.log('foo')\n")
    (pkg / "package.json").write_text('{"name": "foo"}\n')
    return pkg


@pytest.fixture
def write_shim() -> Callable[[Path, str], Path]:
    """Factory writing a POSIX shell command shim that forwards to dest."""

    def _write(path: Path, dest: str) -> Path:
        path.write_text(SH_SHIM.replace("{dest}", dest))
        return path

    return _write


@pytest.fixture
def config_file(tmp_path: Path, prefix: Path) -> Path:
    """Config file using the standard layout below the test prefix."""
    path = tmp_path / "config.toml"
    save_config(GuardConfig.for_prefix(prefix), path)
    return path
