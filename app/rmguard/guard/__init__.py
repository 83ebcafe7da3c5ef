"""Guarded removal of package-managed paths.

This module provides indirection resolution for symlinks and command
shims, managed root checks, the deletion guard decision tree, and the
remover that carries out its instructions.
"""

from rmguard.guard.cache import PathCache
from rmguard.guard.checker import ManagedPathChecker, is_inside
from rmguard.guard.errors import (
    ClobberError,
    GuardError,
    NotAShimError,
    ProbeErrorKind,
    ProtectedPathError,
    RemovalError,
    probe_error_kind,
)
from rmguard.guard.gently import gently_rm, gently_rm_async
from rmguard.guard.guard import DeletionGuard
from rmguard.guard.models import (
    Decision,
    GentlyRmResult,
    RemovalInstruction,
    RemovalResult,
    RmOutcome,
    Skip,
    SkipReason,
)
from rmguard.guard.remover import Remover
from rmguard.guard.resolver import IndirectionResolver
from rmguard.guard.shim import read_cmd_shim

__all__ = [
    "ClobberError",
    "Decision",
    "DeletionGuard",
    "GentlyRmResult",
    "GuardError",
    "IndirectionResolver",
    "ManagedPathChecker",
    "NotAShimError",
    "PathCache",
    "ProbeErrorKind",
    "ProtectedPathError",
    "RemovalError",
    "RemovalInstruction",
    "RemovalResult",
    "Remover",
    "RmOutcome",
    "Skip",
    "SkipReason",
    "gently_rm",
    "gently_rm_async",
    "is_inside",
    "probe_error_kind",
    "read_cmd_shim",
]
