"""Exceptions and error classification for the deletion guard.

Refusals raised by the guard carry the offending path and the boundary
it was checked against. Filesystem probe failures are classified into
a ProbeErrorKind so call sites branch on an explicit kind instead of
inspecting errno values.
"""

import errno
from enum import Enum


class GuardError(Exception):
    """Base exception for deletion guard errors."""


class ProtectedPathError(GuardError):
    """Raised when the target is itself a managed root.

    Attributes:
        path: The managed root that was requested for removal.
    """

    def __init__(self, path: str) -> None:
        super().__init__(f"May not delete: {path}")
        self.path = path


class ClobberError(GuardError):
    """Raised when a target cannot be proven safe to delete.

    Mirrors an "already exists" failure so callers expecting EEXIST
    can keep treating it that way.

    Attributes:
        path: The target (or resolved link source) that was refused.
        parent: The boundary the path failed to be verified against.
    """

    errno = errno.EEXIST
    code = "EEXIST"

    def __init__(self, path: str, parent: str) -> None:
        super().__init__(f"Refusing to delete: {path} not in {parent}")
        self.path = path
        self.parent = parent


class RemovalError(GuardError):
    """Raised when the remover meets something it cannot remove."""

    def __init__(self, path: str, message: str) -> None:
        super().__init__(message)
        self.path = path


class NotAShimError(GuardError):
    """Raised when a file is not a recognizable command shim."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Not a command shim: {path}")
        self.path = path


class ProbeErrorKind(str, Enum):
    """Kind of failure seen while probing a path for indirection.

    Attributes:
        NOT_FOUND: The path does not exist.
        NOT_A_SHIM: The path is a file but not a command shim.
        IS_A_DIRECTORY: The path is a directory, so it cannot be a shim.
        IO: Any other I/O failure (permission denied, EIO, ...).
    """

    NOT_FOUND = "not_found"
    NOT_A_SHIM = "not_a_shim"
    IS_A_DIRECTORY = "is_a_directory"
    IO = "io"


def probe_error_kind(exc: BaseException) -> ProbeErrorKind:
    """Classify an exception raised while probing a path.

    Args:
        exc: Exception raised by lstat, readlink or the shim reader.

    Returns:
        The matching ProbeErrorKind. Unknown exceptions map to IO.
    """
    if isinstance(exc, NotAShimError):
        return ProbeErrorKind.NOT_A_SHIM
    if isinstance(exc, FileNotFoundError):
        return ProbeErrorKind.NOT_FOUND
    if isinstance(exc, IsADirectoryError):
        return ProbeErrorKind.IS_A_DIRECTORY
    return ProbeErrorKind.IO
