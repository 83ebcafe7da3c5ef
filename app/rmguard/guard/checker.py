"""Managed path checks.

Answers "is this path under one of our managed roots" after resolving
both sides through the path cache.
"""

import logging
import os
from collections.abc import Iterable

from rmguard.guard.cache import PathCache
from rmguard.guard.errors import ProbeErrorKind, probe_error_kind

logger = logging.getLogger(__name__)


def is_inside(path: str, parent: str) -> bool:
    """Check if a path equals or lies below a parent directory.

    Comparison is lexical and component-wise on normalized absolute
    paths, so ``/inst2`` is not inside ``/inst``.

    Args:
        path: Absolute path to test.
        parent: Absolute directory path.

    Returns:
        True if ``path`` is ``parent`` or one of its descendants.
    """
    path = os.path.normpath(path)
    parent = os.path.normpath(parent)
    try:
        return os.path.commonpath([path, parent]) == parent
    except ValueError:
        # Mixed absolute and relative paths share no prefix
        return False


class ManagedPathChecker:
    """Checks paths against managed roots.

    Attributes:
        _cache: Cache used to resolve roots and targets.
    """

    def __init__(self, cache: PathCache) -> None:
        """Initialize the checker.

        Args:
            cache: Path cache shared with the owning guard.
        """
        self._cache = cache

    def is_managed_by(self, root: str | None, target: str) -> str | None:
        """Check whether a target lies within a single managed root.

        Args:
            root: Candidate managed root. Empty or None never matches.
            target: Path to check.

        Returns:
            The resolved root if the resolved target is inside it,
            None otherwise. A missing root or target counts as no match.

        Raises:
            OSError: For I/O failures other than a missing path.
        """
        if not root:
            logger.info("No path passed for target %s", target)
            return None

        try:
            resolved_root = self._cache.resolve(root)
            resolved_target = self._cache.resolve(target)
        except OSError as e:
            if probe_error_kind(e) == ProbeErrorKind.NOT_FOUND:
                return None
            raise

        if not is_inside(resolved_target, resolved_root):
            logger.debug("%s is not inside %s", resolved_target, resolved_root)
            return None
        return resolved_root

    def first_managing_root(self, roots: Iterable[str | None], target: str) -> str | None:
        """Find the first managed root containing a target.

        Roots are tried in order and the search stops at the first match.

        Args:
            roots: Candidate managed roots in priority order.
            target: Path to check.

        Returns:
            The first matching resolved root, or None.

        Raises:
            OSError: For I/O failures other than a missing path.
        """
        for root in roots:
            managed = self.is_managed_by(root, target)
            if managed is not None:
                return managed
        return None
