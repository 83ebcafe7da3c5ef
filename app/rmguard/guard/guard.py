"""Deletion guard.

Turns a removal request into a RemovalInstruction, a Skip, or a refusal.
In gentle mode a target is only removed when it can be shown to belong
to the managed tree below the requested parent. The checks run in a
fixed order; later checks rely on earlier ones having failed.
"""

import logging
import os

from rmguard.core.config import GuardConfig
from rmguard.guard.cache import PathCache
from rmguard.guard.checker import ManagedPathChecker, is_inside
from rmguard.guard.errors import (
    ClobberError,
    ProbeErrorKind,
    ProtectedPathError,
    probe_error_kind,
)
from rmguard.guard.models import Decision, RemovalInstruction, Skip, SkipReason
from rmguard.guard.resolver import IndirectionResolver

logger = logging.getLogger(__name__)


class DeletionGuard:
    """Decides whether and how a path may be removed.

    Attributes:
        _config: Managed roots and force flag.
        _resolver: Indirection resolver for links and shims.
        _cache: Resolution cache owned by (or shared with) this guard.
        _checker: Managed root checker built on the cache.
    """

    def __init__(
        self,
        config: GuardConfig,
        cache: PathCache | None = None,
        resolver: IndirectionResolver | None = None,
    ) -> None:
        """Initialize the DeletionGuard.

        Args:
            config: Guard configuration.
            cache: Resolution cache. A fresh one is created if None.
            resolver: Indirection resolver. A fresh one is created if None.
        """
        self._config = config
        self._resolver = resolver or IndirectionResolver()
        self._cache = cache or PathCache(config.install_root, self._resolver)
        self._checker = ManagedPathChecker(self._cache)

    @property
    def config(self) -> GuardConfig:
        """Get the guard configuration."""
        return self._config

    @property
    def cache(self) -> PathCache:
        """Get the resolution cache."""
        return self._cache

    def decide(
        self,
        target: str,
        gently: bool = False,
        base: str | None = None,
    ) -> Decision:
        """Decide what to do with a removal request.

        Args:
            target: Path to remove, absolute or relative to the install prefix.
            gently: Verify the target belongs to the managed tree first.
            base: Boundary directory. Defaults to the install prefix in
                gentle mode and to no boundary otherwise.

        Returns:
            RemovalInstruction to pass to the remover, or Skip when the
            target must be left alone without failing.

        Raises:
            ProtectedPathError: If the target is a managed root.
            ClobberError: If the target cannot be proven safe to delete.
            OSError: For unexpected I/O failures while probing.
        """
        roots = self._config.managed_roots
        target_path = self._absolute(target)

        logger.debug(
            "%s is being %s%s",
            target_path,
            "gently removed" if gently else "purged",
            f" from base {base}" if base else "",
        )

        if target_path in roots:
            logger.info("%s is a managed root and can't be removed", target_path)
            raise ProtectedPathError(target_path)

        purge = self._config.force or not gently

        if not gently:
            logger.info("Don't care about contents; purging %s", target_path)
            return RemovalInstruction(
                target=target_path,
                base=self._absolute(base) if base else None,
                purge=True,
            )

        parent = self._absolute(base) if base else self._absolute(self._config.install_root)
        target_dest = self._resolver.follow(target_path)

        logger.debug("Verifying %s is a managed directory", parent)
        parent_managed = self._checker.first_managing_root(roots, parent)
        if parent_managed is None:
            logger.error("Containing path %s isn't under managed control", parent)
            raise ClobberError(target_path, parent)
        logger.debug("Containing path %s is managed, in %s", parent, parent_managed)

        # A link inside the parent still has to point back into it
        if is_inside(target_path, parent) and is_inside(target_dest, parent):
            logger.info("Removing %s up to %s", target_path, parent)
            return RemovalInstruction(target=target_path, base=parent, purge=purge)
        logger.debug("%s is not under %s", target_dest, parent)

        logger.debug("Verifying %s is a managed directory", target_dest)
        dest_managed = self._checker.first_managing_root(roots, target_dest)
        if dest_managed is not None:
            logger.debug("%s is managed, in %s", target_path, dest_managed)
            if is_inside(target_dest, parent):
                logger.info("Removing %s with base %s", target_path, dest_managed)
                return RemovalInstruction(target=target_path, base=dest_managed, purge=purge)
            if target_path != target_dest:
                logger.warning("Not removing %s as it wasn't installed by %s", target_path, parent)
                return Skip(target=target_path, reason=SkipReason.NOT_INSTALLED_BY_PARENT)
        logger.info("%s is not under managed control", target_path)

        logger.debug("Checking to see if %s is a link", target_path)
        try:
            link = self._resolver.resolve_one_level(target_path)
        except OSError as e:
            if probe_error_kind(e) == ProbeErrorKind.NOT_FOUND:
                # Common while uninstalling concurrently
                logger.info("%s vanished before it could be verified", target_path)
                return Skip(target=target_path, reason=SkipReason.VANISHED)
            raise

        if link is None:
            logger.error("%s is outside %s and not a link", target_path, parent)
            raise ClobberError(target_path, parent)

        source = os.path.normpath(os.path.join(os.path.dirname(target_path), link))
        if is_inside(source, parent):
            logger.info("Link %s points at %s inside %s", target_path, source, parent)
            return RemovalInstruction(target=target_path, base=parent, purge=purge)

        logger.error("Link %s points at %s, which is not controlled by %s", target_path, source, parent)
        raise ClobberError(source, parent)

    def _absolute(self, path: str) -> str:
        """Normalize a path to absolute form under the install prefix."""
        return os.path.normpath(os.path.join(self._config.install_root, path))
