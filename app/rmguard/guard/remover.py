"""Filesystem remover.

Deletes a target and then prunes ancestor directories that were left
empty, stopping below a boundary directory. Removal is idempotent: a
target that is already gone is reported as not removed.
"""

import errno
import logging
import os
import shutil
import stat

from rmguard.guard.checker import is_inside
from rmguard.guard.errors import RemovalError
from rmguard.guard.models import RemovalInstruction, RemovalResult

logger = logging.getLogger(__name__)


class Remover:
    """Removes targets and prunes empty parents up to a boundary.

    Attributes:
        _dry_run: If True, simulate removals without modifying the filesystem.
    """

    def __init__(self, dry_run: bool = False) -> None:
        """Initialize the Remover.

        Args:
            dry_run: If True, report what would be removed without removing.
        """
        self._dry_run = dry_run

    @property
    def dry_run(self) -> bool:
        """Check if the remover only simulates removals."""
        return self._dry_run

    def apply(self, instruction: RemovalInstruction) -> RemovalResult:
        """Carry out a removal instruction issued by the guard.

        Args:
            instruction: Instruction to execute.

        Returns:
            RemovalResult describing what was removed.
        """
        return self.remove(instruction.target, purge=instruction.purge, base=instruction.base)

    def remove(self, target: str, *, purge: bool = False, base: str | None = None) -> RemovalResult:
        """Remove a target and prune empty ancestors.

        Without ``purge`` a directory is only removed when it is empty;
        files and links are always unlinked.

        Args:
            target: Absolute path to remove.
            purge: Remove directories recursively.
            base: Boundary directory. Pruning stops below it. None prunes
                nothing above the target.

        Returns:
            RemovalResult describing what was removed.

        Raises:
            RemovalError: If the target is not a directory, file or link.
            OSError: If removal fails for a reason other than a race.
        """
        target = os.path.normpath(target)
        base = os.path.normpath(base) if base else None

        try:
            st = os.lstat(target)
        except FileNotFoundError:
            logger.debug("%s does not exist, nothing to remove", target)
            return RemovalResult(path=target, removed=False, dry_run=self._dry_run)

        mode = st.st_mode
        if not (stat.S_ISDIR(mode) or stat.S_ISREG(mode) or stat.S_ISLNK(mode)):
            raise RemovalError(target, f"{target} is not a directory, file, or link")

        if self._dry_run:
            logger.info("Dry-run: would remove %s%s", target, " (purge)" if purge else "")
            return RemovalResult(path=target, removed=False, dry_run=True)

        if purge and stat.S_ISDIR(mode):
            logger.debug("Purging %s", target)
            shutil.rmtree(target)
            removed = True
        elif not stat.S_ISDIR(mode):
            logger.debug("Removing %s", target)
            os.unlink(target)
            removed = True
        else:
            # Plain directories are left to the pruning pass
            removed = self._remove_if_empty(target)
            if not removed:
                return RemovalResult(path=target, removed=False)

        pruned = self._prune(os.path.dirname(target), base) if base else ()
        return RemovalResult(path=target, removed=removed, pruned=pruned)

    def _prune(self, branch: str, base: str) -> tuple[str, ...]:
        """Remove empty directories from branch upwards, stopping at base."""
        if not is_inside(branch, base):
            logger.debug("%s is not below %s, not pruning", branch, base)
            return ()

        pruned: list[str] = []
        while branch != base and branch != os.path.dirname(branch):
            if not self._remove_if_empty(branch):
                break
            pruned.append(branch)
            branch = os.path.dirname(branch)

        logger.debug("Finished pruning up to %s", branch)
        return tuple(pruned)

    def _remove_if_empty(self, directory: str) -> bool:
        """Remove a directory if it has no entries.

        Losing a race (the directory vanished or gained entries) is not
        an error; the directory is simply reported as kept.
        """
        try:
            if os.listdir(directory):
                logger.debug("Quitting because other entries in %s", directory)
                return False
            os.rmdir(directory)
        except FileNotFoundError:
            logger.debug("Quitting because lost the race to remove %s", directory)
            return False
        except OSError as e:
            if e.errno in (errno.ENOTEMPTY, errno.EEXIST):
                logger.debug("Quitting because new entries in %s", directory)
                return False
            raise

        logger.debug("Removed empty directory %s", directory)
        return True
