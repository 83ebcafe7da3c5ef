"""One-level indirection resolution for symlinks and command shims."""

import logging
import os
import stat

from rmguard.guard.errors import NotAShimError, ProbeErrorKind, probe_error_kind
from rmguard.guard.shim import read_cmd_shim

logger = logging.getLogger(__name__)


class IndirectionResolver:
    """Reads the destination of a symlink or command shim.

    Only a single hop is ever followed; chains of links are not walked
    to a fixed point.
    """

    def resolve_one_level(self, path: str) -> str | None:
        """Return the raw indirection target of a path.

        Args:
            path: Absolute path to probe.

        Returns:
            The link text of a symlink, the destination of a shim, or None
            if the path is neither.

        Raises:
            FileNotFoundError: If the path does not exist.
            OSError: For any other I/O failure.
        """
        st = os.lstat(path)
        if stat.S_ISLNK(st.st_mode):
            return os.readlink(path)
        if not stat.S_ISREG(st.st_mode):
            # Opening a FIFO blocks; devices and sockets are never shims
            return None

        try:
            return read_cmd_shim(path)
        except (NotAShimError, OSError) as e:
            kind = probe_error_kind(e)
            if kind in (ProbeErrorKind.NOT_A_SHIM, ProbeErrorKind.IS_A_DIRECTORY):
                return None
            raise

    def follow(self, path: str) -> str:
        """Follow one level of indirection from a path.

        A path that is not an indirection, or that no longer exists,
        follows to itself.

        Args:
            path: Absolute, normalized path.

        Returns:
            The indirection target resolved against the directory that
            contains ``path``, or ``path`` unchanged.

        Raises:
            OSError: For I/O failures other than a missing path.
        """
        try:
            source = self.resolve_one_level(path)
        except OSError as e:
            if probe_error_kind(e) != ProbeErrorKind.NOT_FOUND:
                raise
            logger.debug("%s does not exist, nothing to follow", path)
            return path

        if source is None:
            return path
        return os.path.normpath(os.path.join(os.path.dirname(path), source))
