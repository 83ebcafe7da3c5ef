"""Memoized path resolution.

A PathCache belongs to one guard (or one long-lived process context).
Entries are never invalidated; resolving the same path twice always
yields the same value, so concurrent fills for one key are harmless.
"""

import logging
import os

from rmguard.guard.resolver import IndirectionResolver

logger = logging.getLogger(__name__)


class PathCache:
    """Maps absolute paths to their one-level-resolved absolute paths.

    Attributes:
        _root: Directory relative paths are resolved against.
        _resolver: Resolver used on cache misses.
        _resolved: Cached entries keyed by normalized absolute path.
    """

    def __init__(self, root: str, resolver: IndirectionResolver | None = None) -> None:
        """Initialize the cache.

        Args:
            root: Install root used to absolutize relative paths.
            resolver: Indirection resolver. Defaults to a new IndirectionResolver.
        """
        self._root = os.path.abspath(root)
        self._resolver = resolver or IndirectionResolver()
        self._resolved: dict[str, str] = {}

    def resolve(self, path: str) -> str:
        """Resolve a path through at most one level of indirection.

        Args:
            path: Absolute path, or path relative to the install root.

        Returns:
            The path itself if it is not an indirection, otherwise its
            target resolved against the path's directory.

        Raises:
            FileNotFoundError: If the path does not exist. Not cached.
            OSError: For any other I/O failure. Not cached.
        """
        key = os.path.normpath(os.path.join(self._root, path))

        cached = self._resolved.get(key)
        if cached is not None:
            return cached

        source = self._resolver.resolve_one_level(key)
        if source is None:
            resolved = key
        else:
            resolved = os.path.normpath(os.path.join(os.path.dirname(key), source))
            logger.debug("%s resolves to %s", key, resolved)

        self._resolved[key] = resolved
        return resolved

    def clear(self) -> None:
        """Drop all cached entries."""
        self._resolved.clear()

    def __len__(self) -> int:
        return len(self._resolved)

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, str):
            return False
        return os.path.normpath(os.path.join(self._root, path)) in self._resolved
