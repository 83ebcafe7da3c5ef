"""Unit tests for managed path checks."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest
from rmguard.guard.cache import PathCache
from rmguard.guard.checker import ManagedPathChecker, is_inside


class TestIsInside:
    """Tests for the is_inside containment helper."""

    def test_descendant(self) -> None:
        assert is_inside("/inst/lib/pkgs/foo", "/inst") is True

    def test_equal_paths(self) -> None:
        assert is_inside("/inst", "/inst") is True

    def test_sibling_with_common_prefix(self) -> None:
        """Containment is component-wise, not string prefix."""
        assert is_inside("/inst2/foo", "/inst") is False

    def test_parent_is_not_inside_child(self) -> None:
        assert is_inside("/inst", "/inst/lib") is False

    def test_paths_are_normalized(self) -> None:
        assert is_inside("/inst/lib/../bin/foo", "/inst/bin/") is True
        assert is_inside("/inst/lib/../../etc", "/inst") is False

    def test_relative_against_absolute(self) -> None:
        assert is_inside("lib/foo", "/inst") is False


class TestManagedPathChecker:
    """Tests for ManagedPathChecker."""

    def test_managed_target(self, prefix: Path, installed_package: Path) -> None:
        """A target below the root returns the root."""
        checker = ManagedPathChecker(PathCache(str(prefix)))

        assert checker.is_managed_by(str(prefix), str(installed_package)) == str(prefix)

    def test_unmanaged_target(self, tmp_path: Path, prefix: Path) -> None:
        """A target outside the root returns None."""
        outside = tmp_path / "outside"
        outside.mkdir()
        checker = ManagedPathChecker(PathCache(str(prefix)))

        assert checker.is_managed_by(str(prefix), str(outside)) is None

    def test_empty_root_never_matches(self, prefix: Path) -> None:
        """Empty or None roots are skipped without error."""
        checker = ManagedPathChecker(PathCache(str(prefix)))

        assert checker.is_managed_by(None, str(prefix)) is None
        assert checker.is_managed_by("", str(prefix)) is None

    def test_missing_target_is_no_match(self, prefix: Path) -> None:
        """Not-found while resolving is downgraded to no match."""
        checker = ManagedPathChecker(PathCache(str(prefix)))

        assert checker.is_managed_by(str(prefix), str(prefix / "lib" / "pkgs" / "gone")) is None

    def test_linked_root_is_resolved(self, tmp_path: Path, installed_package: Path) -> None:
        """Roots that are links are compared by their destination."""
        alias = tmp_path / "alias"
        alias.symlink_to(installed_package.parent)
        checker = ManagedPathChecker(PathCache(str(tmp_path)))

        assert checker.is_managed_by(str(alias), str(installed_package)) == str(
            installed_package.parent
        )

    def test_linked_target_is_resolved(self, tmp_path: Path, prefix: Path) -> None:
        """Targets that are links are compared by their destination."""
        link = tmp_path / "link"
        link.symlink_to(prefix / "lib")
        checker = ManagedPathChecker(PathCache(str(prefix)))

        assert checker.is_managed_by(str(prefix), str(link)) == str(prefix)

    def test_io_errors_propagate(self, prefix: Path) -> None:
        """Unexpected I/O errors are not downgraded."""
        cache = MagicMock(spec=PathCache)
        cache.resolve.side_effect = PermissionError(13, "Permission denied")
        checker = ManagedPathChecker(cache)

        with pytest.raises(PermissionError):
            checker.is_managed_by(str(prefix), str(prefix / "bin"))


class TestFirstManagingRoot:
    """Tests for ManagedPathChecker.first_managing_root."""

    def test_first_match_wins(self, prefix: Path, installed_package: Path) -> None:
        """The earliest containing root is reported."""
        checker = ManagedPathChecker(PathCache(str(prefix)))
        roots = [str(prefix / "bin"), str(prefix / "lib" / "pkgs"), str(prefix)]

        assert checker.first_managing_root(roots, str(installed_package)) == str(
            prefix / "lib" / "pkgs"
        )

    def test_short_circuits(self, prefix: Path) -> None:
        """Roots after the first match are never resolved."""
        cache = MagicMock(spec=PathCache)
        cache.resolve.side_effect = lambda path: path
        checker = ManagedPathChecker(cache)

        result = checker.first_managing_root(["/inst", "/never"], "/inst/bin/foo")

        assert result == "/inst"
        resolved = [call.args[0] for call in cache.resolve.call_args_list]
        assert "/never" not in resolved

    def test_no_match(self, tmp_path: Path, prefix: Path) -> None:
        """No containing root yields None."""
        checker = ManagedPathChecker(PathCache(str(prefix)))

        assert checker.first_managing_root([None, str(prefix / "bin")], str(tmp_path)) is None

    def test_missing_root_is_skipped(self, tmp_path: Path, prefix: Path) -> None:
        """A root that does not exist counts as no match for that root only."""
        checker = ManagedPathChecker(PathCache(str(prefix)))
        roots = [str(tmp_path / "missing-root"), str(prefix)]

        assert checker.first_managing_root(roots, str(prefix / "bin")) == str(prefix)
