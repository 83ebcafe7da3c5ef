"""Tests for guard exceptions and probe error classification."""

import errno

import pytest
from rmguard.guard.errors import (
    ClobberError,
    GuardError,
    NotAShimError,
    ProbeErrorKind,
    ProtectedPathError,
    probe_error_kind,
)


class TestGuardErrors:
    """Tests for refusal exceptions."""

    def test_protected_path_error(self) -> None:
        err = ProtectedPathError("/inst")

        assert isinstance(err, GuardError)
        assert err.path == "/inst"
        assert str(err) == "May not delete: /inst"

    def test_clobber_error_carries_path_and_parent(self) -> None:
        err = ClobberError("/tmp/unrelated/foo", "/inst")

        assert isinstance(err, GuardError)
        assert err.path == "/tmp/unrelated/foo"
        assert err.parent == "/inst"
        assert str(err) == "Refusing to delete: /tmp/unrelated/foo not in /inst"

    def test_clobber_error_maps_to_eexist(self) -> None:
        err = ClobberError("/a", "/b")

        assert err.errno == errno.EEXIST
        assert err.code == "EEXIST"


class TestProbeErrorKind:
    """Tests for probe_error_kind."""

    @pytest.mark.parametrize(
        ("exc", "kind"),
        [
            (FileNotFoundError(errno.ENOENT, "missing"), ProbeErrorKind.NOT_FOUND),
            (IsADirectoryError(errno.EISDIR, "dir"), ProbeErrorKind.IS_A_DIRECTORY),
            (NotAShimError("/inst/bin/foo"), ProbeErrorKind.NOT_A_SHIM),
            (PermissionError(errno.EACCES, "denied"), ProbeErrorKind.IO),
            (NotADirectoryError(errno.ENOTDIR, "not a dir"), ProbeErrorKind.IO),
            (OSError(errno.EIO, "i/o"), ProbeErrorKind.IO),
        ],
    )
    def test_classification(self, exc: BaseException, kind: ProbeErrorKind) -> None:
        assert probe_error_kind(exc) == kind

    def test_oserror_with_enoent_is_not_found(self) -> None:
        """OSError(ENOENT) is constructed as FileNotFoundError by Python."""
        assert probe_error_kind(OSError(errno.ENOENT, "missing")) == ProbeErrorKind.NOT_FOUND
