"""Tests for domain/exceptions/locating.py."""

from pathlib import Path

import pytest

from ifacegen.domain.exceptions.locating import NoGoFilesError, PackageNotFoundError


class TestPackageNotFoundError:
    """Tests for PackageNotFoundError."""

    def test_message(self) -> None:
        err = PackageNotFoundError("example.com/x", "not in any root")
        assert str(err) == "Cannot find package 'example.com/x': not in any root"
        assert err.searched == ()

    def test_searched_listed(self) -> None:
        err = PackageNotFoundError("x", "gone", (Path("/a/x"), Path("/b/x")))
        assert "searched:" in str(err)
        assert "/a/x" in str(err)
        assert "/b/x" in str(err)

    def test_empty_reason_raises(self) -> None:
        with pytest.raises(ValueError):
            PackageNotFoundError("x", "")


class TestNoGoFilesError:
    """Tests for NoGoFilesError."""

    def test_is_package_not_found(self) -> None:
        err = NoGoFilesError(".", Path("/tmp/empty"))
        assert isinstance(err, PackageNotFoundError)
        assert err.directory == Path("/tmp/empty")
        assert "no buildable Go source files in /tmp/empty" in str(err)
