"""Tests for domain/exceptions/output.py."""

from pathlib import Path

import pytest

from ifacegen.domain.exceptions.output import FormatError, RenderError, WriteError


class TestRenderError:
    """Tests for RenderError."""

    def test_message(self) -> None:
        assert str(RenderError("mock", "bad")) == "execute template:mock err:bad"


class TestFormatError:
    """Tests for FormatError."""

    def test_keeps_source(self) -> None:
        err = FormatError("1:1: expected declaration", "func (")
        assert err.source == "func ("
        assert "expected declaration" in str(err)

    def test_empty_reason_raises(self) -> None:
        with pytest.raises(ValueError):
            FormatError("", "x")


class TestWriteError:
    """Tests for WriteError."""

    def test_is_os_error(self) -> None:
        assert isinstance(WriteError(Path("out.go"), "denied"), OSError)

    def test_file_message(self) -> None:
        assert str(WriteError(Path("out.go"), "denied")) == "write file:'out.go' err:denied"

    def test_stdout_message(self) -> None:
        assert str(WriteError(None, "broken pipe")) == "write stdout err:broken pipe"
