"""Tests for domain/exceptions/identifier.py."""

import pytest

from ifacegen.domain.exceptions.identifier import MalformedIdentifierError


class TestMalformedIdentifierError:
    """Tests for MalformedIdentifierError."""

    def test_is_value_error(self) -> None:
        assert issubclass(MalformedIdentifierError, ValueError)

    def test_message(self) -> None:
        err = MalformedIdentifierError("a.b/c", "bad")
        assert str(err) == "Malformed interface identifier 'a.b/c': bad"

    def test_empty_reason_raises(self) -> None:
        with pytest.raises(ValueError, match="reason must not be empty"):
            MalformedIdentifierError("x", "")
