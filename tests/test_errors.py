"""Tests for biscuit.errors — the exception hierarchy."""

import pytest

from biscuit.errors import (
    BiscuitError,
    ConfigurationError,
    HTTPError,
    MissingStateError,
    NotFound,
)


class TestHierarchy:
    @pytest.mark.parametrize(
        "exc_type", [ConfigurationError, MissingStateError, HTTPError, NotFound]
    )
    def test_all_are_biscuit_errors(self, exc_type: type[Exception]) -> None:
        assert issubclass(exc_type, BiscuitError)

    def test_missing_state_is_lookup_error(self) -> None:
        assert issubclass(MissingStateError, LookupError)


class TestHTTPError:
    def test_str(self) -> None:
        assert str(HTTPError(status=418, detail="teapot")) == "418: teapot"
        assert str(HTTPError(status=418)) == "418"

    def test_not_found_defaults(self) -> None:
        exc = NotFound()
        assert exc.status == 404
        assert exc.detail == "Not Found"
        assert isinstance(exc, HTTPError)
