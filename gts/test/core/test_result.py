"""Tests for gts.core.result module."""

import pytest

from gts.core.result import Err, Ok, Result


class TestOk:
    """Tests for Ok type."""

    def test_create_ok(self) -> None:
        result = Ok("v1.2.3")
        assert result.value == "v1.2.3"

    def test_ok_map(self) -> None:
        assert Ok(21).map(lambda x: x * 2) == Ok(42)

    def test_ok_map_err(self) -> None:
        """Ok.map_err() returns self unchanged."""
        assert Ok(42).map_err(lambda e: f"error: {e}") == Ok(42)

    def test_repr(self) -> None:
        assert repr(Ok("v1")) == "Ok('v1')"


class TestErr:
    """Tests for Err type."""

    def test_create_err(self) -> None:
        assert Err("boom").error == "boom"

    def test_err_map(self) -> None:
        """Err.map() leaves the error untouched."""
        assert Err("boom").map(lambda x: x * 2) == Err("boom")

    def test_err_map_err(self) -> None:
        assert Err("boom").map_err(lambda e: f"git: {e}") == Err("git: boom")

    def test_repr(self) -> None:
        assert repr(Err("boom")) == "Err('boom')"


def test_pattern_matching() -> None:
    result: Result[int, str] = Err("bad")
    match result:
        case Ok(value):
            pytest.fail(f"unexpected Ok({value})")
        case Err(error):
            assert error == "bad"
