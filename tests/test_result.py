"""Tests for credit_support.core.result -- Ok/Err and unwrap."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from credit_support.core.result import Err, Ok, unwrap


class TestOk:
    def test_map(self) -> None:
        assert Ok(2).map(lambda x: x * 3) == Ok(6)

    @given(st.integers())
    def test_map_identity(self, x: int) -> None:
        assert Ok(x).map(lambda v: v) == Ok(x)


class TestErr:
    def test_map_is_noop(self) -> None:
        e: Err[str] = Err("boom")
        assert e.map(lambda x: x * 3) is e

    def test_map_never_calls_f(self) -> None:
        called: list[object] = []
        Err("boom").map(called.append)
        assert called == []


class TestUnwrap:
    def test_ok(self) -> None:
        assert unwrap(Ok("v")) == "v"

    def test_err_raises(self) -> None:
        with pytest.raises(RuntimeError, match="boom"):
            unwrap(Err("boom"))

    def test_non_result_raises_type_error(self) -> None:
        with pytest.raises(TypeError):
            unwrap(42)  # type: ignore[arg-type]
