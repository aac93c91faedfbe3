"""Tests for coordinates and coords keys."""

import math

import pytest

from infinichess.core.errors import IcnError, InfiniteCoordinate, InvalidCoordinate
from infinichess.core.types import coords_from_key, coords_key, ensure_finite


class TestCoordsKey:
    def test_basic(self) -> None:
        assert coords_key((-1, 2)) == "-1,2"
        assert coords_key((0, 0)) == "0,0"

    def test_huge_values_are_exact(self) -> None:
        big = 10**40 + 7
        assert coords_key((big, -big)) == f"{big},{-big}"

    def test_integral_floats_are_normalised(self) -> None:
        assert coords_key((-0.0, 3.0)) == "0,3"

    @pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan])
    def test_non_finite_raises(self, value: float) -> None:
        with pytest.raises(InfiniteCoordinate):
            coords_key((value, 0))

    def test_fractional_raises(self) -> None:
        with pytest.raises(InvalidCoordinate):
            coords_key((1.5, 0))

    def test_bool_raises(self) -> None:
        with pytest.raises(InvalidCoordinate):
            coords_key((True, 0))

    def test_past_int_string_limit_raises(self) -> None:
        with pytest.raises(InfiniteCoordinate, match="too large"):
            coords_key((10**5000, 0))


class TestCoordsFromKey:
    def test_basic(self) -> None:
        assert coords_from_key("-1,2") == (-1, 2)
        assert coords_from_key("0,5") == (0, 5)

    def test_roundtrip_large(self) -> None:
        key = f"{-(10**50)},{10**60}"
        assert coords_key(coords_from_key(key)) == key

    @pytest.mark.parametrize("key", ["-0,1", "01,2", "1, 2", "a,b", "1,2,3", "", "1"])
    def test_non_canonical_raises(self, key: str) -> None:
        with pytest.raises(InvalidCoordinate):
            coords_from_key(key)

    def test_past_int_string_limit_raises(self) -> None:
        key = "9" * 5000 + ",1"
        with pytest.raises(InfiniteCoordinate, match=r"too large: '9{40}\.\.\.'") as exc_info:
            coords_from_key(key)
        assert isinstance(exc_info.value, IcnError)
        assert len(str(exc_info.value)) < 100


class TestEnsureFinite:
    def test_returns_ints(self) -> None:
        assert ensure_finite((2.0, -3)) == (2, -3)

    def test_infinite_raises(self) -> None:
        with pytest.raises(InfiniteCoordinate):
            ensure_finite((0, -math.inf))
