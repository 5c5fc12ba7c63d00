"""Tests for series/domain.py."""

import pytest

from tsalign.series.domain import time_domain, value_domain


class TestTimeDomain:
    """Tests for time_domain."""

    def test_extent(self) -> None:
        """Min and max timestamp over all series."""
        assert time_domain([[[5, 1], [2, None]], None, [[9, "x"]]]) == (2, 9)

    def test_no_points(self) -> None:
        """No valid points gives None."""
        assert time_domain([None, [], [[None, 1]]]) is None


class TestValueDomain:
    """Tests for value_domain."""

    def test_padded_range(self) -> None:
        """Range is padded by the span times the factor."""
        low, high = value_domain([[[1, 0], [2, 100]]], padding_factor=0.1)
        assert low == pytest.approx(-10.0)
        assert high == pytest.approx(110.0)

    def test_absolute_padding_added(self) -> None:
        """Absolute padding is added on top of the relative one."""
        low, high = value_domain([[[1, 0], [2, 10]]], padding_factor=0.0, min_padding=1, max_padding=2)
        assert (low, high) == (-1.0, 12.0)

    def test_include_zero(self) -> None:
        """Zero is pulled into the range."""
        low, high = value_domain([[[1, 5], [2, 10]]], include_zero=True, padding_factor=0.0)
        assert (low, high) == (0.0, 10.0)

    def test_flat_values(self) -> None:
        """A single distinct value still yields a non-empty band."""
        low, high = value_domain([[[1, 20], [2, 20]]], padding_factor=0.05)
        assert low == pytest.approx(19.0)
        assert high == pytest.approx(21.0)

    def test_flat_zero(self) -> None:
        """A flat zero series falls back to a band of one."""
        assert value_domain([[[1, 0]]]) == (-1.0, 1.0)

    def test_ignores_missing(self) -> None:
        """None and non-numeric values are ignored."""
        low, high = value_domain([[[1, None], [2, "x"], [3, 4], [4, 8]]], padding_factor=0.0)
        assert (low, high) == (4.0, 8.0)

    def test_no_values(self) -> None:
        """No known value gives None, or (0, 1) when zero is included."""
        assert value_domain([[[1, None]]]) is None
        assert value_domain([[[1, None]]], include_zero=True) == (0.0, 1.0)
