"""Tests for series/normalize.py."""

import copy

import numpy as np
import pytest

from tsalign.core.errors import EInputInvalid
from tsalign.series.normalize import (
    coerce_value,
    is_valid_point,
    normalize_series,
    normalize_series_list,
)


class TestIsValidPoint:
    """Tests for is_valid_point."""

    @pytest.mark.parametrize(
        "point",
        [
            [1, 2],
            (1, None),
            [1.5, "x"],
            [np.int64(3), 1],
            (0, float("nan")),
            np.array([1.0, 2.0]),
        ],
    )
    def test_valid(self, point) -> None:
        """Pairs with a numeric timestamp are valid whatever the value."""
        assert is_valid_point(point)

    @pytest.mark.parametrize(
        "point",
        [
            None,
            [1],
            [1, 2, 3],
            ["1", 2],
            [None, 2],
            [True, 2],
            [float("nan"), 2],
            [float("inf"), 2],
            [10**400, 2],
            np.array([1.0, 2.0, 3.0]),
            {0: 1, 1: 2},
            "12",
        ],
    )
    def test_invalid(self, point) -> None:
        """Broken structure or timestamp is invalid."""
        assert not is_valid_point(point)


class TestCoerceValue:
    """Tests for coerce_value."""

    @pytest.mark.parametrize(
        "value", ["20", None, True, float("nan"), float("-inf"), [1], 10**400]
    )
    def test_non_numeric_to_none(self, value) -> None:
        """Unusable values become None."""
        assert coerce_value(value) is None

    def test_numbers_kept(self) -> None:
        """Plain numbers pass through unchanged."""
        assert coerce_value(3) == 3
        assert coerce_value(-2.5) == -2.5

    def test_numpy_scalars_converted(self) -> None:
        """numpy scalars become builtin numbers."""
        assert type(coerce_value(np.float64(1.5))) is float
        assert type(coerce_value(np.int32(4))) is int


class TestNormalizeSeries:
    """Tests for normalize_series."""

    def test_none_is_empty(self) -> None:
        """An absent series normalizes to an empty list."""
        assert normalize_series(None) == []

    def test_drops_and_coerces(self) -> None:
        """Malformed points are dropped and bad values coerced."""
        raw = [[100, 10], None, [200, "20"], [None, 30], [300, 30], [400]]
        assert normalize_series(raw) == [(100, 10), (200, None), (300, 30)]

    def test_keeps_order_without_sort(self) -> None:
        """Input order is preserved when not sorting."""
        raw = [[3, 1], [1, 2], [2, 3]]
        assert [p[0] for p in normalize_series(raw)] == [3, 1, 2]

    def test_sort_is_stable(self) -> None:
        """Sorting keeps duplicate timestamps in input order."""
        raw = [[2, "b"], [1, 0], [2, 7], [2, 9]]
        assert normalize_series(raw, sort=True) == [(1, 0), (2, None), (2, 7), (2, 9)]

    @pytest.mark.parametrize("sort", [True, False])
    def test_input_not_mutated(self, sort: bool) -> None:
        """The input list and its points are not modified."""
        raw = [[3, "x"], [1, 2], None]
        snapshot = copy.deepcopy(raw)
        first = raw[0]
        result = normalize_series(raw, sort=sort)
        assert raw == snapshot
        assert raw[0] is first
        assert all(point is not first for point in result)

    @pytest.mark.parametrize("sort", [True, False])
    def test_idempotent(self, sort: bool) -> None:
        """Normalizing normalized output changes nothing."""
        raw = [[5, 1], [None, 1], [2, "v"], [2, 3], [9, float("nan")]]
        once = normalize_series(raw, sort=sort)
        assert normalize_series(once, sort=sort) == once

    def test_ndarray_series(self) -> None:
        """An (n, 2) array is a series; its numbers come back as builtins."""
        result = normalize_series(np.array([[300, 30.0], [100, np.nan]]), sort=True)
        assert result == [(100.0, None), (300.0, 30.0)]
        assert all(type(ts) is float for ts, _ in result)

    def test_ndarray_rows_in_list(self) -> None:
        """Array rows inside a plain list are points like any pair."""
        series = [np.array([1, 10]), [2, 20], np.array([3, 30, 300])]
        assert normalize_series(series) == [(1, 10), (2, 20)]

    def test_huge_int_timestamp_dropped(self) -> None:
        """Integers beyond float range are malformed timestamps, not errors."""
        assert normalize_series([[10**400, 1], [1, 2]]) == [(1, 2)]


class TestNormalizeSeriesList:
    """Tests for normalize_series_list."""

    def test_parallel_output(self) -> None:
        """One output per input, absent series become empty."""
        result = normalize_series_list([[[1, 1]], None, [], [[2, "x"]]])
        assert result == [[(1, 1)], [], [], [(2, None)]]

    def test_none_list(self) -> None:
        """None list gives no series."""
        assert normalize_series_list(None) == []

    def test_tuple_series_accepted(self) -> None:
        """Any sequence works as a series."""
        assert normalize_series_list([((1, 2), (3, 4))]) == [[(1, 2), (3, 4)]]

    @pytest.mark.parametrize("bad", ["abc", 5, {"a": 1}])
    def test_rejects_non_sequence_list(self, bad) -> None:
        """The series list itself must be a sequence."""
        with pytest.raises(EInputInvalid):
            normalize_series_list(bad)

    def test_rejects_non_sequence_series(self) -> None:
        """A series entry that is not a sequence is rejected with its index."""
        with pytest.raises(EInputInvalid, match="index 1"):
            normalize_series_list([[[1, 1]], 42])

    def test_ndarray_list(self) -> None:
        """A 3-d array is a list of equally long series."""
        stacked = np.array([[[1, 10], [2, 20]], [[2, 5], [3, 6]]])
        assert normalize_series_list(stacked) == [[(1, 10), (2, 20)], [(2, 5), (3, 6)]]

    def test_flat_ndarray_list_rejected(self) -> None:
        """A 1-d array holds numbers, not series."""
        with pytest.raises(EInputInvalid, match="index 0"):
            normalize_series_list(np.array([1.0, 2.0]))
