"""Input sanitation for raw host series.

Host data arrives as loosely-typed ``[timestamp, value]`` pairs. Points
with a broken structure or timestamp are dropped; points whose value is
not a usable number are kept with the value coerced to ``None`` so they
count as missing and stay eligible for filling.

numpy arrays are accepted anywhere a list is: as the list of series, as a
series of shape ``(n, 2)`` or as a single point.
"""

from __future__ import annotations

import logging
import math
import numbers
from collections.abc import Sequence
from typing import Any

import numpy as np

from tsalign.core.errors import EInputInvalid
from tsalign.core.types import RawSeries, Series

logger = logging.getLogger(__name__)


def _is_real(value: Any) -> bool:
    """True for finite real numbers; bools are not numbers here."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # ints too large for a float
        return False


def _as_builtin(value: numbers.Real) -> int | float:
    if type(value) in (int, float):
        return value
    # numpy scalars and friends
    if isinstance(value, numbers.Integral):
        return int(value)
    return float(value)


def as_list(obj: Any) -> Any:
    """Return ``obj.tolist()`` for numpy arrays, ``obj`` unchanged otherwise."""
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    return obj


def is_valid_point(point: Any) -> bool:
    """Return True when ``point`` is a 2-element pair with a numeric timestamp."""
    point = as_list(point)
    return isinstance(point, (list, tuple)) and len(point) == 2 and _is_real(point[0])


def coerce_value(value: Any) -> int | float | None:
    """Return ``value`` as a plain number, or None when it is not usable."""
    if _is_real(value):
        return _as_builtin(value)
    return None


def normalize_series(series: RawSeries, sort: bool = False) -> Series:
    """Sanitize one raw series into a fresh list of ``(timestamp, value)`` tuples.

    Args:
        series: Raw points (list or ``(n, 2)`` array), or None for an
            absent series
        sort: Return the points sorted by timestamp (stable, so the relative
            order of duplicate timestamps is kept)

    Returns:
        New list; the input list and its points are never modified
    """
    if series is None:
        return []

    result: Series = []
    dropped = 0
    coerced = 0
    for point in as_list(series):
        point = as_list(point)
        if not is_valid_point(point):
            dropped += 1
            continue
        value = coerce_value(point[1])
        if value is None and point[1] is not None:
            coerced += 1
        result.append((_as_builtin(point[0]), value))

    if dropped or coerced:
        logger.debug(
            "Normalized series: kept %d points, dropped %d malformed, coerced %d values to None",
            len(result),
            dropped,
            coerced,
        )

    if sort:
        result.sort(key=lambda p: p[0])
    return result


def normalize_series_list(
    series_list: Sequence[RawSeries] | None,
    sort: bool = False,
) -> list[Series]:
    """Sanitize every series of ``series_list``.

    The result is parallel to the input: same count, same order, with
    absent series turned into empty lists.

    Raises:
        EInputInvalid: If ``series_list`` or one of its entries is not a
            sequence (a bare string or number, for example)
    """
    if series_list is None:
        return []
    if not _is_sequence(series_list):
        raise EInputInvalid(
            "series_list must be a list of series",
            context={"type": type(series_list).__name__},
        )

    normalized: list[Series] = []
    for idx, series in enumerate(as_list(series_list)):
        if series is not None and not _is_sequence(series):
            raise EInputInvalid(
                f"Series at index {idx} is not a sequence of points",
                context={"index": idx, "type": type(series).__name__},
            )
        normalized.append(normalize_series(series, sort=sort))
    return normalized


def _is_sequence(obj: Any) -> bool:
    if isinstance(obj, np.ndarray):
        return obj.ndim > 0
    return isinstance(obj, Sequence) and not isinstance(obj, (str, bytes))


__all__ = [
    "as_list",
    "is_valid_point",
    "coerce_value",
    "normalize_series",
    "normalize_series_list",
]
