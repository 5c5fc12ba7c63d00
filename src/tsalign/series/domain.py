"""Time and value domains of a set of series.

Used by charting code to size axes before or after alignment.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from tsalign.core.types import RawSeries
from tsalign.series.normalize import normalize_series_list


def time_domain(series_list: Sequence[RawSeries] | None) -> tuple[float, float] | None:
    """Return ``(min_timestamp, max_timestamp)`` over all valid points.

    Returns:
        The extent, or None when no series has a valid point
    """
    timestamps = [ts for series in normalize_series_list(series_list) for ts, _ in series]
    if not timestamps:
        return None
    return min(timestamps), max(timestamps)


def value_domain(
    series_list: Sequence[RawSeries] | None,
    include_zero: bool = False,
    padding_factor: float = 0.05,
    min_padding: float = 0.0,
    max_padding: float = 0.0,
) -> tuple[float, float] | None:
    """Return a padded ``(low, high)`` value range over all known values.

    Args:
        series_list: Series to scan; missing values are ignored
        include_zero: Stretch the range so that it contains 0
        padding_factor: Fraction of the span added on both sides
        min_padding: Absolute padding added below the range
        max_padding: Absolute padding added above the range

    Returns:
        The padded range. With no known value: ``(0.0, 1.0)`` when
        ``include_zero`` is set, otherwise None
    """
    values = np.array(
        [v for series in normalize_series_list(series_list) for _, v in series if v is not None],
        dtype=float,
    )
    if values.size == 0:
        return (0.0, 1.0) if include_zero else None

    low = float(values.min())
    high = float(values.max())
    if include_zero:
        low = min(low, 0.0)
        high = max(high, 0.0)

    if low == high:
        # Flat data still gets a visible band
        low -= min_padding or abs(low * padding_factor) or 1.0
        high += max_padding or abs(high * padding_factor) or 1.0
        return low, high

    span = high - low
    return low - (min_padding + span * padding_factor), high + (max_padding + span * padding_factor)


__all__ = ["time_domain", "value_domain"]
