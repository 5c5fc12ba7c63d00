"""Unified timeline construction.

Builds the row-per-timestamp table that every series column is later
filled on.
"""

from __future__ import annotations

from collections.abc import Sequence

from tsalign.core.types import AlignedTable, Series, Timestamp


def unify_timestamps(series_list: Sequence[Series]) -> list[Timestamp]:
    """Return the sorted distinct timestamps across all series."""
    seen: set[Timestamp] = set()
    for series in series_list:
        seen.update(ts for ts, _ in series)
    return sorted(seen)


def build_table(series_list: Sequence[Series]) -> AlignedTable:
    """Build the aligned table seeded with exact values.

    Column 0 holds the timestamp, column ``i + 1`` the value of series ``i``.
    Cells without an exact point stay None. When a series has several
    points at one timestamp the later point wins.

    Returns:
        One row per distinct timestamp, or an empty list when no series
        contributes a point
    """
    timeline = unify_timestamps(series_list)
    if not timeline:
        return []

    n_series = len(series_list)
    row_index = {ts: idx for idx, ts in enumerate(timeline)}
    table: AlignedTable = [[ts] + [None] * n_series for ts in timeline]

    for col, series in enumerate(series_list, start=1):
        for ts, value in series:
            table[row_index[ts]][col] = value

    return table


__all__ = ["unify_timestamps", "build_table"]
