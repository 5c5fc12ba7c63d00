"""Per-column gap filling on an aligned table.

Every function here works on one value column of the table in place and
only ever looks at that column and the timestamp column. The known extent
of a column is measured once, before any filling, and handed unchanged to
the three phases (extrapolate before, interpolate, extrapolate after).
"""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass

from tsalign.core.config import ExtrapolationStrategy, InterpolationStrategy
from tsalign.core.types import AlignedTable, Value


@dataclass(frozen=True)
class KnownExtent:
    """Where a column held values before filling.

    Attributes:
        first: Row index of the first known value, -1 when the column is empty
        last: Row index of the last known value, -1 when the column is empty
        head: Up to two ``(timestamp, value)`` pairs, the first known points
        tail: Up to two ``(timestamp, value)`` pairs, the last known points
    """

    first: int
    last: int
    head: tuple[tuple[float, float], ...] = ()
    tail: tuple[tuple[float, float], ...] = ()

    @property
    def is_empty(self) -> bool:
        return self.first == -1


EMPTY_EXTENT = KnownExtent(-1, -1)


def _on_line(t: float, t0: float, v0: float, t1: float, v1: float) -> float | None:
    """Value at ``t`` on the line through ``(t0, v0)`` and ``(t1, v1)``.

    None when the result is not a finite number, which happens when
    timestamp or value differences overflow.
    """
    try:
        value = v0 + (v1 - v0) * (t - t0) / (t1 - t0)
        return value if math.isfinite(value) else None
    except OverflowError:
        return None


def find_known_extent(table: AlignedTable, col: int) -> KnownExtent:
    """Measure the known extent of column ``col``.

    Must run before any fill phase touches the column.
    """
    known = [idx for idx, row in enumerate(table) if row[col] is not None]
    if not known:
        return EMPTY_EXTENT
    return KnownExtent(
        first=known[0],
        last=known[-1],
        head=tuple((table[idx][0], table[idx][col]) for idx in known[:2]),
        tail=tuple((table[idx][0], table[idx][col]) for idx in known[-2:]),
    )


# ---------------------------
# Interpolation
# ---------------------------


def _interpolate_previous(table: AlignedTable, col: int, extent: KnownExtent) -> None:
    last_seen: Value = None
    for idx in range(extent.first, extent.last + 1):
        row = table[idx]
        if row[col] is not None:
            last_seen = row[col]
        else:
            row[col] = last_seen


def _interpolate_next(table: AlignedTable, col: int, extent: KnownExtent) -> None:
    next_seen: Value = None
    for idx in range(extent.last, extent.first - 1, -1):
        row = table[idx]
        if row[col] is not None:
            next_seen = row[col]
        else:
            row[col] = next_seen


def _interpolate_linear(table: AlignedTable, col: int, extent: KnownExtent) -> None:
    prev_idx = -1
    for idx in range(extent.first, extent.last + 1):
        v1 = table[idx][col]
        if v1 is None:
            continue
        if prev_idx != -1 and idx > prev_idx + 1:
            t0 = table[prev_idx][0]
            v0 = table[prev_idx][col]
            t1 = table[idx][0]
            for gap_idx in range(prev_idx + 1, idx):
                if t1 == t0:
                    table[gap_idx][col] = v0
                else:
                    value = _on_line(table[gap_idx][0], t0, v0, t1, v1)
                    table[gap_idx][col] = v0 if value is None else value
        prev_idx = idx


def _interpolate_none(table: AlignedTable, col: int, extent: KnownExtent) -> None:
    return None


InterpolationFn = Callable[[AlignedTable, int, KnownExtent], None]

INTERPOLATORS: dict[InterpolationStrategy, InterpolationFn] = {
    InterpolationStrategy.NONE: _interpolate_none,
    InterpolationStrategy.PREVIOUS: _interpolate_previous,
    InterpolationStrategy.NEXT: _interpolate_next,
    InterpolationStrategy.LINEAR: _interpolate_linear,
}


def apply_interpolation(
    table: AlignedTable,
    col: int,
    strategy: InterpolationStrategy,
    extent: KnownExtent,
) -> None:
    """Fill null rows strictly inside ``extent`` of column ``col``.

    Nothing happens when the column has fewer than two known rows.
    """
    if extent.is_empty or extent.first >= extent.last:
        return
    INTERPOLATORS[InterpolationStrategy(strategy)](table, col, extent)


# ---------------------------
# Extrapolation
# ---------------------------


def _nearest_value(extent: KnownExtent, before: bool) -> Value:
    return extent.head[0][1] if before else extent.tail[-1][1]


def _linear_reference(
    extent: KnownExtent, before: bool
) -> tuple[float, float, float, float] | None:
    """Return ``(t1, v1, t2, v2)`` for linear extrapolation, or None.

    Uses the first two known points (before) or the last two (after).
    None when there is only one known point or both share a timestamp.
    """
    points = extent.head if before else extent.tail
    if len(points) < 2:
        return None
    (t1, v1), (t2, v2) = points
    if t1 == t2:
        return None
    return t1, v1, t2, v2


def _extrapolate_null(
    table: AlignedTable, col: int, rows: range, extent: KnownExtent, before: bool
) -> None:
    for idx in rows:
        table[idx][col] = None


def _extrapolate_zero(
    table: AlignedTable, col: int, rows: range, extent: KnownExtent, before: bool
) -> None:
    for idx in rows:
        table[idx][col] = 0


def _extrapolate_nearest(
    table: AlignedTable, col: int, rows: range, extent: KnownExtent, before: bool
) -> None:
    value = _nearest_value(extent, before)
    for idx in rows:
        table[idx][col] = value


def _extrapolate_linear(
    table: AlignedTable, col: int, rows: range, extent: KnownExtent, before: bool
) -> None:
    reference = _linear_reference(extent, before)
    if reference is None:
        # Single known point or degenerate slope
        _extrapolate_nearest(table, col, rows, extent, before)
        return
    t1, v1, t2, v2 = reference
    nearest = _nearest_value(extent, before)
    for idx in rows:
        value = _on_line(table[idx][0], t1, v1, t2, v2)
        table[idx][col] = nearest if value is None else value


ExtrapolationFn = Callable[[AlignedTable, int, range, KnownExtent, bool], None]

EXTRAPOLATORS: dict[ExtrapolationStrategy, ExtrapolationFn] = {
    ExtrapolationStrategy.NULL: _extrapolate_null,
    ExtrapolationStrategy.ZERO: _extrapolate_zero,
    ExtrapolationStrategy.NEAREST: _extrapolate_nearest,
    ExtrapolationStrategy.LINEAR: _extrapolate_linear,
}


def apply_extrapolation(
    table: AlignedTable,
    col: int,
    strategy: ExtrapolationStrategy,
    extent: KnownExtent,
    before: bool,
) -> None:
    """Fill rows of column ``col`` outside ``extent`` on one side.

    Args:
        table: Aligned table, modified in place
        col: Value column index (1-based, column 0 is the timestamp)
        strategy: Extrapolation strategy
        extent: Known extent measured before any filling
        before: True for rows before the first known row, False for rows
            after the last one
    """
    strategy = ExtrapolationStrategy(strategy)
    if strategy is ExtrapolationStrategy.NONE:
        return

    if extent.is_empty:
        # Nothing to anchor to: only zero can populate an empty column
        if strategy is ExtrapolationStrategy.ZERO:
            _extrapolate_zero(table, col, range(len(table)), extent, before)
        return

    rows = range(0, extent.first) if before else range(extent.last + 1, len(table))
    if not rows:
        return
    EXTRAPOLATORS[strategy](table, col, rows, extent, before)


def fill_column(
    table: AlignedTable,
    col: int,
    interpolation: InterpolationStrategy,
    extrapolation_before: ExtrapolationStrategy,
    extrapolation_after: ExtrapolationStrategy,
) -> KnownExtent:
    """Run the three fill phases on one column against its original extent.

    Returns:
        The known extent that was used
    """
    extent = find_known_extent(table, col)
    apply_extrapolation(table, col, extrapolation_before, extent, before=True)
    apply_interpolation(table, col, interpolation, extent)
    apply_extrapolation(table, col, extrapolation_after, extent, before=False)
    return extent


__all__ = [
    "KnownExtent",
    "find_known_extent",
    "apply_interpolation",
    "apply_extrapolation",
    "fill_column",
    "INTERPOLATORS",
    "EXTRAPOLATORS",
]
