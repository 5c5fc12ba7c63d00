"""Inspection utilities for tsalign.

Diagnoses raw host series before alignment: how many points would be
dropped or treated as missing, duplicate timestamps and ordering.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from dataclasses import asdict, dataclass
from typing import Any

from tsalign.core.types import RawSeries
from tsalign.series.normalize import (
    as_list,
    coerce_value,
    is_valid_point,
    normalize_series_list,
)
from tsalign.series.timeline import unify_timestamps


@dataclass(frozen=True)
class SeriesReport:
    """Diagnostics for one input series."""

    index: int
    is_absent: bool
    points: int
    dropped: int
    coerced_null: int
    known_points: int
    duplicate_timestamps: int
    is_sorted: bool
    first_timestamp: float | None
    last_timestamp: float | None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class InspectionReport:
    """Diagnostics for a whole alignment input."""

    series: list[SeriesReport]
    timeline_length: int

    @property
    def all_ok(self) -> bool:
        return all(
            r.dropped == 0 and r.duplicate_timestamps == 0 and r.is_sorted for r in self.series
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "series": [r.to_dict() for r in self.series],
            "timeline_length": self.timeline_length,
            "all_ok": self.all_ok,
        }

    def __str__(self) -> str:
        lines = ["tsalign Input Report", "=" * 40]
        lines.append(f"Series: {len(self.series)}")
        lines.append(f"Timeline length: {self.timeline_length}")
        for r in self.series:
            if r.is_absent:
                lines.append(f"  [{r.index}] absent")
                continue
            lines.append(
                f"  [{r.index}] points={r.points} dropped={r.dropped} "
                f"coerced_null={r.coerced_null} known={r.known_points} "
                f"duplicates={r.duplicate_timestamps} sorted={r.is_sorted}"
            )
        lines.append(f"Overall: {'OK' if self.all_ok else 'Issues detected'}")
        return "\n".join(lines)


def _inspect_one(index: int, raw: RawSeries) -> SeriesReport:
    if raw is None:
        return SeriesReport(index, True, 0, 0, 0, 0, 0, True, None, None)

    raw = [as_list(point) for point in as_list(raw)]
    valid = [point for point in raw if is_valid_point(point)]
    timestamps = [point[0] for point in valid]
    values = [coerce_value(point[1]) for point in valid]
    coerced = sum(
        1 for point, value in zip(valid, values) if value is None and point[1] is not None
    )
    counts = Counter(timestamps)

    return SeriesReport(
        index=index,
        is_absent=False,
        points=len(raw),
        dropped=len(raw) - len(valid),
        coerced_null=coerced,
        known_points=sum(1 for value in values if value is not None),
        duplicate_timestamps=sum(n - 1 for n in counts.values() if n > 1),
        is_sorted=all(a <= b for a, b in zip(timestamps, timestamps[1:])),
        first_timestamp=min(timestamps) if timestamps else None,
        last_timestamp=max(timestamps) if timestamps else None,
    )


def inspect_series(series_list: Sequence[RawSeries] | None) -> InspectionReport:
    """Report on raw series the way ``align_series`` will see them.

    Raises:
        EInputInvalid: If ``series_list`` is not a list of series
    """
    normalized = normalize_series_list(series_list)
    raw_list = [] if series_list is None else as_list(series_list)
    reports = [_inspect_one(idx, raw) for idx, raw in enumerate(raw_list)]
    return InspectionReport(series=reports, timeline_length=len(unify_timestamps(normalized)))


__all__ = ["SeriesReport", "InspectionReport", "inspect_series"]
