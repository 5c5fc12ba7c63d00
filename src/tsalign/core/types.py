"""Shared type definitions for tsalign.

Type aliases used across modules for clarity and consistency.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

# Timestamps are an arbitrary numeric axis; callers use epoch milliseconds.
Timestamp = float
Value = float | None

# (timestamp, value) after normalization
DataPoint = tuple[Timestamp, Value]
Series = list[DataPoint]

# Raw host input: anything sequence-shaped, points may be malformed
RawSeries = Sequence[Any] | None

# [timestamp, v_1, ..., v_n]
AlignedRow = list[Any]
AlignedTable = list[AlignedRow]

__all__ = [
    "Timestamp",
    "Value",
    "DataPoint",
    "Series",
    "RawSeries",
    "AlignedRow",
    "AlignedTable",
]
