"""tsalign - Multi-series time alignment with per-series gap filling.

Puts independently sampled numeric series on one sorted timestamp axis and
fills each series' column with configurable interpolation (inside its known
range) and extrapolation (before/after it).

Input contract:
    A list of series, each a list of [timestamp, value] pairs. value may be
    None. Absent series (None) still occupy a column.

Basic usage:
    >>> from tsalign import AlignConfig, align_series
    >>> a = [[100, 10], [200, 20], [300, 30]]
    >>> b = [[150, 15], [250, 25], [350, 35]]
    >>> align_series([a, b], AlignConfig.linear())[0]
    [100, 10, None]

Host options:
    >>> align_series([a, b], {"interpolation": "previous", "extrapolationAfter": "nearest"})

DataFrames:
    >>> from tsalign import align_panel
    >>> wide = align_panel(df, AlignConfig.linear())  # df has unique_id, ds, y
"""

__version__ = "1.0.0"

from tsalign.core.config import AlignConfig, ExtrapolationStrategy, InterpolationStrategy
from tsalign.core.errors import EConfigInvalid, EInputInvalid, ESpanInvalid, TSAlignError
from tsalign.discovery import describe
from tsalign.inspect import InspectionReport, SeriesReport, inspect_series
from tsalign.series import (
    align_panel,
    align_series,
    aligned_frame,
    normalize_series,
    normalize_series_list,
    time_domain,
    value_domain,
)
from tsalign.time import history_start, parse_history_span

__all__ = [
    "__version__",
    # Alignment
    "align_series",
    "aligned_frame",
    "align_panel",
    "AlignConfig",
    "InterpolationStrategy",
    "ExtrapolationStrategy",
    # Normalization
    "normalize_series",
    "normalize_series_list",
    # Domains
    "time_domain",
    "value_domain",
    # Time
    "parse_history_span",
    "history_start",
    # Inspection
    "inspect_series",
    "InspectionReport",
    "SeriesReport",
    "describe",
    # Errors
    "TSAlignError",
    "EConfigInvalid",
    "EInputInvalid",
    "ESpanInvalid",
]
