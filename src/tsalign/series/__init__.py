"""Series module for tsalign.

Provides normalization, timeline construction, gap filling and alignment.
"""

from .alignment import align_panel, align_series, aligned_frame, resolve_config, table_to_frame
from .domain import time_domain, value_domain
from .fill import KnownExtent, apply_extrapolation, apply_interpolation, fill_column, find_known_extent
from .normalize import coerce_value, is_valid_point, normalize_series, normalize_series_list
from .timeline import build_table, unify_timestamps

__all__ = [
    # Alignment
    "align_series",
    "aligned_frame",
    "align_panel",
    "table_to_frame",
    "resolve_config",
    # Normalization
    "is_valid_point",
    "coerce_value",
    "normalize_series",
    "normalize_series_list",
    # Timeline
    "unify_timestamps",
    "build_table",
    # Gap filling
    "KnownExtent",
    "find_known_extent",
    "apply_interpolation",
    "apply_extrapolation",
    "fill_column",
    # Domains
    "time_domain",
    "value_domain",
]
