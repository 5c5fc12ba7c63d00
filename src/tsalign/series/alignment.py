"""Multi-series time alignment.

Puts several independently sampled series on one shared, sorted timestamp
axis and fills each series' column according to an ``AlignConfig``.
Also provides pandas bridges for wide and long (panel) data.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

import numpy as np
import pandas as pd

from tsalign.core.config import AlignConfig
from tsalign.core.errors import EInputInvalid
from tsalign.core.types import AlignedTable, RawSeries
from tsalign.series.fill import fill_column
from tsalign.series.normalize import normalize_series_list
from tsalign.series.timeline import build_table

logger = logging.getLogger(__name__)


def resolve_config(
    config: AlignConfig | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> AlignConfig:
    """Turn a config, a host options mapping or None into an ``AlignConfig``.

    Keyword overrides (snake_case or camelCase) are applied on top.
    """
    if config is None:
        resolved = AlignConfig()
    elif isinstance(config, AlignConfig):
        resolved = config
    else:
        resolved = AlignConfig.from_options(config)

    if overrides:
        resolved = AlignConfig.from_options({**resolved.to_options(), **overrides})
    return resolved


def align_series(
    series_list: Sequence[RawSeries] | None,
    config: AlignConfig | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> AlignedTable:
    """Align multiple time series to a common set of timestamps.

    Each input series is a sequence of ``[timestamp, value]`` pairs; absent
    series (None) still get a column. Malformed points are dropped and
    non-numeric values are treated as missing. Every column is filled
    independently using only its own known extent.

    Args:
        series_list: Series to align, None entries allowed
        config: AlignConfig or host options mapping (default: AlignConfig())
        **overrides: Individual options overriding ``config``

    Returns:
        Rows ``[timestamp, value_1, ..., value_n]`` sorted by timestamp, or
        an empty list when no series contributes a usable timestamp

    Raises:
        EConfigInvalid: If an option or strategy name is not recognized
        EInputInvalid: If ``series_list`` is not a list of series

    Example:
        >>> align_series([[[100, 10], [300, 30]], [[200, 20]]], AlignConfig.linear())
        [[100, 10, None], [200, 20.0, 20], [300, 30, None]]
    """
    cfg = resolve_config(config, **overrides)

    if series_list is None:
        return []

    normalized = normalize_series_list(series_list, sort=cfg.sort_input_series)
    table = build_table(normalized)
    if not table:
        logger.debug("No usable timestamps across %d series", len(normalized))
        return []

    logger.debug(
        "Aligning %d series on %d timestamps (interpolation=%s, before=%s, after=%s)",
        len(normalized),
        len(table),
        cfg.interpolation.value,
        cfg.extrapolation_before.value,
        cfg.extrapolation_after.value,
    )

    for col in range(1, len(normalized) + 1):
        fill_column(
            table,
            col,
            cfg.interpolation,
            cfg.extrapolation_before,
            cfg.extrapolation_after,
        )

    return table


# ---------------------------
# pandas bridges
# ---------------------------


def table_to_frame(
    table: AlignedTable,
    names: Sequence[str],
    ds_col: str = "ds",
) -> pd.DataFrame:
    """Convert an aligned table into a wide DataFrame.

    Missing values become NaN; the value columns are float.
    """
    columns = [ds_col, *names]
    if not table:
        frame = pd.DataFrame({col: pd.Series(dtype="float64") for col in columns})
        return frame

    frame = pd.DataFrame(table, columns=columns)
    value_cols = list(names)
    frame[value_cols] = frame[value_cols].astype("float64")
    return frame


def aligned_frame(
    series_list: Sequence[RawSeries] | None,
    config: AlignConfig | Mapping[str, Any] | None = None,
    names: Sequence[str] | None = None,
    ds_col: str = "ds",
) -> pd.DataFrame:
    """Align series and return the result as a wide DataFrame.

    Args:
        series_list: Series to align
        config: Alignment configuration
        names: Column name per series (default: series_0, series_1, ...)
        ds_col: Name of the timestamp column (default: "ds")

    Returns:
        DataFrame with ``ds_col`` plus one float column per series

    Raises:
        EInputInvalid: If ``names`` does not match the number of series
    """
    table = align_series(series_list, config)
    n_series = 0 if series_list is None else len(series_list)
    if names is None:
        names = [f"series_{idx}" for idx in range(n_series)]
    elif len(names) != n_series:
        raise EInputInvalid(
            "names must have one entry per series",
            context={"n_names": len(names), "n_series": n_series},
        )
    return table_to_frame(table, names, ds_col=ds_col)


def _to_epoch_ms(ds: pd.Series) -> tuple[pd.Series, Any]:
    """Return epoch milliseconds and the original timezone (or None)."""
    tz = ds.dt.tz
    naive = ds.dt.tz_convert("UTC").dt.tz_localize(None) if tz is not None else ds
    ms = (naive - pd.Timestamp(0)) // pd.Timedelta(milliseconds=1)
    return ms, tz


def _from_epoch_ms(ms: pd.Series, tz: Any) -> pd.Series:
    ds = pd.to_datetime(ms, unit="ms")
    if tz is not None:
        ds = ds.dt.tz_localize("UTC").dt.tz_convert(tz)
    return ds


def align_panel(
    df: pd.DataFrame,
    config: AlignConfig | Mapping[str, Any] | None = None,
    id_col: str = "unique_id",
    ds_col: str = "ds",
    y_col: str = "y",
) -> pd.DataFrame:
    """Align a long-format panel into a wide frame, one column per series.

    Series appear in order of first occurrence of their id. Datetime
    timestamps are aligned on epoch milliseconds and converted back, keeping
    the original timezone; numeric timestamps are used as they are.

    Args:
        df: DataFrame with id, timestamp and value columns
        config: Alignment configuration
        id_col: Name of series ID column (default: "unique_id")
        ds_col: Name of timestamp column (default: "ds")
        y_col: Name of value column (default: "y")

    Returns:
        Wide DataFrame with ``ds_col`` plus one column per series id

    Raises:
        EInputInvalid: If required columns are missing or ``ds_col`` is
            neither datetime nor numeric
    """
    required_cols = {id_col, ds_col, y_col}
    missing = required_cols - set(df.columns)
    if missing:
        raise EInputInvalid(
            f"Missing required columns: {sorted(missing)}",
            context={"columns": list(df.columns)},
            fix_hint=f"Panel DataFrame must have [{id_col}, {ds_col}, {y_col}] columns",
        )

    is_datetime = pd.api.types.is_datetime64_any_dtype(df[ds_col])
    if not is_datetime and not pd.api.types.is_numeric_dtype(df[ds_col]):
        raise EInputInvalid(
            f"Column '{ds_col}' must be datetime or numeric",
            context={"dtype": str(df[ds_col].dtype)},
        )

    tz = None
    timestamps = df[ds_col]
    if is_datetime:
        timestamps, tz = _to_epoch_ms(timestamps)

    ids = list(pd.unique(df[id_col]))
    series_list = []
    for uid in ids:
        mask = (df[id_col] == uid).to_numpy()
        ts_values = timestamps.to_numpy()[mask].tolist()
        y_values = df[y_col].to_numpy()[mask].tolist()
        series_list.append(list(zip(ts_values, y_values)))

    frame = aligned_frame(series_list, config, names=[str(uid) for uid in ids], ds_col=ds_col)
    if is_datetime and not frame.empty:
        frame[ds_col] = _from_epoch_ms(frame[ds_col].astype(np.int64), tz)
    return frame


__all__ = [
    "resolve_config",
    "align_series",
    "table_to_frame",
    "aligned_frame",
    "align_panel",
]
