"""API discovery and introspection for tsalign.

Provides ``describe()`` which returns a machine-readable schema of
the library's public surface: version, stable APIs, fill strategies and
error codes with fix hints.

Usage:
    >>> from tsalign import describe
    >>> info = describe()
    >>> info["strategies"]["interpolation"]
    ['none', 'previous', 'next', 'linear']
"""

from __future__ import annotations

from typing import Any


def describe() -> dict[str, Any]:
    """Return a machine-readable API schema for tsalign.

    Returns a dictionary with:
      - ``version``: library version string
      - ``apis``: mapping of task names to primary API functions
      - ``strategies``: allowed interpolation / extrapolation names
      - ``default_options``: options used when none are given
      - ``error_codes``: mapping of error codes to message/fix_hint
    """
    import tsalign
    from tsalign.core.config import AlignConfig

    return {
        "version": tsalign.__version__,
        "apis": _get_apis(),
        "strategies": _get_strategies(),
        "default_options": AlignConfig().to_options(),
        "error_codes": _get_error_codes(),
    }


def _get_apis() -> dict[str, dict[str, str]]:
    """Return stable API surface."""
    return {
        "align": {
            "function": "align_series",
            "description": "Align series on one sorted timeline with per-series gap filling",
        },
        "align_frame": {
            "function": "aligned_frame",
            "description": "Align series and return a wide pandas DataFrame",
        },
        "align_panel": {
            "function": "align_panel",
            "description": "Align a long [unique_id, ds, y] panel into a wide DataFrame",
        },
        "normalize": {
            "function": "normalize_series_list",
            "description": "Drop malformed points and coerce non-numeric values to None",
        },
        "inspect": {
            "function": "inspect_series",
            "description": "Report dropped/coerced points, duplicates and ordering per series",
        },
        "time_domain": {
            "function": "time_domain",
            "description": "Min/max timestamp over all series",
        },
        "value_domain": {
            "function": "value_domain",
            "description": "Padded min/max value over all series",
        },
        "history_span": {
            "function": "parse_history_span",
            "description": "Convert spans like '24h' or '3mo' to milliseconds",
        },
    }


def _get_strategies() -> dict[str, list[str]]:
    from tsalign.core.config import ExtrapolationStrategy, InterpolationStrategy

    return {
        "interpolation": [s.value for s in InterpolationStrategy],
        "extrapolation": [s.value for s in ExtrapolationStrategy],
    }


def _get_error_codes() -> dict[str, dict[str, str]]:
    """Return all error codes with descriptions and fix hints."""
    from tsalign.core.errors import ERROR_REGISTRY

    result: dict[str, dict[str, str]] = {}
    for code, cls in ERROR_REGISTRY.items():
        result[code] = {
            "class": cls.__name__,
            "description": cls.__doc__ or "",
            "fix_hint": cls.fix_hint,
        }
    return result


__all__ = ["describe"]
