"""Core error types with rich context.

Alignment itself never raises on bad data points (they are dropped or
coerced). These errors cover configuration mistakes and structurally
wrong top-level input only.
"""

from __future__ import annotations

from typing import Any


class TSAlignError(Exception):
    """Base exception with rich context.

    Every tsalign error derives from this class. Each subclass below sets
    its own ``error_code`` (config, input and span errors), so callers can
    catch ``TSAlignError`` for all of them or one subclass for a single
    kind. ``ERROR_REGISTRY`` maps each code back to its class.
    """

    error_code: str = "E_UNKNOWN"
    fix_hint: str = ""

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        fix_hint: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}
        if fix_hint:
            self.fix_hint = fix_hint

    def __str__(self) -> str:
        parts = [f"[{self.error_code}] {self.message}"]
        if self.context:
            parts.append(f"(context: {self.context})")
        if self.fix_hint:
            parts.append(f"[hint: {self.fix_hint}]")
        return " ".join(parts)


class EConfigInvalid(TSAlignError):
    """Alignment options are unknown or malformed."""

    error_code = "E_CONFIG_INVALID"
    fix_hint = (
        "interpolation must be one of none/previous/next/linear; "
        "extrapolation must be one of none/null/zero/nearest/linear"
    )


class EInputInvalid(TSAlignError):
    """Top-level input is not a list of series (or frame lacks columns)."""

    error_code = "E_INPUT_INVALID"
    fix_hint = "Pass a list of series, each a list of [timestamp, value] pairs"


class ESpanInvalid(TSAlignError):
    """History span string could not be parsed."""

    error_code = "E_SPAN_INVALID"
    fix_hint = "Use '<number><unit>' with unit in s, m, h, d, w, mo, y (e.g. '24h')"


# Error registry for lookup
ERROR_REGISTRY: dict[str, type[TSAlignError]] = {
    "E_CONFIG_INVALID": EConfigInvalid,
    "E_INPUT_INVALID": EInputInvalid,
    "E_SPAN_INVALID": ESpanInvalid,
}


def get_error_class(error_code: str) -> type[TSAlignError]:
    """Get error class by code."""
    return ERROR_REGISTRY.get(error_code, TSAlignError)
