"""Time utilities for history span handling."""

from __future__ import annotations

import logging
import re

from tsalign.core.errors import ESpanInvalid

logger = logging.getLogger(__name__)

# Calendar units are approximations: a month is 30 days, a year 365 days.
SPAN_UNIT_SECONDS: dict[str, int] = {
    "s": 1,
    "m": 60,
    "h": 3600,
    "d": 86400,
    "w": 604800,
    "mo": 86400 * 30,
    "y": 86400 * 365,
}

_SPAN_RE = re.compile(r"(\d+)\s*(mo|[smhdwy])", re.IGNORECASE)


def parse_history_span(span: str, strict: bool = False) -> int:
    """Convert a history span such as ``"24h"`` or ``"3mo"`` to milliseconds.

    Args:
        span: ``<number><unit>`` with unit in s, m, h, d, w, mo, y
            (case-insensitive)
        strict: Raise instead of returning 0 on invalid input

    Returns:
        Span length in milliseconds, 0 when the span is invalid and
        ``strict`` is False

    Raises:
        ESpanInvalid: If the span is invalid and ``strict`` is True
    """
    match = _SPAN_RE.fullmatch(span.strip()) if isinstance(span, str) else None
    if match is None:
        if strict:
            raise ESpanInvalid(f"Invalid history span: {span!r}", context={"span": span})
        logger.error("Invalid history span format: %r", span)
        return 0

    amount = int(match.group(1))
    unit = match.group(2).lower()
    return amount * SPAN_UNIT_SECONDS[unit] * 1000


def history_start(span: str, now_ms: int, strict: bool = False) -> int:
    """Return the epoch-ms timestamp ``span`` before ``now_ms``."""
    return now_ms - parse_history_span(span, strict=strict)


__all__ = ["SPAN_UNIT_SECONDS", "parse_history_span", "history_start"]
