"""Alignment configuration.

A single frozen configuration class carries every option that changes the
output of ``align_series``. Nothing is taken from an implicit global
default: callers either pass an ``AlignConfig`` or accept the explicit
defaults declared on the class.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from enum import StrEnum
from typing import Any

from tsalign.core.errors import EConfigInvalid


class InterpolationStrategy(StrEnum):
    """How gaps strictly inside a series' known extent are filled."""

    NONE = "none"
    """Leave internal gaps empty."""

    PREVIOUS = "previous"
    """Forward fill from the nearest earlier known value."""

    NEXT = "next"
    """Backward fill from the nearest later known value."""

    LINEAR = "linear"
    """Straight line between the bounding known values."""


class ExtrapolationStrategy(StrEnum):
    """How rows before the first / after the last known value are filled."""

    NONE = "none"
    NULL = "null"
    ZERO = "zero"
    NEAREST = "nearest"
    LINEAR = "linear"


# Host option keys (camelCase) -> AlignConfig field names
_OPTION_ALIASES: dict[str, str] = {
    "interpolation": "interpolation",
    "extrapolationBefore": "extrapolation_before",
    "extrapolationAfter": "extrapolation_after",
    "sortInputSeries": "sort_input_series",
}


def _coerce_strategy(enum_cls: type[StrEnum], value: Any, option: str) -> StrEnum:
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).lower()) if isinstance(value, str) else enum_cls(value)
    except ValueError:
        allowed = [member.value for member in enum_cls]
        raise EConfigInvalid(
            f"Unknown {option} strategy: {value!r}",
            context={"option": option, "value": value, "allowed": allowed},
        ) from None


@dataclass(frozen=True)
class AlignConfig:
    """Configuration for multi-series alignment.

    Args:
        interpolation: Strategy for gaps inside each series' known extent
        extrapolation_before: Strategy for rows before the first known value
        extrapolation_after: Strategy for rows after the last known value
        sort_input_series: Sort a private copy of each series by timestamp
            before populating the table (protects against unsorted host data)
    """

    interpolation: InterpolationStrategy = InterpolationStrategy.NONE
    extrapolation_before: ExtrapolationStrategy = ExtrapolationStrategy.NONE
    extrapolation_after: ExtrapolationStrategy = ExtrapolationStrategy.NONE
    sort_input_series: bool = True

    def __post_init__(self) -> None:
        # Accept plain strings and normalize them to the enums
        object.__setattr__(
            self,
            "interpolation",
            _coerce_strategy(InterpolationStrategy, self.interpolation, "interpolation"),
        )
        object.__setattr__(
            self,
            "extrapolation_before",
            _coerce_strategy(
                ExtrapolationStrategy, self.extrapolation_before, "extrapolation_before"
            ),
        )
        object.__setattr__(
            self,
            "extrapolation_after",
            _coerce_strategy(
                ExtrapolationStrategy, self.extrapolation_after, "extrapolation_after"
            ),
        )
        if not isinstance(self.sort_input_series, bool):
            raise EConfigInvalid(
                "sort_input_series must be a bool",
                context={"value": self.sort_input_series},
                fix_hint="Pass True or False",
            )

    @classmethod
    def linear(cls, sort_input_series: bool = True) -> AlignConfig:
        """Linear interpolation, no extrapolation.

        What charting call sites use: lines are drawn between samples but
        never invented beyond a series' own range.
        """
        return cls(
            interpolation=InterpolationStrategy.LINEAR,
            extrapolation_before=ExtrapolationStrategy.NULL,
            extrapolation_after=ExtrapolationStrategy.NULL,
            sort_input_series=sort_input_series,
        )

    @classmethod
    def step(cls, sort_input_series: bool = True) -> AlignConfig:
        """Sample-and-hold preset for state-like sensors.

        Forward fills inside the range and holds the last value afterwards.
        """
        return cls(
            interpolation=InterpolationStrategy.PREVIOUS,
            extrapolation_before=ExtrapolationStrategy.NULL,
            extrapolation_after=ExtrapolationStrategy.NEAREST,
            sort_input_series=sort_input_series,
        )

    @classmethod
    def from_options(cls, options: Mapping[str, Any] | None) -> AlignConfig:
        """Build a config from a host options mapping.

        Keys may be camelCase (``extrapolationBefore``) or the snake_case
        field names. Missing keys keep the class defaults.
        """
        if options is None:
            return cls()
        if not isinstance(options, Mapping):
            raise EConfigInvalid(
                "Alignment options must be a mapping",
                context={"type": type(options).__name__},
            )

        field_names = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in options.items():
            name = _OPTION_ALIASES.get(key, key)
            if name not in field_names:
                raise EConfigInvalid(
                    f"Unknown alignment option: {key!r}",
                    context={"option": key, "allowed": sorted(_OPTION_ALIASES)},
                    fix_hint="Recognized options: " + ", ".join(_OPTION_ALIASES),
                )
            kwargs[name] = value
        return cls(**kwargs)

    def replace(self, **changes: Any) -> AlignConfig:
        """Return a copy with the given fields changed."""
        return replace(self, **changes)

    def to_options(self) -> dict[str, Any]:
        """Return the camelCase options mapping understood by host code."""
        return {
            "interpolation": self.interpolation.value,
            "extrapolationBefore": self.extrapolation_before.value,
            "extrapolationAfter": self.extrapolation_after.value,
            "sortInputSeries": self.sort_input_series,
        }
