"""Core module - configuration, errors and shared types."""

from tsalign.core.config import AlignConfig, ExtrapolationStrategy, InterpolationStrategy
from tsalign.core.errors import (
    EConfigInvalid,
    EInputInvalid,
    ESpanInvalid,
    TSAlignError,
)

__all__ = [
    # Config
    "AlignConfig",
    "InterpolationStrategy",
    "ExtrapolationStrategy",
    # Errors
    "TSAlignError",
    "EConfigInvalid",
    "EInputInvalid",
    "ESpanInvalid",
]
