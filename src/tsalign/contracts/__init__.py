"""JSON-facing contracts for tsalign."""

from tsalign.contracts.request import AlignOptions, AlignRequest

__all__ = ["AlignOptions", "AlignRequest"]
