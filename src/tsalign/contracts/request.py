"""Pydantic specs for JSON alignment requests.

These models describe the payload accepted by ``python -m tsalign align``
and by host integrations that hand over JSON rather than Python objects.
Option keys follow the host's camelCase names; snake_case is accepted too.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from tsalign.core.config import AlignConfig

InterpolationName = Literal["none", "previous", "next", "linear"]
ExtrapolationName = Literal["none", "null", "zero", "nearest", "linear"]


class BaseSpec(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)


class AlignOptions(BaseSpec):
    interpolation: InterpolationName = "none"
    extrapolation_before: ExtrapolationName = Field("none", alias="extrapolationBefore")
    extrapolation_after: ExtrapolationName = Field("none", alias="extrapolationAfter")
    sort_input_series: bool = Field(True, alias="sortInputSeries")

    def to_config(self) -> AlignConfig:
        return AlignConfig(
            interpolation=self.interpolation,
            extrapolation_before=self.extrapolation_before,
            extrapolation_after=self.extrapolation_after,
            sort_input_series=self.sort_input_series,
        )


class AlignRequest(BaseSpec):
    # Points are left untyped: malformed points are dropped during alignment
    series: list[list[Any] | None]
    options: AlignOptions = Field(default_factory=AlignOptions)
    names: list[str] | None = None

    @model_validator(mode="after")
    def _check_names(self) -> AlignRequest:
        if self.names is not None and len(self.names) != len(self.series):
            raise ValueError(
                f"names has {len(self.names)} entries but series has {len(self.series)}"
            )
        return self


__all__ = ["AlignOptions", "AlignRequest", "InterpolationName", "ExtrapolationName"]
