"""Shared data models."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    NonNegativeInt,
    field_validator,
    model_validator,
)


class DecodeRequest(BaseModel):
    """Decode request: label domain, transition model and candidate sets."""

    labels: list[str] = Field(min_length=1)
    transition_costs: list[list[float]]
    total_frequencies: list[float]
    candidates: list[dict[str, NonNegativeInt]] = Field(min_length=1)
    decoder: Literal["viterbi", "greedy"] | None = None
    epsilon: float | None = Field(default=None, ge=0.0)

    @field_validator("labels")
    @classmethod
    def _unique_labels(cls, labels: list[str]) -> list[str]:
        if len(set(labels)) != len(labels):
            raise ValueError("labels must be unique")
        return labels

    @model_validator(mode="after")
    def _matching_shapes(self) -> DecodeRequest:
        size = len(self.labels)
        if len(self.transition_costs) != size or any(
            len(row) != size for row in self.transition_costs
        ):
            raise ValueError(f"transition_costs must be a {size}x{size} matrix")
        if len(self.total_frequencies) != size:
            raise ValueError(f"total_frequencies must have {size} entries")
        return self


class DecodeMetadata(BaseModel):
    """Metadata describing how a label sequence was produced.

    Non-finite costs serialize as `Infinity`/`NaN` instead of `null`.
    """

    model_config = ConfigDict(ser_json_inf_nan="constants")

    decoder: Literal["viterbi", "greedy"]
    algorithm: str
    label_count: int = Field(ge=1)
    position_count: int = Field(ge=1)
    total_cost: float
    generated_at: datetime


class DecodeResponse(BaseModel):
    """Canonical decode output schema."""

    model_config = ConfigDict(ser_json_inf_nan="constants")

    metadata: DecodeMetadata
    labels: list[str]
