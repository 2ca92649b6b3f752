"""Iris reveal-zone model and pattern record conversion."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Iris(BaseModel):
    """A circular reveal zone in normalized unit-square coordinates.

    ``delay`` belongs to the renderer; geometry never reads it.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    center_x: float = Field(alias="cx")
    center_y: float = Field(alias="cy")
    weight: float = 1.0  # radius multiplier, nominally 0.8-1.2
    delay: float = 0.0


def pattern_to_records(pattern: Sequence[Iris]) -> list[dict[str, float]]:
    """Serialize a pattern to the renderer's ``{cx, cy, weight, delay}`` dicts."""
    return [iris.model_dump(by_alias=True) for iris in pattern]


def pattern_from_records(records: Iterable[dict[str, Any]]) -> list[Iris]:
    """Build irises from ``{cx, cy, weight, delay}`` (or field-named) dicts."""
    return [Iris.model_validate(record) for record in records]
