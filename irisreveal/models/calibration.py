"""Calibration result model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class CalibrationResult(BaseModel):
    """Outcome of a scale search.

    ``iterations`` is 0 when an input short-circuited the search.
    ``converged`` is True when the achieved coverage is within tolerance of the
    target clamped to [0, 1], short-circuited results included.
    """

    model_config = ConfigDict(frozen=True)

    scale: float
    target: float
    coverage: float
    iterations: int = 0
    converged: bool = False
