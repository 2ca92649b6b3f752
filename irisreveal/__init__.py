"""Iris-reveal coverage calibration engine.

Estimates how much of a rounded rectangle a set of circular reveal zones
covers, finds the scale that reveals a target fraction, and generates
spaced-out iris patterns.
"""

from irisreveal.engine.calibrator import analytic_scale, calibrate, calibrate_scale, reveal_scale
from irisreveal.engine.constants import DEFAULT_CORNER_RADIUS, FULL_COVERAGE_SCALE
from irisreveal.engine.coverage import coverage, exact_coverage, is_effectively_full
from irisreveal.engine.pattern import generate_pattern, is_fallback
from irisreveal.models.calibration import CalibrationResult
from irisreveal.models.iris import Iris, pattern_from_records, pattern_to_records
from irisreveal.utils.geometry import point_covered_by_irises, point_in_rounded_rect

__all__ = [
    "DEFAULT_CORNER_RADIUS",
    "FULL_COVERAGE_SCALE",
    "CalibrationResult",
    "Iris",
    "analytic_scale",
    "calibrate",
    "calibrate_scale",
    "coverage",
    "exact_coverage",
    "generate_pattern",
    "is_effectively_full",
    "is_fallback",
    "pattern_from_records",
    "pattern_to_records",
    "point_covered_by_irises",
    "point_in_rounded_rect",
    "reveal_scale",
]
