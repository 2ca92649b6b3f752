"""Scale calibration — find the uniform iris scale that reveals a target fraction.

Coverage has no closed form once disks overlap each other and clip against
the rounded corners, so the scale is found by bisection over the sampled
estimator. The search never fails: it returns its best midpoint when the
iteration budget runs out.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from irisreveal.engine.config import DEFAULT_CONFIG, EngineConfig
from irisreveal.engine.coverage import coverage
from irisreveal.models.calibration import CalibrationResult
from irisreveal.models.iris import Iris

logger = logging.getLogger(__name__)


def _short_circuit(
    irises: Sequence[Iris],
    target_coverage: float,
    corner_radius: float,
    config: EngineConfig,
) -> CalibrationResult:
    """Result for inputs answered without searching: empty pattern, target ≤ 0 or ≥ 1."""
    if irises and target_coverage >= 1:
        scale = config.full_scale
        achieved = coverage(irises, scale, corner_radius, config)
    else:
        scale = 0.0
        achieved = 0.0
    # Targets outside [0, 1] are judged against the nearest reachable coverage.
    reachable = min(max(target_coverage, 0.0), 1.0)
    return CalibrationResult(
        scale=scale,
        target=target_coverage,
        coverage=achieved,
        converged=abs(achieved - reachable) < config.tolerance,
    )


def calibrate(
    irises: Sequence[Iris],
    target_coverage: float,
    corner_radius: float,
    config: EngineConfig = DEFAULT_CONFIG,
) -> CalibrationResult:
    """Bisect the scale factor K until coverage is within tolerance of the target.

    Args:
        irises: Iris pattern.
        target_coverage: Desired coverage (0-1). Out-of-range values short-circuit.
        corner_radius: Corner radius as fraction (0-0.5).
        config: Engine tunables (full scale, tolerance, iteration budget).

    Returns:
        CalibrationResult with the chosen scale and the coverage it achieves.
    """
    if not irises or target_coverage <= 0 or target_coverage >= 1:
        return _short_circuit(irises, target_coverage, corner_radius, config)

    low = 0.0
    high = config.full_scale

    for i in range(config.max_iterations):
        mid = (low + high) / 2
        achieved = coverage(irises, mid, corner_radius, config)
        logger.debug(
            "Calibration step %d: K=%.6f coverage=%.4f target=%.4f",
            i + 1,
            mid,
            achieved,
            target_coverage,
        )

        if abs(achieved - target_coverage) < config.tolerance:
            logger.info(
                "Calibrated %d irises to K=%.4f (coverage %.4f) in %d steps",
                len(irises),
                mid,
                achieved,
                i + 1,
            )
            return CalibrationResult(
                scale=mid,
                target=target_coverage,
                coverage=achieved,
                iterations=i + 1,
                converged=True,
            )

        if achieved < target_coverage:
            low = mid
        else:
            high = mid

    scale = (low + high) / 2
    achieved = coverage(irises, scale, corner_radius, config)
    logger.info(
        "Calibration budget exhausted for %d irises: K=%.4f (coverage %.4f, target %.4f)",
        len(irises),
        scale,
        achieved,
        target_coverage,
    )
    return CalibrationResult(
        scale=scale,
        target=target_coverage,
        coverage=achieved,
        iterations=config.max_iterations,
        converged=abs(achieved - target_coverage) < config.tolerance,
    )


def calibrate_scale(
    irises: Sequence[Iris],
    target_coverage: float,
    corner_radius: float,
    config: EngineConfig = DEFAULT_CONFIG,
) -> float:
    """Scale factor K whose iris union covers ``target_coverage`` of the region.

    Empty pattern or target ≤ 0 gives 0; target ≥ 1 gives the full-coverage
    sentinel 2.0 without searching.
    """
    return calibrate(irises, target_coverage, corner_radius, config).scale


def _clamp_progress(progress: float) -> float:
    if not math.isfinite(progress):
        return 0.0
    return min(max(progress, 0.0), 1.0)


def analytic_scale(
    irises: Sequence[Iris],
    progress: float,
    config: EngineConfig = DEFAULT_CONFIG,
) -> float:
    """Closed-form K ignoring overlaps and corner clipping.

    Solves π·K²·Σw² = progress for K. Underestimates the scale once disks
    overlap or reach past the edges; ``calibrate_scale`` accounts for both.
    """
    if not irises:
        return 0.0
    p = _clamp_progress(progress)
    if p >= 1:
        return config.full_scale
    sum_weights_sq = sum(iris.weight * iris.weight for iris in irises) or 1.0
    return min(math.sqrt(p / (math.pi * sum_weights_sq)), config.full_scale)


def reveal_scale(
    irises: Sequence[Iris],
    progress: float,
    corner_radius: float,
    celebrating: bool = False,
    config: EngineConfig = DEFAULT_CONFIG,
) -> float:
    """Scale the renderer should animate to for a progress fraction.

    Celebrations and completed goals force the full reveal.
    """
    if celebrating:
        return config.full_scale
    p = _clamp_progress(progress)
    if p >= 1:
        return config.full_scale
    return calibrate_scale(irises, p, corner_radius, config)
