"""Iris pattern generation — rejection sampling with minimum center spacing.

Unlike the coverage estimator this is deliberately random, for visual variety
between sessions. Pass a seeded ``numpy.random.Generator`` for reproducible
patterns.
"""

from __future__ import annotations

import logging
import math

import numpy as np

from irisreveal.engine.config import DEFAULT_CONFIG, EngineConfig
from irisreveal.engine.constants import FALLBACK_CENTER, FALLBACK_WEIGHT
from irisreveal.models.iris import Iris
from irisreveal.utils.geometry import clamp_corner_radius, point_in_rounded_rect

logger = logging.getLogger(__name__)


def fallback_iris(index: int, config: EngineConfig = DEFAULT_CONFIG) -> Iris:
    """Centered iris used to fill slots the sampler could not place."""
    return Iris(
        center_x=FALLBACK_CENTER[0],
        center_y=FALLBACK_CENTER[1],
        weight=FALLBACK_WEIGHT,
        delay=index * config.delay_step,
    )


def is_fallback(iris: Iris) -> bool:
    return (iris.center_x, iris.center_y) == FALLBACK_CENTER and iris.weight == FALLBACK_WEIGHT


def _too_close(cx: float, cy: float, placed: list[Iris], min_spacing: float) -> bool:
    return any(
        math.hypot(iris.center_x - cx, iris.center_y - cy) < min_spacing for iris in placed
    )


def generate_pattern(
    n: int,
    corner_radius: float,
    rng: np.random.Generator | None = None,
    config: EngineConfig = DEFAULT_CONFIG,
) -> list[Iris]:
    """Place ``n`` irises inside the rounded rectangle, spaced apart.

    Args:
        n: Number of irises. Always exactly this many are returned.
        corner_radius: Corner radius as fraction (0-0.5).
        rng: Random source; a fresh unseeded generator when omitted.
        config: Engine tunables (spacing, attempt budget, weight/delay ranges).

    Returns:
        Ordered iris list; slots left after the attempt budget hold the
        centered fallback iris.
    """
    if rng is None:
        rng = np.random.default_rng()

    irises: list[Iris] = []
    margin = clamp_corner_radius(corner_radius) + config.margin_padding
    span = 1 - 2 * margin
    attempts = 0

    while len(irises) < n and attempts < config.max_attempts:
        attempts += 1
        cx = margin + float(rng.random()) * span
        cy = margin + float(rng.random()) * span

        if not point_in_rounded_rect(cx, cy, corner_radius):
            continue
        if _too_close(cx, cy, irises, config.min_spacing):
            continue

        weight = config.weight_min + float(rng.random()) * (config.weight_max - config.weight_min)
        jitter = float(rng.random()) * config.delay_jitter
        irises.append(
            Iris(
                center_x=cx,
                center_y=cy,
                weight=weight,
                delay=len(irises) * config.delay_step + jitter,
            )
        )

    placed = len(irises)
    if placed < n:
        logger.debug(
            "Placed %d/%d irises in %d attempts, filling the rest with the fallback",
            placed,
            n,
            attempts,
        )
    while len(irises) < n:
        irises.append(fallback_iris(len(irises), config))

    return irises
