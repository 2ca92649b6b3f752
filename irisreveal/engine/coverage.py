"""Coverage estimation — fraction of the rounded rectangle revealed by the iris union.

The estimator samples a fixed Halton point set, so identical inputs always give
identical results. ``exact_coverage`` computes the same quantity from shapely
polygons and serves as a reference for the sampled estimate.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from shapely.geometry import Point, box
from shapely.geometry.base import BaseGeometry
from shapely.ops import unary_union

from irisreveal.engine.config import DEFAULT_CONFIG, EngineConfig
from irisreveal.models.iris import Iris
from irisreveal.utils.geometry import clamp_corner_radius, iris_union_mask, rounded_rect_mask
from irisreveal.utils.sequences import halton_points

logger = logging.getLogger(__name__)

# Segments per quarter circle when buffering disks for the exact reference.
_QUAD_SEGS = 64


def coverage(
    irises: Sequence[Iris],
    scale: float,
    corner_radius: float,
    config: EngineConfig = DEFAULT_CONFIG,
) -> float:
    """Estimate the fraction of the rounded rectangle covered by the iris union.

    Only samples inside the rounded rectangle count, in both the numerator
    and the denominator.

    Args:
        irises: Iris pattern.
        scale: Scale factor K applied to every iris weight.
        corner_radius: Corner radius as fraction (0-0.5).
        config: Engine tunables (sample count).

    Returns:
        Covered fraction in [0, 1]; 0 for an empty pattern or non-positive scale.
    """
    if not irises or not scale > 0:
        return 0.0

    points = halton_points(config.sample_count)
    xs = points[:, 0]
    ys = points[:, 1]

    valid = rounded_rect_mask(xs, ys, corner_radius)
    valid_points = int(valid.sum())
    if valid_points == 0:
        return 0.0

    covered = valid & iris_union_mask(xs, ys, irises, scale)
    covered_points = int(covered.sum())
    return covered_points / valid_points


def is_effectively_full(value: float, config: EngineConfig = DEFAULT_CONFIG) -> bool:
    """Sampled coverage rarely hits exactly 1.0; treat ≥0.95 as a full reveal."""
    return value >= config.effectively_full


def rounded_rect_polygon(corner_radius: float) -> BaseGeometry:
    """Shapely polygon of the rounded unit square."""
    r = clamp_corner_radius(corner_radius)
    if r == 0:
        return box(0.0, 0.0, 1.0, 1.0)

    parts = []
    if r < 0.5:
        parts.append(box(r, 0.0, 1 - r, 1.0))
        parts.append(box(0.0, r, 1.0, 1 - r))
    for cx in (r, 1 - r):
        for cy in (r, 1 - r):
            parts.append(Point(cx, cy).buffer(r, quad_segs=_QUAD_SEGS))
    return unary_union(parts)


def exact_coverage(
    irises: Sequence[Iris],
    scale: float,
    corner_radius: float,
) -> float:
    """Covered fraction from polygon areas instead of samples.

    Disks and corners are polygonized, so the result is exact up to the
    buffer resolution. Slower than ``coverage``; meant for validation.
    """
    if not irises or not scale > 0:
        return 0.0

    region = rounded_rect_polygon(corner_radius)
    if region.area <= 0:
        return 0.0

    disks = [
        Point(iris.center_x, iris.center_y).buffer(abs(scale * iris.weight), quad_segs=_QUAD_SEGS)
        for iris in irises
        if iris.weight != 0
    ]
    if not disks:
        return 0.0

    revealed = unary_union(disks).intersection(region)
    fraction = float(revealed.area / region.area)
    logger.debug(
        "Exact coverage: %d irises, scale=%.4f, r=%.4f -> %.4f",
        len(irises),
        scale,
        corner_radius,
        fraction,
    )
    return min(max(fraction, 0.0), 1.0)
