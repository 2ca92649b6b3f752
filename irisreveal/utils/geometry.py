"""Leaf-node geometry predicates. No engine imports.

All coordinates live in the normalized unit square [0, 1] x [0, 1].
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

if TYPE_CHECKING:
    from irisreveal.models.iris import Iris

# Largest corner radius: half the square's extent, which turns the region into a disk.
MAX_CORNER_RADIUS = 0.5


def clamp_corner_radius(corner_radius: float) -> float:
    """Clamp to [0, 0.5]. Non-finite radii collapse to a sharp-cornered square."""
    if not math.isfinite(corner_radius):
        return 0.0
    return min(max(corner_radius, 0.0), MAX_CORNER_RADIUS)


def point_in_rounded_rect(x: float, y: float, corner_radius: float) -> bool:
    """Check whether (x, y) falls within the rounded unit square.

    Args:
        x: X coordinate (0-1).
        y: Y coordinate (0-1).
        corner_radius: Corner radius as a fraction of the side (clamped to 0-0.5).

    Returns:
        True if the point is inside the rounded rectangle.
    """
    r = clamp_corner_radius(corner_radius)

    if x < 0 or x > 1 or y < 0 or y > 1:
        return False

    # Central cross
    if r <= x <= 1 - r or r <= y <= 1 - r:
        return True

    # Corner square: compare against the arc center of the nearest corner
    cx = r if x < r else 1 - r
    cy = r if y < r else 1 - r
    dx = x - cx
    dy = y - cy
    return dx * dx + dy * dy <= r * r


def point_covered_by_irises(
    x: float,
    y: float,
    irises: Sequence[Iris],
    scale: float,
) -> bool:
    """True if (x, y) lies within at least one iris disk of radius scale * weight."""
    if not irises or not scale > 0:
        return False
    for iris in irises:
        r = scale * iris.weight
        dx = x - iris.center_x
        dy = y - iris.center_y
        if dx * dx + dy * dy <= r * r:
            return True
    return False


def rounded_rect_mask(
    xs: NDArray[np.float64],
    ys: NDArray[np.float64],
    corner_radius: float,
) -> NDArray[np.bool_]:
    """Vectorized ``point_in_rounded_rect`` over parallel coordinate arrays."""
    r = clamp_corner_radius(corner_radius)

    in_box = (xs >= 0) & (xs <= 1) & (ys >= 0) & (ys <= 1)
    in_cross = ((xs >= r) & (xs <= 1 - r)) | ((ys >= r) & (ys <= 1 - r))

    cx = np.where(xs < r, r, 1 - r)
    cy = np.where(ys < r, r, 1 - r)
    dx = xs - cx
    dy = ys - cy
    in_arc = dx * dx + dy * dy <= r * r

    return in_box & (in_cross | in_arc)


def iris_union_mask(
    xs: NDArray[np.float64],
    ys: NDArray[np.float64],
    irises: Sequence[Iris],
    scale: float,
) -> NDArray[np.bool_]:
    """Vectorized ``point_covered_by_irises`` over parallel coordinate arrays."""
    covered = np.zeros(xs.shape, dtype=bool)
    if not irises or not scale > 0:
        return covered
    for iris in irises:
        r = scale * iris.weight
        dx = xs - iris.center_x
        dy = ys - iris.center_y
        covered |= dx * dx + dy * dy <= r * r
    return covered
