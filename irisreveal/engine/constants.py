"""Shared constants for the reveal engine.

Callers own the corner radius; the engine never falls back to a default on
its own.
"""

from irisreveal.engine.config import DEFAULT_CONFIG

# 16px (1rem) container radius on a 240px container: 16 / 240 ≈ 0.0667.
DEFAULT_CORNER_RADIUS = 0.0667

# A scale of 2.0 gives every iris a radius of at least 1.6, more than the
# unit square's half-diagonal (≈0.707) from any center inside it.
FULL_COVERAGE_SCALE = DEFAULT_CONFIG.full_scale

# Renderer-facing fallback when a pattern cannot be spread out.
FALLBACK_CENTER = (0.5, 0.5)
FALLBACK_WEIGHT = 1.0
