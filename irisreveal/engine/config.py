"""Engine configuration — sampling, search and placement tunables."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EngineConfig:
    """Controls coverage sampling, scale calibration and pattern placement."""

    # Coverage estimation
    sample_count: int = 2000  # Halton points per estimate
    effectively_full: float = 0.95  # coverage treated as a complete reveal

    # Scale calibration (bisection over [0, full_scale])
    full_scale: float = 2.0
    tolerance: float = 0.005  # 0.5% coverage
    max_iterations: int = 20

    # Pattern placement
    min_spacing: float = 0.3  # between iris centers
    max_attempts: int = 100  # across the whole pattern, not per iris
    margin_padding: float = 0.1  # added to corner radius to get the margin
    weight_min: float = 0.8
    weight_max: float = 1.2
    delay_step: float = 0.15  # seconds between staggered reveals
    delay_jitter: float = 0.1


DEFAULT_CONFIG = EngineConfig()
