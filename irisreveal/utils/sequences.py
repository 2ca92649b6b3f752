"""Low-discrepancy sequences for deterministic area sampling. No engine imports."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def halton(index: int, base: int) -> float:
    """Radical inverse of ``index + 1`` in ``base``.

    The offset keeps index 0 away from the origin: halton(0, 2) == 0.5.
    """
    result = 0.0
    f = 1.0
    i = index + 1
    while i > 0:
        f = f / base
        result = result + f * (i % base)
        i = i // base
    return result


def halton_sequence(count: int, base: int) -> NDArray[np.float64]:
    """First ``count`` terms of the Halton sequence in ``base``.

    Digit-by-digit over the whole index array; each element sees the same float
    operations as ``halton`` so the two agree bit-for-bit.
    """
    result = np.zeros(max(count, 0), dtype=np.float64)
    if count <= 0:
        return result
    i = np.arange(1, count + 1, dtype=np.int64)
    f = np.ones(count, dtype=np.float64)
    while np.any(i > 0):
        active = i > 0
        f = np.where(active, f / base, f)
        result = np.where(active, result + f * (i % base), result)
        i = i // base
    return result


def halton_points(count: int) -> NDArray[np.float64]:
    """(count, 2) array of 2-D Halton points, bases 2 and 3."""
    return np.column_stack((halton_sequence(count, 2), halton_sequence(count, 3)))
