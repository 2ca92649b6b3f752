"""Shared test fixtures."""

from __future__ import annotations

import numpy as np
import pytest

from irisreveal.models.iris import Iris


def make_iris(cx: float, cy: float, weight: float = 1.0, delay: float = 0.0) -> Iris:
    return Iris(center_x=cx, center_y=cy, weight=weight, delay=delay)


@pytest.fixture
def center_iris() -> list[Iris]:
    return [make_iris(0.5, 0.5)]


@pytest.fixture
def diagonal_irises() -> list[Iris]:
    """Two small irises on the main diagonal."""
    return [make_iris(0.2, 0.2), make_iris(0.8, 0.8)]


@pytest.fixture
def triad_irises() -> list[Iris]:
    """Three overlapping irises with mixed weights."""
    return [
        make_iris(0.3, 0.3, weight=1.0),
        make_iris(0.7, 0.7, weight=0.9),
        make_iris(0.5, 0.5, weight=1.1),
    ]


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(1234)
