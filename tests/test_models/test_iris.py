"""Tests for the Iris model and pattern records."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from irisreveal.models.iris import Iris, pattern_from_records, pattern_to_records


def test_field_names_and_aliases():
    by_name = Iris(center_x=0.2, center_y=0.3, weight=0.9, delay=0.15)
    by_alias = Iris(cx=0.2, cy=0.3, weight=0.9, delay=0.15)
    assert by_name == by_alias


def test_defaults():
    iris = Iris(center_x=0.5, center_y=0.5)
    assert iris.weight == 1.0
    assert iris.delay == 0.0


def test_is_immutable():
    iris = Iris(center_x=0.5, center_y=0.5)
    with pytest.raises(ValidationError):
        iris.center_x = 0.1


def test_is_hashable():
    iris = Iris(center_x=0.5, center_y=0.5)
    assert len({iris, Iris(center_x=0.5, center_y=0.5)}) == 1


def test_rejects_malformed_records():
    with pytest.raises(ValidationError):
        Iris.model_validate({"cx": "left", "cy": 0.5})
    with pytest.raises(ValidationError):
        Iris.model_validate({"cy": 0.5})


def test_records_use_renderer_keys():
    records = pattern_to_records([Iris(center_x=0.25, center_y=0.75, weight=1.1, delay=0.3)])
    assert records == [{"cx": 0.25, "cy": 0.75, "weight": 1.1, "delay": 0.3}]


def test_records_round_trip():
    pattern = [
        Iris(center_x=0.3, center_y=0.3, weight=0.8, delay=0.02),
        Iris(center_x=0.7, center_y=0.6, weight=1.2, delay=0.2),
    ]
    assert pattern_from_records(pattern_to_records(pattern)) == pattern


def test_from_records_accepts_stored_pattern():
    stored = [{"cx": 0.4, "cy": 0.5, "weight": 1, "delay": 0}]
    (iris,) = pattern_from_records(stored)
    assert iris.center_x == 0.4
    assert iris.weight == 1.0
