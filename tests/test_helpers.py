import math

import pytest

from fireflow.helpers import (
    elevation_to_pressure,
    format_number,
    headloss,
    pressure_to_elevation,
    unit_friction_slope,
)


def test_unit_friction_slope_small_positive():
    slope = unit_friction_slope(12, 130)
    assert 0 < slope < 1e-6


def test_unit_friction_slope_decreases_with_diameter_and_c():
    assert unit_friction_slope(8) > unit_friction_slope(12)
    assert unit_friction_slope(12, 100) > unit_friction_slope(12, 140)


def test_headloss_identity():
    assert headloss(1000, 12, 1500, 130) == 1000 * unit_friction_slope(12, 130) * 1500**1.85


def test_elevation_conversion():
    assert elevation_to_pressure(10.0) == pytest.approx(4.33)
    assert pressure_to_elevation(elevation_to_pressure(37.0)) == pytest.approx(37.0)


@pytest.mark.parametrize(("value", "decimals", "expected"), [
    (1234.4, 0, "1,234"),
    (45.678, 1, "45.7"),
    (0, 0, "0"),
    (2500000.0, 0, "2,500,000"),
])
def test_format_number(value, decimals, expected):
    assert format_number(value, decimals) == expected


@pytest.mark.parametrize("value", [None, math.nan, math.inf, -math.inf, "abc"])
def test_format_number_not_available(value):
    assert format_number(value) == "N/A"
