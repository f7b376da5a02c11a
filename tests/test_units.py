import math
from decimal import Decimal
from fractions import Fraction

import pytest

from analytics.exceptions import UnsupportedUnitError
from analytics.units import DistanceUnit, convert, from_base_unit, to_base_unit


def test_convert_yards_and_meters():
    assert convert(100, "yards", "meters") == pytest.approx(91.44)
    assert convert(91.44, "meters", "yards") == pytest.approx(100)
    assert convert(100, DistanceUnit.YARDS, DistanceUnit.METERS) == pytest.approx(91.44)


def test_convert_other_real_numbers():
    assert convert(Decimal("100"), "yards", "meters") == pytest.approx(91.44)
    assert convert(Fraction(1, 2), "yards", "meters") == pytest.approx(0.4572)
    assert convert(Decimal("NaN"), "yards", "meters") == 0


def test_convert_same_unit_is_identity():
    assert convert(137.5, "yards", "yards") == 137.5
    assert convert(42, "meters", "meters") == 42


@pytest.mark.parametrize("value", ["150", None, math.nan, math.inf, -math.inf, True, [150]])
def test_convert_invalid_input_is_zero(value):
    assert convert(value, "yards", "meters") == 0


@pytest.mark.parametrize("x", [0, 1, 18.288, 150, 427.3, 1e6, -25])
def test_convert_round_trip(x):
    there = convert(x, "yards", "meters")
    back = convert(there, "meters", "yards")
    assert back == pytest.approx(x, rel=1e-9, abs=1e-12)


def test_unknown_unit():
    with pytest.raises(UnsupportedUnitError):
        convert(100, "feet", "meters")
    with pytest.raises(ValueError):
        convert(100, "yards", "furlongs")


def test_base_unit_helpers():
    assert to_base_unit(20, "yards") == 20
    assert to_base_unit(9.144, "meters") == pytest.approx(10)
    assert from_base_unit(10, "meters") == pytest.approx(9.144)
