"""Distance unit conversion between yards (stored) and meters."""

from __future__ import annotations

import math
import numbers
from decimal import Decimal
from enum import Enum
from typing import Any, Union

from .exceptions import UnsupportedUnitError

YARDS_TO_METERS = 0.9144


class DistanceUnit(str, Enum):
    YARDS = "yards"
    METERS = "meters"


BASE_UNIT = DistanceUnit.YARDS


def parse_unit(unit: Union[str, DistanceUnit]) -> DistanceUnit:
    try:
        return DistanceUnit(unit)
    except ValueError as exc:
        raise UnsupportedUnitError(f"Unsupported distance unit: {unit!r}") from exc


def _is_finite_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (numbers.Real, Decimal)):
        return False
    return math.isfinite(value)


def convert(
    distance: Any,
    from_unit: Union[str, DistanceUnit],
    to_unit: Union[str, DistanceUnit],
) -> float:
    """
    Convert a distance between yards and meters.

    Non-numeric, NaN or infinite input yields 0. Conversion is not rounded,
    so converting there and back returns the original value.
    """
    source = parse_unit(from_unit)
    target = parse_unit(to_unit)

    if not _is_finite_number(distance):
        return 0
    if source == target:
        return distance
    if source == DistanceUnit.YARDS:
        return float(distance) * YARDS_TO_METERS
    return float(distance) / YARDS_TO_METERS


def to_base_unit(distance: Any, unit: Union[str, DistanceUnit]) -> float:
    """Convert a display-unit distance into the stored (yards) unit."""
    return convert(distance, unit, BASE_UNIT)


def from_base_unit(distance: Any, unit: Union[str, DistanceUnit]) -> float:
    """Convert a stored (yards) distance into a display unit."""
    return convert(distance, BASE_UNIT, unit)
