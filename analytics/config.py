"""Environment-driven defaults for the analytics engine."""

from __future__ import annotations

import logging
import os

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, ValidationError

from .exceptions import ConfigurationError
from .units import DistanceUnit

logger = logging.getLogger(__name__)

DEFAULT_DISTANCE_UNIT = DistanceUnit.METERS
DEFAULT_LENGTH_DEVIATION = 20.0
DEFAULT_TREND_TOLERANCE = 0.2


class AnalyticsSettings(BaseModel):
    """User-facing defaults: display unit, length deviation, trend tolerance."""

    distance_unit: DistanceUnit = DEFAULT_DISTANCE_UNIT
    length_deviation: float = Field(DEFAULT_LENGTH_DEVIATION, ge=0)  # in distance_unit
    trend_tolerance: float = Field(DEFAULT_TREND_TOLERANCE, ge=0)


def get_settings() -> AnalyticsSettings:
    """
    Build settings from the environment.

    Reads GOLF_DISTANCE_UNIT, GOLF_LENGTH_DEVIATION and GOLF_TREND_TOLERANCE
    (a .env file in the working directory is honoured; real environment
    variables win). Unset variables fall back to defaults.
    """
    load_dotenv(find_dotenv(usecwd=True))
    raw = {
        "distance_unit": os.getenv("GOLF_DISTANCE_UNIT"),
        "length_deviation": os.getenv("GOLF_LENGTH_DEVIATION"),
        "trend_tolerance": os.getenv("GOLF_TREND_TOLERANCE"),
    }
    values = {key: value.strip() for key, value in raw.items() if value}

    try:
        settings = AnalyticsSettings(**values)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid analytics settings: {e.errors()[0]['msg']}") from e

    logger.debug("Loaded analytics settings: %s", settings)
    return settings
