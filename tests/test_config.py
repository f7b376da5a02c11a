import pytest

from analytics.config import (
    DEFAULT_LENGTH_DEVIATION,
    DEFAULT_TREND_TOLERANCE,
    get_settings,
)
from analytics.exceptions import ConfigurationError
from analytics.units import DistanceUnit

ENV_VARS = ("GOLF_DISTANCE_UNIT", "GOLF_LENGTH_DEVIATION", "GOLF_TREND_TOLERANCE")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = get_settings()
    assert settings.distance_unit == DistanceUnit.METERS
    assert settings.length_deviation == DEFAULT_LENGTH_DEVIATION
    assert settings.trend_tolerance == DEFAULT_TREND_TOLERANCE


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("GOLF_DISTANCE_UNIT", "yards")
    monkeypatch.setenv("GOLF_LENGTH_DEVIATION", " 15 ")
    monkeypatch.setenv("GOLF_TREND_TOLERANCE", "0.5")

    settings = get_settings()
    assert settings.distance_unit == DistanceUnit.YARDS
    assert settings.length_deviation == 15
    assert settings.trend_tolerance == 0.5


def test_blank_values_fall_back_to_defaults(monkeypatch):
    monkeypatch.setenv("GOLF_DISTANCE_UNIT", "")
    assert get_settings().distance_unit == DistanceUnit.METERS


@pytest.mark.parametrize(
    "name, value",
    [
        ("GOLF_DISTANCE_UNIT", "feet"),
        ("GOLF_LENGTH_DEVIATION", "wide"),
        ("GOLF_LENGTH_DEVIATION", "-5"),
    ],
)
def test_invalid_settings(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ConfigurationError):
        get_settings()


def test_dotenv_read_when_settings_requested(monkeypatch, tmp_path):
    # Restore the variable to "unset" once the test is done
    monkeypatch.setenv("GOLF_LENGTH_DEVIATION", "0")
    monkeypatch.delenv("GOLF_LENGTH_DEVIATION")

    (tmp_path / ".env").write_text("GOLF_LENGTH_DEVIATION=35\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    assert get_settings().length_deviation == 35
