class AnalyticsError(Exception):
    """Base for all analytics errors."""


class UnsupportedUnitError(AnalyticsError, ValueError):
    """Distance unit is not one of the supported units."""


class UnknownConditionError(AnalyticsError, KeyError):
    """Condition name does not match a hole attribute."""


class ConfigurationError(AnalyticsError):
    """Environment configuration could not be parsed."""
