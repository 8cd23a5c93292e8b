"""
Airing Custom Exceptions

Simple exception hierarchy for error handling.
"""


class AiringError(Exception):
    """Base exception for Airing."""

    pass


class ConfigurationError(AiringError):
    """Configuration is invalid."""

    pass


class ForecastFetchError(AiringError):
    """Cannot retrieve the forecast from the weather service."""

    pass


class ForecastDataError(AiringError):
    """Forecast response is missing fields or holds invalid values."""

    pass


class NumericContractError(AiringError, ArithmeticError):
    """A psychrometric computation produced a non-finite result."""

    pass
