"""
Simple Open-Meteo API Client for Airing

Minimal client for reading the hourly temperature/humidity forecast of one location.
"""

import logging
from datetime import datetime
from typing import Any

import requests

from .exceptions import ForecastDataError, ForecastFetchError
from .models import Forecast, Sample
from .settings import OPEN_METEO_URL

logger = logging.getLogger(__name__)

TEMPERATURE_FIELD = "temperature_2m"
HUMIDITY_FIELD = "relative_humidity_2m"


class ForecastClient:
    """Simple Open-Meteo forecast REST API client."""

    def __init__(self, base_url: str = OPEN_METEO_URL, timeout: float = 10.0):
        """Initialize forecast client.

        Args:
            base_url: Forecast endpoint URL
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        # Create a session for connection pooling
        self.session = requests.Session()
        self.session.headers.update({"Accept": "application/json"})
        self.timeout = timeout

    def get_raw_forecast(
        self,
        latitude: float,
        longitude: float,
        elevation: float | None = None,
        forecast_days: int = 7,
    ) -> dict[str, Any]:
        """Fetch the hourly forecast response body.

        Args:
            latitude: Location latitude (degrees)
            longitude: Location longitude (degrees)
            elevation: Location elevation (m); service uses terrain data when None
            forecast_days: Number of days to forecast

        Returns:
            Decoded JSON response

        Raises:
            ForecastFetchError: If the request fails or returns an error status
        """
        params = {
            "latitude": latitude,
            "longitude": longitude,
            "hourly": f"{TEMPERATURE_FIELD},{HUMIDITY_FIELD}",
            "temperature_unit": "celsius",
            "timezone": "auto",
            "forecast_days": forecast_days,
        }
        if elevation is not None:
            params["elevation"] = elevation

        logger.debug(f"Requesting forecast from {self.base_url} with {params}")
        try:
            response = self.session.get(self.base_url, params=params, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except requests.exceptions.HTTPError as e:
            reason = _error_reason(e.response)
            raise ForecastFetchError(f"Forecast request rejected: {reason}") from e
        except requests.exceptions.RequestException as e:
            raise ForecastFetchError(f"Forecast request failed: {e}") from e
        except ValueError as e:
            raise ForecastFetchError(f"Forecast response is not JSON: {e}") from e

    def get_forecast(
        self,
        latitude: float,
        longitude: float,
        elevation: float | None = None,
        forecast_days: int = 7,
    ) -> Forecast:
        """Fetch and parse the hourly forecast.

        Raises:
            ForecastFetchError: If the request fails
            ForecastDataError: If the response cannot be parsed
        """
        body = self.get_raw_forecast(latitude, longitude, elevation, forecast_days)
        forecast = parse_forecast(body)
        logger.info(
            f"Fetched {len(forecast.samples)} hourly samples for "
            f"({forecast.latitude}, {forecast.longitude}) in {forecast.timezone}"
        )
        return forecast


def _error_reason(response) -> str:
    """Extract the service's error message, falling back to the status code."""
    if response is None:
        return "no response"
    try:
        return response.json().get("reason", str(response.status_code))
    except ValueError:
        return str(response.status_code)


def parse_forecast(body: dict[str, Any]) -> Forecast:
    """Convert an Open-Meteo response body into a Forecast.

    Raises:
        ForecastDataError: If required fields are missing or invalid
    """
    try:
        hourly = body["hourly"]
        times = hourly["time"]
        temperatures = hourly[TEMPERATURE_FIELD]
        humidities = hourly[HUMIDITY_FIELD]
    except (KeyError, TypeError) as e:
        raise ForecastDataError(f"Forecast response missing field: {e}") from e

    if not len(times) == len(temperatures) == len(humidities):
        raise ForecastDataError(
            f"Hourly series differ in length: {len(times)} times, "
            f"{len(temperatures)} temperatures, {len(humidities)} humidities"
        )

    samples = []
    for time_str, temperature, humidity in zip(times, temperatures, humidities):
        try:
            samples.append(
                Sample(
                    timestamp=datetime.fromisoformat(time_str),
                    temperature_celsius=float(temperature),
                    relative_humidity_percent=float(humidity),
                )
            )
        except (ValueError, TypeError) as e:
            raise ForecastDataError(f"Invalid forecast entry at {time_str}: {e}") from e

    try:
        return Forecast(
            latitude=float(body["latitude"]),
            longitude=float(body["longitude"]),
            timezone=body.get("timezone", "GMT"),
            utc_offset_seconds=int(body.get("utc_offset_seconds", 0)),
            samples=tuple(samples),
        )
    except (KeyError, ValueError, TypeError) as e:
        raise ForecastDataError(f"Invalid forecast location data: {e}") from e
