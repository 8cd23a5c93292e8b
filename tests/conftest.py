"""Shared fixtures for Airing tests."""

from datetime import datetime, timedelta

import pytest

from airing.models import Sample


@pytest.fixture
def hourly_series():
    """Factory building consecutive hourly samples.

    ``temperature`` and ``humidity`` may be constants or callables of the index.
    """
    def value(v, i):
        return v(i) if callable(v) else v

    def build(start: datetime, hours: int, temperature=20.0, humidity=50.0) -> list[Sample]:
        return [
            Sample(
                timestamp=start + timedelta(hours=i),
                temperature_celsius=value(temperature, i),
                relative_humidity_percent=value(humidity, i),
            )
            for i in range(hours)
        ]

    return build


@pytest.fixture
def week_of_samples(hourly_series):
    """Seven days of hourly samples starting at midnight 2024-03-04."""
    return hourly_series(
        datetime(2024, 3, 4),
        7 * 24,
        temperature=lambda i: 5.0 + (i % 24) / 2,
        humidity=lambda i: 60.0 + (i % 24),
    )


@pytest.fixture
def open_meteo_body():
    """Minimal Open-Meteo forecast response."""
    return {
        "latitude": 52.52,
        "longitude": 13.419998,
        "timezone": "Europe/Berlin",
        "utc_offset_seconds": 3600,
        "hourly": {
            "time": ["2024-03-04T00:00", "2024-03-04T01:00", "2024-03-04T02:00"],
            "temperature_2m": [4.2, 3.9, 3.5],
            "relative_humidity_2m": [81, 84, 88],
        },
    }
