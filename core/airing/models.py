"""
Airing Data Models

Immutable value types passed between the forecast adapter, the core
computations and the table renderer.
"""

from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone


@dataclass(frozen=True)
class Sample:
    """One hourly forecast value in local civil time."""

    timestamp: datetime
    temperature_celsius: float
    relative_humidity_percent: float  # 0-100


@dataclass(frozen=True)
class DailyAverage:
    """Mean temperature and humidity over the samples of one calendar date."""

    calendar_date: date
    mean_temperature: float
    mean_humidity: float
    sample_count: int  # always >= 1

    def to_sample(self) -> Sample:
        """Represent the day as a sample stamped at its midnight."""
        return Sample(
            timestamp=datetime.combine(self.calendar_date, datetime.min.time()),
            temperature_celsius=self.mean_temperature,
            relative_humidity_percent=self.mean_humidity,
        )


@dataclass(frozen=True)
class ProjectedRow:
    """A displayed sample with its projected humidity per reference temperature."""

    label: str
    observed_temperature: float
    projected_humidity: tuple[float, ...]


@dataclass(frozen=True)
class HumidityTable:
    """Header temperatures and rows of one rendered table."""

    title: str
    reference_temperatures: tuple[float, ...]
    rows: tuple[ProjectedRow, ...]


@dataclass(frozen=True)
class Forecast:
    """Hourly forecast for a single location as returned by the weather service."""

    latitude: float
    longitude: float
    timezone: str
    utc_offset_seconds: int
    samples: tuple[Sample, ...]

    def local_now(self) -> datetime:
        """Current instant in the forecast's civil time frame (naive)."""
        now = datetime.now(timezone.utc) + timedelta(seconds=self.utc_offset_seconds)
        return now.replace(tzinfo=None)
