"""
Assembly of the hourly and daily humidity tables.

Turns selected samples into labelled rows of projected humidity. Rendering is
left to ``airing.render``.
"""

import logging
from collections.abc import Iterable, Sequence
from datetime import datetime

from .models import HumidityTable, ProjectedRow, Sample
from .psychrometrics import project
from .series import DAY, HOUR, aggregate_by_day, window
from .settings import AppSettings

logger = logging.getLogger(__name__)

HOURLY_LABEL_FORMAT = "%a %H:%M"
DAILY_LABEL_FORMAT = "%A, %b %d"


def assemble_table(
    title: str,
    samples: Iterable[Sample],
    reference_temperatures: Sequence[float],
    label_format: str,
) -> HumidityTable:
    """Project every sample onto the reference temperatures.

    Args:
        title: Table name shown in the header corner
        samples: Samples to display, one row each
        reference_temperatures: Indoor temperatures (°C), one column each
        label_format: strftime format for the row label

    Returns:
        Table with one row per sample
    """
    references = tuple(reference_temperatures)
    rows = tuple(
        ProjectedRow(
            label=sample.timestamp.strftime(label_format),
            observed_temperature=sample.temperature_celsius,
            projected_humidity=tuple(
                project(sample.temperature_celsius, sample.relative_humidity_percent, references)
            ),
        )
        for sample in samples
    )
    return HumidityTable(title=title, reference_temperatures=references, rows=rows)


def hourly_table(samples: Sequence[Sample], now: datetime, settings: AppSettings) -> HumidityTable:
    """Next ``settings.hourly_rows`` hours, starting with the current hour."""
    selected = window(samples, HOUR, step=1, count=settings.hourly_rows, reference_now=now)
    logger.debug(f"Hourly table: {len(selected)} of {len(samples)} samples selected")
    return assemble_table("Hourly", selected, settings.reference_temperatures, HOURLY_LABEL_FORMAT)


def daily_table(samples: Sequence[Sample], now: datetime, settings: AppSettings) -> HumidityTable:
    """Daily averages for the next ``settings.daily_rows`` days, today included."""
    days = [average.to_sample() for average in aggregate_by_day(samples)]
    selected = window(days, DAY, step=1, count=settings.daily_rows, reference_now=now)
    logger.debug(f"Daily table: {len(selected)} of {len(days)} days selected")
    return assemble_table("Daily", selected, settings.reference_temperatures, DAILY_LABEL_FORMAT)
