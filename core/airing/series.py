"""
Time-series selection for the forecast tables.

All functions expect samples sorted ascending by timestamp. The order is a
precondition and is never re-checked or restored here.
"""

from collections.abc import Iterable
from datetime import datetime, timedelta
from itertools import dropwhile, groupby, islice

from .models import DailyAverage, Sample

HOUR = timedelta(hours=1)
DAY = timedelta(days=1)


def truncate(instant: datetime, bucket_size: timedelta) -> datetime:
    """Floor an instant to the start of its bucket.

    Buckets are aligned on midnight, so an hour floors to the top of the hour
    and a day floors to midnight of the same civil date.

    Args:
        instant: Naive or aware datetime
        bucket_size: Positive bucket length

    Returns:
        Start of the bucket containing ``instant``
    """
    if bucket_size <= timedelta(0):
        raise ValueError(f"bucket_size must be positive, got {bucket_size}")

    origin = datetime.min.replace(tzinfo=instant.tzinfo)
    return origin + ((instant - origin) // bucket_size) * bucket_size


def window(
    samples: Iterable[Sample],
    bucket_size: timedelta,
    step: int,
    count: int,
    reference_now: datetime,
) -> list[Sample]:
    """Select the present-or-future samples to display.

    Skips samples earlier than the start of the current bucket, then keeps
    every ``step``-th sample, at most ``count`` of them. Shorter input gives
    shorter output.

    Args:
        samples: Chronologically ordered samples
        bucket_size: Granularity used to floor ``reference_now``
        step: Stride between selected samples (1 = all)
        count: Maximum number of samples returned
        reference_now: Current instant, same civil time frame as the samples

    Returns:
        Selected samples in input order
    """
    if step < 1:
        raise ValueError(f"step must be >= 1, got {step}")
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")

    threshold = truncate(reference_now, bucket_size)
    remaining = dropwhile(lambda s: s.timestamp < threshold, samples)
    return list(islice(remaining, 0, count * step, step))


def aggregate_by_day(samples: Iterable[Sample]) -> list[DailyAverage]:
    """Average consecutive samples that share a calendar date.

    Every sample of a day weighs the same regardless of its time of day.
    """
    averages = []
    for day, group in groupby(samples, key=lambda s: s.timestamp.date()):
        count = 0
        temperature = 0.0
        humidity = 0.0
        for sample in group:
            count += 1
            temperature += sample.temperature_celsius
            humidity += sample.relative_humidity_percent

        averages.append(
            DailyAverage(
                calendar_date=day,
                mean_temperature=temperature / count,
                mean_humidity=humidity / count,
                sample_count=count,
            )
        )
    return averages
