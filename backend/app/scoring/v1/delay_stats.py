from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Optional

from app.scoring.v1.delay_prediction import format_fixed


@dataclass(frozen=True)
class DelayDistribution:
    on_time: int
    minor: int
    moderate: int
    severe: int


@dataclass(frozen=True)
class HourBucket:
    hour: str
    count: int
    total_delay: float
    avg_delay: float


def delay_distribution(delays: Iterable[Optional[float]]) -> DelayDistribution:
    """
    Buckets: on_time <= 15 < minor <= 30 < moderate <= 60 < severe.
    None counts as 0 (on time).
    """
    on_time = minor = moderate = severe = 0
    for d in delays:
        d = d or 0.0
        if d <= 15:
            on_time += 1
        elif d <= 30:
            minor += 1
        elif d <= 60:
            moderate += 1
        else:
            severe += 1
    return DelayDistribution(on_time=on_time, minor=minor, moderate=moderate, severe=severe)


def peak_hour_analysis(rows: Iterable[tuple[datetime, Optional[float]]]) -> list[HourBucket]:
    """
    rows are (scheduled_departure, delay_minutes). Grouped by departure hour
    as "HH", sorted by hour.
    """
    counts: dict[str, int] = {}
    totals: dict[str, float] = {}

    for scheduled_departure, delay in rows:
        key = f"{scheduled_departure.hour:02d}"
        counts[key] = counts.get(key, 0) + 1
        totals[key] = totals.get(key, 0.0) + (delay or 0.0)

    return [
        HourBucket(
            hour=key,
            count=counts[key],
            total_delay=totals[key],
            avg_delay=totals[key] / counts[key] if counts[key] > 0 else 0.0,
        )
        for key in sorted(counts, key=int)
    ]


def delay_rate_label(total_flights: int, delayed_flights: int) -> str:
    if total_flights <= 0:
        return "0%"
    return f"{format_fixed(delayed_flights / total_flights * 100, 1)}%"
