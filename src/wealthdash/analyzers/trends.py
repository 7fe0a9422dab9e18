"""
Synthetic chart series — net-worth trend and simulated price history.

Neither series is real market data. They give the charts a plausible
shape around the one figure that is known (current net worth or current
price). Pass a seeded ``random.Random`` for reproducible output.
"""

from __future__ import annotations

import calendar
import random
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum

from wealthdash.exceptions import ConfigurationError, ValidationError

MONTH_LABELS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

# Fraction of today's net worth shown for each month, ending at 100% in December.
NET_WORTH_TREND_FACTORS = (0.85, 0.88, 0.87, 0.91, 0.93, 0.95, 0.98, 0.96, 0.99, 1.02, 1.05, 1.0)


class TimeRange(str, Enum):
    """Chart window for a price history."""

    ONE_DAY = "1D"
    ONE_WEEK = "1W"
    ONE_MONTH = "1M"
    ONE_YEAR = "1Y"
    ALL = "ALL"


@dataclass(frozen=True)
class _RangeSpec:
    points: int
    volatility: float
    step: str  # "hour", "day", "week" or "month"


_RANGE_SPECS = {
    TimeRange.ONE_DAY: _RangeSpec(points=24, volatility=0.005, step="hour"),
    TimeRange.ONE_WEEK: _RangeSpec(points=7, volatility=0.02, step="day"),
    TimeRange.ONE_MONTH: _RangeSpec(points=30, volatility=0.02, step="day"),
    TimeRange.ONE_YEAR: _RangeSpec(points=52, volatility=0.05, step="week"),
    TimeRange.ALL: _RangeSpec(points=60, volatility=0.10, step="month"),
}


@dataclass(frozen=True)
class TrendPoint:
    label: str
    value: float


@dataclass(frozen=True)
class PricePoint:
    timestamp: datetime
    price: float


def net_worth_trend(net_worth: float) -> list[TrendPoint]:
    """Twelve monthly points (Jan..Dec) ending at ``net_worth``."""
    return [
        TrendPoint(label=label, value=net_worth * factor)
        for label, factor in zip(MONTH_LABELS, NET_WORTH_TREND_FACTORS)
    ]


def _add_months(moment: datetime, months: int) -> datetime:
    """Shift by whole months, clamping the day to the target month's length."""
    index = moment.year * 12 + (moment.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def _range_start(now: datetime, time_range: TimeRange) -> datetime:
    if time_range == TimeRange.ONE_DAY:
        return now - timedelta(hours=24)
    if time_range == TimeRange.ONE_WEEK:
        return now - timedelta(days=7)
    if time_range == TimeRange.ONE_MONTH:
        return now - timedelta(days=30)
    if time_range == TimeRange.ONE_YEAR:
        return _add_months(now, -12)
    return _add_months(now, -60)


def _offset(start: datetime, step: str, i: int) -> datetime:
    if step == "hour":
        return start + timedelta(hours=i)
    if step == "day":
        return start + timedelta(days=i)
    if step == "week":
        return start + timedelta(weeks=i)
    return _add_months(start, i)


def parse_time_range(value: str | TimeRange) -> TimeRange:
    try:
        return TimeRange(value.upper() if isinstance(value, str) else value)
    except ValueError:
        options = ", ".join(r.value for r in TimeRange)
        raise ConfigurationError(f"Unknown time range {value!r} (expected one of {options})") from None


def price_history(
    current_price: float,
    time_range: str | TimeRange,
    now: datetime,
    rng: random.Random | None = None,
) -> list[PricePoint]:
    """
    Simulate a price path that ends at ``current_price``.

    The walk is built backwards from the current price: each earlier point
    differs from the next one by ``(u - 0.5) * volatility * next`` with
    ``u`` uniform in [0, 1).

    Args:
        current_price: Latest price (already in the display currency if
            the chart should show converted prices).
        time_range: One of 1D, 1W, 1M, 1Y, ALL.
        now: End of the window.
        rng: Random source; a fresh unseeded one is used when omitted.

    Returns:
        Points in chronological order.
    """
    if current_price < 0:
        raise ValidationError(f"Price must be non-negative, got {current_price}")
    tr = parse_time_range(time_range)
    spec = _RANGE_SPECS[tr]
    rng = rng or random.Random()

    walk = [current_price]
    for _ in range(1, spec.points):
        change = (rng.random() - 0.5) * spec.volatility * walk[0]
        walk.insert(0, walk[0] - change)

    start = _range_start(now, tr)
    return [
        PricePoint(timestamp=_offset(start, spec.step, i), price=price)
        for i, price in enumerate(walk)
    ]
