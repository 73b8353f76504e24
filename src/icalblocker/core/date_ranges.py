"""Date range computation for blocking events.

All ranges are whole days in UTC. End dates are exclusive, as iCalendar
expects for all-day events.
"""

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import List

import pytz

from icalblocker.config.constants import ICS_DATE_FORMAT, START_OFFSET_DAYS
from icalblocker.core.event_config import EventConfig


@dataclass(frozen=True)
class AnchorDates:
    """Reference dates computed once per request."""

    today_utc: date
    yesterday_utc: date


@dataclass(frozen=True)
class DateRange:
    """A run of blocked days; ``end`` is the day after the last blocked day."""

    start: date
    end: date

    @property
    def days(self) -> int:
        return (self.end - self.start).days


def to_utc(now: datetime) -> datetime:
    """Return ``now`` in UTC, treating naive datetimes as already UTC."""
    if now.tzinfo is None:
        return pytz.utc.localize(now)
    return now.astimezone(pytz.utc)


def compute_anchor_dates(now: datetime) -> AnchorDates:
    """Truncate ``now`` to its UTC date and derive yesterday from it.

    Args:
        now: Current time; the clock is injected for deterministic output.

    Returns:
        AnchorDates for the request.
    """
    today = to_utc(now).date()
    return AnchorDates(
        today_utc=today,
        yesterday_utc=today + timedelta(days=START_OFFSET_DAYS),
    )


def daily_ranges(anchors: AnchorDates, days_ahead: int) -> List[DateRange]:
    """One single-day range per day from yesterday through days_ahead - 1.

    Yields ``days_ahead + 1`` ranges; ``days_ahead = 0`` still covers yesterday.
    """
    ranges = []
    for offset in range(START_OFFSET_DAYS, days_ahead):
        day = anchors.today_utc + timedelta(days=offset)
        ranges.append(DateRange(start=day, end=day + timedelta(days=1)))
    return ranges


def single_range(anchors: AnchorDates, days_ahead: int) -> DateRange:
    """One range covering the same days as :func:`daily_ranges`."""
    total_days = days_ahead + 1
    start = anchors.yesterday_utc
    return DateRange(start=start, end=start + timedelta(days=total_days))


def ranges_for_config(anchors: AnchorDates, config: EventConfig) -> List[DateRange]:
    """Pick the range layout for a configuration's mode."""
    if config.single:
        return [single_range(anchors, config.days_ahead)]
    return daily_ranges(anchors, config.days_ahead)


def format_ics_date(day: date) -> str:
    """Format a date as YYYYMMDD."""
    return day.strftime(ICS_DATE_FORMAT)
