"""Core business logic for ICal Blocker."""

from icalblocker.core.date_ranges import (
    AnchorDates,
    DateRange,
    compute_anchor_dates,
    daily_ranges,
    single_range,
)
from icalblocker.core.event_config import EventConfig, resolve_configurations
from icalblocker.core.ics_builder import build_calendar, build_ics_from_configs

__all__ = [
    "AnchorDates",
    "DateRange",
    "compute_anchor_dates",
    "daily_ranges",
    "single_range",
    "EventConfig",
    "resolve_configurations",
    "build_calendar",
    "build_ics_from_configs",
]
