"""
ICal Blocker - Date-range blocking calendar feeds

Generates iCalendar documents that block a run of days starting
yesterday (UTC), served as a subscribable .ics feed.
"""

__version__ = "1.0.0"

# Public API - import commonly used components
from icalblocker.exceptions.errors import (
    IcalBlockerError,
    InvalidEventsParameterError,
)
from icalblocker.core.event_config import EventConfig, resolve_configurations
from icalblocker.core.ics_builder import build_calendar, build_ics_from_configs

__all__ = [
    # Version
    "__version__",
    # Exceptions
    "IcalBlockerError",
    "InvalidEventsParameterError",
    # Core
    "EventConfig",
    "resolve_configurations",
    "build_calendar",
    "build_ics_from_configs",
]
