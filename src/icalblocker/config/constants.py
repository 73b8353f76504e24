"""Centralized constants for ICal Blocker.

Defaults, bounds and fixed iCalendar values used when generating
blocking feeds.
"""

# Event configuration defaults
DEFAULT_DAYS_AHEAD = 45
MIN_DAYS_AHEAD = 0
MAX_DAYS_AHEAD = 3650
DEFAULT_EVENT_NAME = "Special Ical Block"

# Every generated range starts this many days before today (UTC)
START_OFFSET_DAYS = -1

# ICS calendar constants
ICS_PRODID = "-//CastleHost//ICal Blocker//EN"
ICS_VERSION = "2.0"
ICS_CALSCALE = "GREGORIAN"
ICS_METHOD = "PUBLISH"
ICS_EVENT_STATUS = "CONFIRMED"
ICS_EVENT_TRANSP = "OPAQUE"
ICS_DATE_FORMAT = "%Y%m%d"

# UID composition
UID_DOMAIN = "ical-blocker.local"
UID_TOKEN_LENGTH = 7

# Query parameter names
PARAM_EVENTS = "events"
PARAM_DAYS = "days"
PARAM_NAME = "name"
PARAM_SINGLE = "single"

# Response constants
ICS_MEDIA_TYPE = "text/calendar; charset=utf-8"
ICS_FILENAME = "calendar.ics"
RESPONSE_HEADERS = {
    "Content-Disposition": f'attachment; filename="{ICS_FILENAME}"',
    "Cache-Control": "no-cache, no-store, must-revalidate",
}

# Error messages returned to the caller
ERROR_EVENTS_NOT_JSON = 'Invalid "events" parameter. Must be valid JSON.'
ERROR_EVENTS_NOT_ARRAY = 'Invalid "events" parameter. Must be a JSON array.'

# Server environment variables
ENV_HOST = "ICAL_BLOCKER_HOST"
ENV_PORT = "ICAL_BLOCKER_PORT"
ENV_LOG_LEVEL = "ICAL_BLOCKER_LOG_LEVEL"
ENV_FEED_PATH = "ICAL_BLOCKER_FEED_PATH"

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8000
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_FEED_PATH = "/"
