"""Configuration module for ICal Blocker."""

from icalblocker.config.settings import ServerSettings, load_settings
from icalblocker.config.constants import (
    DEFAULT_DAYS_AHEAD,
    DEFAULT_EVENT_NAME,
    MAX_DAYS_AHEAD,
    MIN_DAYS_AHEAD,
    ICS_PRODID,
    UID_DOMAIN,
)

__all__ = [
    "ServerSettings",
    "load_settings",
    "DEFAULT_DAYS_AHEAD",
    "DEFAULT_EVENT_NAME",
    "MAX_DAYS_AHEAD",
    "MIN_DAYS_AHEAD",
    "ICS_PRODID",
    "UID_DOMAIN",
]
