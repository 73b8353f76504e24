"""Custom exceptions for ICal Blocker."""

from icalblocker.exceptions.errors import (
    IcalBlockerError,
    InvalidEventsParameterError,
)

__all__ = [
    "IcalBlockerError",
    "InvalidEventsParameterError",
]
