"""Event configuration model and request parameter resolution."""

import json
import logging
import math
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from icalblocker.config.constants import (
    DEFAULT_DAYS_AHEAD,
    DEFAULT_EVENT_NAME,
    ERROR_EVENTS_NOT_ARRAY,
    ERROR_EVENTS_NOT_JSON,
    MAX_DAYS_AHEAD,
    MIN_DAYS_AHEAD,
)
from icalblocker.exceptions.errors import InvalidEventsParameterError

logger = logging.getLogger(__name__)

# Leading signed integer, the way a lenient integer parse reads "12abc" as 12
LEADING_INT_PATTERN = re.compile(r"^\s*([+-]?)0*(\d+)")

# Longer digit runs are out of range whatever they spell
MAX_DAYS_DIGITS = len(str(MAX_DAYS_AHEAD))


@dataclass(frozen=True)
class EventConfig:
    """One requested block of days."""

    days_ahead: int = DEFAULT_DAYS_AHEAD
    name: str = DEFAULT_EVENT_NAME
    single: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> "EventConfig":
        """Create an EventConfig from one entry of the "events" array.

        Never raises: bad field values fall back to their defaults, and
        entries that are not objects produce an all-defaults config.

        Args:
            data: Decoded JSON value, normally a dict with days/name/single.

        Returns:
            A normalized EventConfig.
        """
        if not isinstance(data, dict):
            logger.debug("Non-object events entry %r, using defaults", data)
            return cls()
        return cls(
            days_ahead=parse_days_ahead(data.get("days")),
            name=parse_event_name(data.get("name")),
            single=parse_single_flag(data.get("single")),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert back to the request-shaped dictionary."""
        return {
            "days": self.days_ahead,
            "name": self.name,
            "single": self.single,
        }


def _leading_int(value: Any) -> Optional[int]:
    """Read an integer the lenient way; None when there is nothing to read."""
    # bool is an int subclass but never a day count
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return int(value)
    if isinstance(value, str):
        match = LEADING_INT_PATTERN.match(value)
        if match:
            sign, digits = match.groups()
            if len(digits) > MAX_DAYS_DIGITS:
                return None
            return int(sign + digits)
    return None


def parse_days_ahead(value: Any) -> int:
    """Coerce a requested day count, clamping bad values to the default.

    Args:
        value: Raw value from the query string or an "events" entry.

    Returns:
        An integer in [MIN_DAYS_AHEAD, MAX_DAYS_AHEAD].
    """
    if value is None or value == "":
        return DEFAULT_DAYS_AHEAD

    days = _leading_int(value)
    if days is None or days < MIN_DAYS_AHEAD or days > MAX_DAYS_AHEAD:
        logger.debug("Invalid days value %r, using %d", value, DEFAULT_DAYS_AHEAD)
        return DEFAULT_DAYS_AHEAD
    return days


def parse_event_name(value: Any) -> str:
    """Return the display name, or the default for missing/empty values."""
    if not value:
        return DEFAULT_EVENT_NAME
    return str(value)


def parse_single_flag(value: Any) -> bool:
    """Decide whether a config asks for one spanning event.

    Truth table:
        True      -> True
        "true"    -> True
        anything else ("True", 1, "1", None, ...) -> False
    """
    return value is True or value == "true"


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are not JSON
    raise ValueError(f"Unexpected constant {name}")


def _parse_json_int(literal: str) -> Any:
    """Parse a JSON integer; oversized literals become infinity and clamp later."""
    try:
        return int(literal)
    except ValueError:
        return float("-inf") if literal.startswith("-") else float("inf")


def parse_events_param(raw: str) -> List[Any]:
    """Decode the "events" parameter into a list of raw entries.

    Raises:
        InvalidEventsParameterError: If the value is not JSON or not an array.
    """
    try:
        entries = json.loads(
            raw,
            parse_constant=_reject_constant,
            parse_int=_parse_json_int,
        )
    except (ValueError, RecursionError) as exc:
        logger.warning("Rejected events parameter (invalid JSON): %s", exc)
        raise InvalidEventsParameterError(ERROR_EVENTS_NOT_JSON, raw) from exc

    if not isinstance(entries, list):
        logger.warning(
            "Rejected events parameter (expected array, got %s)",
            type(entries).__name__,
        )
        raise InvalidEventsParameterError(ERROR_EVENTS_NOT_ARRAY, raw)
    return entries


def resolve_configurations(
    events: Optional[str] = None,
    days: Optional[str] = None,
    name: Optional[str] = None,
    single: Optional[str] = None,
) -> List[EventConfig]:
    """Produce the ordered list of configurations for one request.

    A non-empty "events" value takes precedence over the flat parameters.

    Args:
        events: JSON array of {days, name, single} objects.
        days: Flat day count, used only without "events".
        name: Flat display name, used only without "events".
        single: Flat mode flag ("true" selects single mode).

    Returns:
        List of EventConfig in input order.

    Raises:
        InvalidEventsParameterError: If "events" is present but unusable.
    """
    if events:
        return [EventConfig.from_dict(entry) for entry in parse_events_param(events)]

    return [
        EventConfig(
            days_ahead=parse_days_ahead(days),
            name=parse_event_name(name),
            single=parse_single_flag(single),
        )
    ]
