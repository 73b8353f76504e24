"""ICS document building for blocking feeds."""

import logging
import uuid
from datetime import datetime
from typing import Iterable, List, Optional

from icalendar import Calendar, Event, vText

from icalblocker.config.constants import (
    ICS_CALSCALE,
    ICS_EVENT_STATUS,
    ICS_EVENT_TRANSP,
    ICS_METHOD,
    ICS_PRODID,
    ICS_VERSION,
    UID_DOMAIN,
    UID_TOKEN_LENGTH,
)
from icalblocker.core.date_ranges import (
    DateRange,
    compute_anchor_dates,
    format_ics_date,
    ranges_for_config,
    to_utc,
)
from icalblocker.core.event_config import EventConfig

logger = logging.getLogger(__name__)


def generate_uid(block: DateRange, single: bool, token: Optional[str] = None) -> str:
    """Build a UID from the blocked date(s) and a short random token.

    Daily events use ``<start>-<token>@domain``; spanning events also carry
    the end date: ``<start>-<end>-<token>@domain``.
    """
    token = token or uuid.uuid4().hex[:UID_TOKEN_LENGTH]
    parts = [format_ics_date(block.start)]
    if single:
        parts.append(format_ics_date(block.end))
    parts.append(token)
    return f"{'-'.join(parts)}@{UID_DOMAIN}"


def create_block_event(
    block: DateRange,
    name: str,
    stamp: datetime,
    single: bool = False,
) -> Event:
    """Create an all-day, busy VEVENT for a blocked range.

    Args:
        block: The blocked range; its end date is exclusive.
        name: Display name used as SUMMARY.
        stamp: Generation time (UTC) for DTSTAMP.
        single: Whether the range is a spanning event (affects the UID).

    Returns:
        An Event component ready to add to a calendar.
    """
    ve = Event()
    ve.add("UID", generate_uid(block, single))
    ve.add("DTSTAMP", stamp)
    # date values serialize as VALUE=DATE
    ve.add("DTSTART", block.start)
    ve.add("DTEND", block.end)
    ve.add("SUMMARY", vText(name))
    ve.add("STATUS", ICS_EVENT_STATUS)
    ve.add("TRANSP", ICS_EVENT_TRANSP)
    return ve


def _create_ics_calendar() -> Calendar:
    """Create a new calendar with the feed headers."""
    cal = Calendar()
    cal.add("VERSION", ICS_VERSION)
    cal.add("PRODID", ICS_PRODID)
    cal.add("CALSCALE", ICS_CALSCALE)
    cal.add("METHOD", ICS_METHOD)
    return cal


def build_calendar(configs: Iterable[EventConfig], now: datetime) -> Calendar:
    """Build one calendar holding every configuration's events, in order.

    Args:
        configs: Resolved configurations.
        now: Current time; anchors the ranges and stamps each event.

    Returns:
        The assembled Calendar.
    """
    stamp = to_utc(now).replace(microsecond=0)
    anchors = compute_anchor_dates(now)

    cal = _create_ics_calendar()
    for config in configs:
        ranges = ranges_for_config(anchors, config)
        for block in ranges:
            cal.add_component(create_block_event(block, config.name, stamp, config.single))
        logger.debug(
            "Added %d event(s) for config %s", len(ranges), config.to_dict(),
        )
    return cal


def _format_ics_output(cal: Calendar) -> str:
    """Format calendar to ICS string with CRLF line endings."""
    raw_ical = cal.to_ical()
    decoded_ical = raw_ical.decode("utf-8", errors="replace")
    # Ensure CRLF line endings per RFC5545
    return decoded_ical.replace("\r\n", "\n").replace("\n", "\r\n")


def build_ics_from_configs(configs: List[EventConfig], now: datetime) -> str:
    """Render the full ICS document for a list of configurations.

    Args:
        configs: Resolved configurations, in request order.
        now: Current time.

    Returns:
        ICS content string.
    """
    cal = build_calendar(configs, now)
    event_count = len(cal.subcomponents)
    logger.info(
        "Generated calendar with %d event(s) from %d configuration(s)",
        event_count, len(configs),
    )
    return _format_ics_output(cal)
