"""
Calendar feed API

Serves the generated blocking calendar over HTTP GET.
"""
import logging
from datetime import datetime
from typing import Callable, Optional

import pytz
from fastapi import FastAPI, Query, Response
from fastapi.responses import PlainTextResponse

from icalblocker import __version__
from icalblocker.config.constants import ICS_MEDIA_TYPE, RESPONSE_HEADERS
from icalblocker.config.settings import ServerSettings, load_settings
from icalblocker.core.event_config import resolve_configurations
from icalblocker.core.ics_builder import build_ics_from_configs
from icalblocker.exceptions.errors import InvalidEventsParameterError

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Current time in UTC."""
    return datetime.now(pytz.utc)


def create_app(
    settings: Optional[ServerSettings] = None,
    clock: Clock = utc_now,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Server settings (defaults to the environment).
        clock: Returns the current time; replaced in tests.
    """
    settings = settings or load_settings()

    app = FastAPI(
        title="ICal Blocker",
        version=__version__,
    )

    @app.get(settings.feed_path)
    def get_calendar_feed(
        events: Optional[str] = Query(None, description="JSON array of {days, name, single}"),
        days: Optional[str] = Query(None),
        name: Optional[str] = Query(None),
        single: Optional[str] = Query(None),
    ) -> Response:
        """
        Blocking calendar feed.

        Returns an .ics document with one block per configuration, or a
        plain-text 400 when "events" is not a JSON array.
        """
        try:
            configs = resolve_configurations(events=events, days=days, name=name, single=single)
        except InvalidEventsParameterError as e:
            return PlainTextResponse(e.message, status_code=400)

        ical_content = build_ics_from_configs(configs, clock())
        return Response(
            content=ical_content.encode("utf-8"),
            media_type=ICS_MEDIA_TYPE,
            headers=RESPONSE_HEADERS,
        )

    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "ok"}

    return app
