"""Server settings loaded from the environment."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

from icalblocker.config.constants import (
    DEFAULT_FEED_PATH,
    DEFAULT_HOST,
    DEFAULT_LOG_LEVEL,
    DEFAULT_PORT,
    ENV_FEED_PATH,
    ENV_HOST,
    ENV_LOG_LEVEL,
    ENV_PORT,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ServerSettings:
    """Settings for serving the calendar feed."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL
    feed_path: str = DEFAULT_FEED_PATH


def get_env_file_path() -> Path:
    """Get the .env path in the current working directory.

    Returns:
        Path to the .env file.
    """
    return Path.cwd() / ".env"


def _parse_port(raw: Optional[str]) -> int:
    if not raw:
        return DEFAULT_PORT
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring invalid %s value %r", ENV_PORT, raw)
        return DEFAULT_PORT


def _normalize_feed_path(raw: Optional[str]) -> str:
    path = (raw or DEFAULT_FEED_PATH).strip()
    if not path.startswith("/"):
        path = "/" + path
    return path


def load_settings(environ: Optional[Mapping[str, str]] = None) -> ServerSettings:
    """Build ServerSettings from environment variables.

    When no mapping is given, a .env file in the working directory is loaded
    first (existing variables win) and os.environ is read.

    Args:
        environ: Optional mapping to read instead of os.environ.

    Returns:
        The resolved ServerSettings.
    """
    if environ is None:
        env_path = get_env_file_path()
        if env_path.exists():
            load_dotenv(dotenv_path=env_path, override=False)
            logger.debug("Loaded environment from %s", env_path)
        environ = os.environ

    return ServerSettings(
        host=environ.get(ENV_HOST) or DEFAULT_HOST,
        port=_parse_port(environ.get(ENV_PORT)),
        log_level=(environ.get(ENV_LOG_LEVEL) or DEFAULT_LOG_LEVEL).upper(),
        feed_path=_normalize_feed_path(environ.get(ENV_FEED_PATH)),
    )
