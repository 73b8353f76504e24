"""HTTP layer for ICal Blocker."""

from icalblocker.api.app import create_app

__all__ = ["create_app"]
