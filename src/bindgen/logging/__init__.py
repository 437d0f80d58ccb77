"""Structured logging utilities."""

from .audit import BUILD_ACTIONS, BuildEvent, JsonlBuildLogger, utc_timestamp

__all__ = ["BUILD_ACTIONS", "BuildEvent", "JsonlBuildLogger", "utc_timestamp"]
