"""
Display-time adapter.

Formats report timestamps in the configured timezone for the views.
Naive timestamps are taken to be UTC.
"""

from __future__ import annotations

from datetime import UTC, datetime
from zoneinfo import ZoneInfo

NO_TIMESTAMP = "N/A"
DISPLAY_FORMAT = "%Y-%m-%d %H:%M:%S %Z"


class DisplayTimeAdapter:
    def __init__(self, tz_name: str = "UTC") -> None:
        self._tz_name = tz_name
        self._tz = ZoneInfo(tz_name)

    @property
    def tz_name(self) -> str:
        return self._tz_name

    def to_local(self, dt: datetime) -> datetime:
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=UTC)
        return dt.astimezone(self._tz)

    def format(self, dt: datetime | None) -> str:
        if dt is None:
            return NO_TIMESTAMP
        return self.to_local(dt).strftime(DISPLAY_FORMAT)
