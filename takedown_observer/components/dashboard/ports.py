"""
Dashboard component - Port interfaces.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol


class TimestampFormatPort(Protocol):
    def format(self, dt: datetime | None) -> str:
        """Render a report timestamp for display."""
        ...
