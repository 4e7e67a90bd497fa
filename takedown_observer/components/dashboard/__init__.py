"""
Dashboard component - account table, country filter and pagination fragments.
"""

from .component import (
    ALL_COUNTRIES_OPTION,
    NO_ACCOUNTS_ROW,
    account_row,
    account_rows,
    build_pagination,
    country_options,
    find_link,
    render_pagination,
)
from .models import PageLink
from .ports import TimestampFormatPort

__all__ = [
    # Fragments
    "account_row",
    "account_rows",
    "country_options",
    "build_pagination",
    "render_pagination",
    "find_link",
    "NO_ACCOUNTS_ROW",
    "ALL_COUNTRIES_OPTION",
    # Models
    "PageLink",
    # Ports
    "TimestampFormatPort",
]
