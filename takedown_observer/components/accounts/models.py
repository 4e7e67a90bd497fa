"""
Accounts component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass

from takedown_observer.domain.entities import Filters

ACCOUNTS_PATH = "/api/accounts"


@dataclass(frozen=True)
class AccountsQuery:
    """Query parameters for one accounts listing request."""

    page: int | None = None
    country: str = ""
    search: str = ""

    @classmethod
    def for_page(cls, page: int, filters: Filters) -> AccountsQuery:
        return cls(page=page, country=filters.country, search=filters.search)

    def to_params(self) -> dict[str, str]:
        """Query string values; empty filters are left out."""
        params: dict[str, str] = {}
        if self.page is not None:
            params["page"] = str(self.page)
        if self.country:
            params["country"] = self.country
        if self.search:
            params["search"] = self.search
        return params
