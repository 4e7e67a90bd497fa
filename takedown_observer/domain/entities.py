from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

# --- Views ---


class View(str, Enum):
    """The screens the app can show. Exactly one is visible at a time."""

    LANDING = "landing"
    DASHBOARD = "dashboard"
    ABOUT = "about"
    RELATED_WORK = "related-work"
    NOT_FOUND = "not-found"


# --- Accounts (read-only, produced by the accounts API) ---


class Account(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    id: str = ""
    name: str
    countries: list[str] = Field(default_factory=list)
    last_reported_at: datetime
    report_count: int = 0
    data_format_version: str = ""

    @field_validator("countries", mode="before")
    @classmethod
    def _null_countries(cls, v: object) -> object:
        return [] if v is None else v


class AccountsPage(BaseModel):
    """One page of the accounts listing, keyed the way the API sends it."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    accounts: list[Account] = Field(default_factory=list)
    total_count: int = Field(alias="totalCount")
    unique_countries: list[str] = Field(default_factory=list, alias="uniqueCountries")
    current_page: int = Field(alias="currentPage")
    total_pages: int = Field(alias="totalPages")

    @field_validator("accounts", "unique_countries", mode="before")
    @classmethod
    def _null_lists(cls, v: object) -> object:
        # Go encodes empty slices as null
        return [] if v is None else v

    @property
    def latest_report(self) -> datetime | None:
        """Accounts arrive newest first, so the head of the list is the latest report."""
        if not self.accounts:
            return None
        return self.accounts[0].last_reported_at


# --- Session state ---


@dataclass
class Filters:
    country: str = ""
    search: str = ""

    def clear(self) -> None:
        self.country = ""
        self.search = ""
