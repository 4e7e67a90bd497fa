"""
Dashboard component - HTML fragments for the accounts dashboard.

Pure functions: account table rows, the country filter options and the
pagination controls. Account data is escaped before it reaches the markup.

Pagination shows at most five controls:
[PREV] [current-1] [current] [current+1] [NEXT]
PREV is disabled on the first page and NEXT from the last page on.
"""

from __future__ import annotations

from collections.abc import Sequence
from html import escape

from takedown_observer.adapters.countries import country_name, sort_by_name
from takedown_observer.domain.entities import Account

from .models import PageLink
from .ports import TimestampFormatPort

NO_ACCOUNTS_ROW = '<tr><td colspan="3">No accounts found</td></tr>'
ALL_COUNTRIES_OPTION = '<option value="">All Countries</option>'


# --- Account rows ---


def account_row(account: Account, timestamps: TimestampFormatPort) -> str:
    countries = " ".join(
        f'<span class="country-item">{escape(country_name(code))}</span>'
        for code in account.countries
    )
    return (
        '<tr class="account-row">'
        f'<td class="username-col">@{escape(account.name)}</td>'
        f'<td class="countries-col">{countries}</td>'
        f'<td class="date-col">{escape(timestamps.format(account.last_reported_at))}</td>'
        "</tr>"
    )


def account_rows(accounts: Sequence[Account], timestamps: TimestampFormatPort) -> str:
    if not accounts:
        return NO_ACCOUNTS_ROW
    return "\n".join(account_row(account, timestamps) for account in accounts)


# --- Country filter ---


def country_options(codes: Sequence[str], selected: str = "") -> str:
    options = [ALL_COUNTRIES_OPTION]
    for code in sort_by_name(list(codes)):
        attrs = f'value="{escape(code)}"'
        if code == selected:
            attrs += " selected"
        options.append(f"<option {attrs}>{escape(country_name(code))}</option>")
    return "".join(options)


# --- Pagination ---


def build_pagination(current: int, total: int) -> list[PageLink]:
    links = [PageLink("[PREV]", current - 1, disabled=current <= 1)]

    if current > 1:
        links.append(PageLink(f"[{current - 1}]", current - 1))

    links.append(PageLink(f"[{current}]", current, active=True))

    if current < total:
        links.append(PageLink(f"[{current + 1}]", current + 1))

    links.append(PageLink("[NEXT]", current + 1, disabled=current >= total))
    return links


def render_pagination(links: Sequence[PageLink]) -> str:
    return "".join(
        f'<a href="#" class="{link.css_class}" data-page="{link.page}">{link.label}</a>'
        for link in links
    )


def find_link(links: Sequence[PageLink], page: int) -> PageLink | None:
    """The enabled control that leads to `page`, if one is on offer."""
    for link in links:
        if link.page == page and not link.disabled:
            return link
    return None
