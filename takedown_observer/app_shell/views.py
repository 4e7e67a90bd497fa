"""
Page views.

Each view produces the complete markup for the container, or the error view
when anything on the way fails. Nothing is written to the container from
here, so a failed render can never leave half a page behind.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from html import escape

from takedown_observer.components.accounts import AccountsQuery
from takedown_observer.components.dashboard import (
    PageLink,
    account_rows,
    build_pagination,
    country_options,
    render_pagination,
)
from takedown_observer.components.templates import fill
from takedown_observer.domain.entities import Filters, View
from takedown_observer.domain.errors import ObserverError
from takedown_observer.ui.context import ServiceContext

logger = logging.getLogger(__name__)

LANDING_FAILED = "Failed to load landing page data"
DASHBOARD_FAILED = "Failed to load dashboard data"
ABOUT_FAILED = "Failed to load about page"
RELATED_WORK_FAILED = "Failed to load related work page"
NOT_FOUND = "Page not found"

ERROR_TEMPLATE = """
<div class="error-container">
    <div class="data-block">
        <div class="block-header">&gt;_ Error</div>
        <pre class="data-display">{message}</pre>
        <a href="/" class="action-link">&gt;_ Return Home</a>
    </div>
</div>
"""


@dataclass(frozen=True)
class RenderedView:
    view: View
    html: str
    pagination: tuple[PageLink, ...] = ()
    failed: bool = False


def render_error(message: str, view: View = View.NOT_FOUND) -> RenderedView:
    return RenderedView(view, ERROR_TEMPLATE.format(message=escape(message)), failed=True)


def not_found() -> RenderedView:
    return render_error(NOT_FOUND)


async def landing(ctx: ServiceContext) -> RenderedView:
    try:
        data = await ctx.accounts.fetch_page()
        html = fill(
            ctx.templates.get("landing"),
            {
                "totalAccounts": data.total_count,
                "totalCountries": len(data.unique_countries),
                "lastUpdate": escape(ctx.timestamps.format(data.latest_report)),
            },
        )
    except ObserverError:
        logger.exception("Error rendering landing page")
        return render_error(LANDING_FAILED, View.LANDING)

    return RenderedView(View.LANDING, html)


async def dashboard(ctx: ServiceContext, filters: Filters, page: int = 1) -> RenderedView:
    try:
        data = await ctx.accounts.fetch_page(AccountsQuery.for_page(page, filters))
        links = build_pagination(data.current_page, data.total_pages)
        html = fill(
            ctx.templates.get("dashboard"),
            {
                "lastUpdate": escape(ctx.timestamps.format(data.latest_report)),
                "totalAccounts": data.total_count,
                "totalCountries": len(data.unique_countries),
                "currentPage": data.current_page,
                "totalPages": data.total_pages,
                "countryOptions": country_options(data.unique_countries, filters.country),
                "searchValue": escape(filters.search, quote=True),
                "accountRows": account_rows(data.accounts, ctx.timestamps),
                "paginationControls": render_pagination(links),
            },
        )
    except ObserverError:
        logger.exception("Error rendering dashboard")
        return render_error(DASHBOARD_FAILED, View.DASHBOARD)

    return RenderedView(View.DASHBOARD, html, pagination=tuple(links))


def about(ctx: ServiceContext) -> RenderedView:
    try:
        return RenderedView(View.ABOUT, ctx.templates.get("about"))
    except ObserverError:
        logger.exception("Error rendering about page")
        return render_error(ABOUT_FAILED, View.ABOUT)


def related_work(ctx: ServiceContext) -> RenderedView:
    try:
        return RenderedView(View.RELATED_WORK, ctx.templates.get("related-work"))
    except ObserverError:
        logger.exception("Error rendering related work page")
        return render_error(RELATED_WORK_FAILED, View.RELATED_WORK)
