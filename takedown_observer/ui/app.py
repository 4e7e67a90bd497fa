"""
The single-page app instance.

Owns the container, the session filters and the router, and turns user
actions (navigation, filter changes, pagination clicks) into renders.
Renders are serialized by a lock; each one performs at most one network
round trip and writes the container once when it completes.
"""

from __future__ import annotations

import asyncio
import logging
from types import TracebackType

from takedown_observer.app_shell import views
from takedown_observer.app_shell.router import Router
from takedown_observer.app_shell.views import RenderedView
from takedown_observer.components.dashboard import find_link
from takedown_observer.domain.entities import View
from takedown_observer.ui.context import ServiceContext
from takedown_observer.ui.state import AppState, Container

logger = logging.getLogger(__name__)


class App:
    def __init__(self, ctx: ServiceContext, path: str = "/") -> None:
        self.ctx = ctx
        self.container = Container()
        self.state = AppState(path=path)
        self._render_lock = asyncio.Lock()

        self.router = Router(not_found=self._show_not_found)
        self.router.register("/", View.LANDING, self._show_landing)
        self.router.register("/dashboard", View.DASHBOARD, self._show_dashboard)
        self.router.register("/about", View.ABOUT, self._show_about)
        self.router.register("/related-work", View.RELATED_WORK, self._show_related_work)

    async def __aenter__(self) -> App:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.ctx.aclose()

    # --- Lifecycle / navigation ---

    async def init(self) -> None:
        await self.ctx.templates.load()
        await self.handle_route()

    async def navigate(self, path: str) -> None:
        self.state.path = path
        await self.handle_route()

    async def handle_route(self) -> None:
        async with self._render_lock:
            await self.router.dispatch(self.state.path)

    # --- Dashboard actions ---

    async def select_country(self, code: str) -> None:
        self.state.filters.country = code
        await self.render_dashboard(1)

    async def submit_search(self, text: str) -> None:
        self.state.filters.search = text
        await self.render_dashboard(1)

    async def clear_filters(self) -> None:
        self.state.clear_filters()
        await self.render_dashboard(1)

    async def go_to_page(self, page: int) -> bool:
        """Follow a pagination control. Returns False when no enabled control leads there."""
        if find_link(self.state.pagination, page) is None:
            logger.debug(f"Ignoring pagination click to page {page}")
            return False
        await self.render_dashboard(page)
        return True

    async def render_dashboard(self, page: int = 1) -> None:
        async with self._render_lock:
            self.state.path = "/dashboard"
            await self._show_dashboard(page)

    # --- Renderers (called with the lock held) ---

    def _show(self, rendered: RenderedView) -> None:
        self.container.replace(rendered.html)
        self.state.view = rendered.view
        self.state.pagination = list(rendered.pagination)

    async def _show_landing(self) -> None:
        self._show(await views.landing(self.ctx))

    async def _show_dashboard(self, page: int = 1) -> None:
        self._show(await views.dashboard(self.ctx, self.state.filters, page))

    async def _show_about(self) -> None:
        self._show(views.about(self.ctx))

    async def _show_related_work(self) -> None:
        self._show(views.related_work(self.ctx))

    async def _show_not_found(self) -> None:
        self._show(views.not_found())
