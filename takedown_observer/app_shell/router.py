import logging
from collections.abc import Awaitable, Callable
from typing import NamedTuple

from takedown_observer.domain.entities import View

logger = logging.getLogger(__name__)

Renderer = Callable[[], Awaitable[None]]


class RouteConfig(NamedTuple):
    view: View
    render: Renderer


class Router:
    """Exact-match path table. Anything unregistered goes to the not-found renderer."""

    def __init__(self, not_found: Renderer):
        self.routes: dict[str, RouteConfig] = {}
        self.not_found = not_found

    def register(self, path: str, view: View, render: Renderer) -> None:
        self.routes[path] = RouteConfig(view, render)

    def resolve(self, path: str) -> View:
        config = self.routes.get(path or "/")
        return config.view if config else View.NOT_FOUND

    async def dispatch(self, path: str) -> View:
        route = path or "/"  # Default empty route to "/"
        logger.info(f"Navigate to: {route}")

        config = self.routes.get(route)
        if not config:
            logger.warning(f"No route found for: {route}")
            await self.not_found()
            return View.NOT_FOUND

        await config.render()
        return config.view
