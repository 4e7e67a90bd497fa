import logging

import httpx

from takedown_observer.app_shell.config import Settings, configure_logging, get_settings
from takedown_observer.ui.app import App
from takedown_observer.ui.context import ServiceContext

logger = logging.getLogger(__name__)


def create_app(
    path: str = "/",
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> App:
    settings = settings or get_settings()
    ctx = ServiceContext.create(settings, transport=transport)
    return App(ctx, path=path)


async def start(
    path: str = "/",
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> App:
    """Boot the app at `path`: load templates, then render the current route."""
    settings = settings or get_settings()
    configure_logging(settings)

    logger.info(f"API base URL: {settings.base_url}")
    logger.info(f"Display timezone: {settings.timezone}")

    app = create_app(path, settings, transport)
    await app.init()
    return app
