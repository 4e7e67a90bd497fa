from __future__ import annotations

from dataclasses import dataclass

import httpx

from takedown_observer.adapters.time_display import DisplayTimeAdapter
from takedown_observer.app_shell.config import Settings
from takedown_observer.components.accounts import AccountsClient
from takedown_observer.components.templates import TemplateCache


@dataclass
class ServiceContext:
    http: httpx.AsyncClient
    templates: TemplateCache
    accounts: AccountsClient
    timestamps: DisplayTimeAdapter

    @classmethod
    def create(
        cls,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> ServiceContext:
        """Wire the services against one shared HTTP client rooted at the base URL."""
        http = httpx.AsyncClient(
            base_url=settings.base_url,
            timeout=settings.http_timeout,
            transport=transport,
        )
        return cls(
            http=http,
            templates=TemplateCache(http, static_prefix=settings.static_prefix),
            accounts=AccountsClient(http),
            timestamps=DisplayTimeAdapter(settings.timezone),
        )

    async def aclose(self) -> None:
        await self.http.aclose()
