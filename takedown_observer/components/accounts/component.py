"""
Accounts component - client for the accounts listing endpoint.

Every failure on the way to a validated page (transport, status, JSON,
schema) surfaces as AccountsFetchError so views handle a single type.
"""

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from takedown_observer.domain.entities import AccountsPage
from takedown_observer.domain.errors import AccountsFetchError

from .models import ACCOUNTS_PATH, AccountsQuery

logger = logging.getLogger(__name__)


class AccountsClient:
    def __init__(self, client: httpx.AsyncClient) -> None:
        self.client = client

    async def fetch_page(self, query: AccountsQuery | None = None) -> AccountsPage:
        params = (query or AccountsQuery()).to_params()
        logger.debug(f"GET {ACCOUNTS_PATH} {params}")

        try:
            response = await self.client.get(ACCOUNTS_PATH, params=params)
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise AccountsFetchError(f"Failed to fetch accounts: {e}") from e

        try:
            return AccountsPage.model_validate(response.json())
        except ValidationError as e:
            raise AccountsFetchError(f"Unexpected accounts payload: {e}") from e
        except ValueError as e:
            raise AccountsFetchError(f"Accounts response is not JSON: {e}") from e
