from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Any

import httpx
import pytest

from takedown_observer.app_shell.config import STATIC_DIR, Settings
from takedown_observer.components.templates import TEMPLATE_NAMES

PAGE_TEMPLATES = {name: (STATIC_DIR / "pages" / f"{name}.html").read_text() for name in TEMPLATE_NAMES}

LATEST_REPORT = datetime(2025, 1, 10, 12, 0, tzinfo=UTC)

PayloadFactory = Callable[..., dict[str, Any]]


def build_payload(
    count: int = 3,
    total_pages: int = 1,
    current_page: int = 1,
    countries: list[str] | None = None,
) -> dict[str, Any]:
    """An /api/accounts body in the shape the accounts service sends."""
    countries = ["DE", "FR", "US"] if countries is None else countries
    accounts = [
        {
            "id": str(1000 + i),
            "name": f"user{i}",
            "countries": countries[: (i % len(countries)) + 1] if countries else [],
            "last_reported_at": (LATEST_REPORT - timedelta(hours=i)).strftime("%Y-%m-%dT%H:%M:%SZ"),
            "report_count": i + 1,
            "data_format_version": "1.0",
        }
        for i in range(count)
    ]
    return {
        "accounts": accounts,
        "totalCount": max(count, (total_pages - 1) * 20 + count),
        "currentPage": current_page,
        "totalPages": total_pages,
        "uniqueCountries": countries,
    }


class FakeBackend:
    """
    In-memory stand-in for the static host and the accounts API.

    Records every request so tests can assert on query parameters.
    """

    def __init__(self) -> None:
        self.templates: dict[str, str] = dict(PAGE_TEMPLATES)
        self.accounts_payload: dict[str, Any] = build_payload()
        self.accounts_status = 200
        self.accounts_error: Exception | None = None
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        if path.startswith("/static/pages/"):
            name = path.removeprefix("/static/pages/").removesuffix(".html")
            if name in self.templates:
                return httpx.Response(200, text=self.templates[name])
            return httpx.Response(404)

        if path == "/api/accounts":
            if self.accounts_error is not None:
                raise self.accounts_error
            if self.accounts_status != 200:
                return httpx.Response(self.accounts_status, text="Database error")
            return httpx.Response(200, json=self.accounts_payload)

        return httpx.Response(404)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def account_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path == "/api/accounts"]

    @property
    def last_params(self) -> dict[str, str]:
        return dict(self.account_requests[-1].url.params)


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def payload() -> PayloadFactory:
    return build_payload


@pytest.fixture
def settings(monkeypatch: pytest.MonkeyPatch) -> Settings:
    for var in (
        "OBSERVER_BASE_URL",
        "OBSERVER_STATIC_PREFIX",
        "OBSERVER_TIMEZONE",
        "OBSERVER_STATIC_DIR",
        "OBSERVER_CORS_ORIGINS",
    ):
        monkeypatch.delenv(var, raising=False)
    return Settings()
