"""
Dashboard component unit tests.
"""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from takedown_observer.adapters.countries import country_name, sort_by_name
from takedown_observer.components.dashboard import (
    ALL_COUNTRIES_OPTION,
    NO_ACCOUNTS_ROW,
    PageLink,
    account_row,
    account_rows,
    build_pagination,
    country_options,
    find_link,
    render_pagination,
)
from takedown_observer.domain.entities import Account


class IsoTimestamps:
    def format(self, dt: datetime | None) -> str:
        return dt.isoformat() if dt else "N/A"


def make_account(name: str = "someone", countries: list[str] | None = None) -> Account:
    return Account(
        name=name,
        countries=["DE"] if countries is None else countries,
        last_reported_at=datetime(2025, 1, 1, tzinfo=UTC),
    )


# --- Countries ---


class TestCountries:
    def test_known_codes(self) -> None:
        assert country_name("DE") == "Germany"
        assert country_name("fr") == "France"

    @pytest.mark.parametrize("code", ["XX", "", "EU"])
    def test_unknown_codes_pass_through(self, code: str) -> None:
        assert country_name(code) == code

    def test_sort_by_name(self) -> None:
        assert sort_by_name(["US", "DE", "FR"]) == ["FR", "DE", "US"]


# --- Rows ---


class TestAccountRows:
    def test_row_content(self) -> None:
        row = account_row(make_account(countries=["DE", "FR"]), IsoTimestamps())

        assert '<td class="username-col">@someone</td>' in row
        assert '<span class="country-item">Germany</span> <span class="country-item">France</span>' in row
        assert '<td class="date-col">2025-01-01T00:00:00+00:00</td>' in row

    def test_one_row_per_account(self) -> None:
        accounts = [make_account(f"user{i}") for i in range(4)]

        html = account_rows(accounts, IsoTimestamps())

        assert html.count("<tr") == 4

    def test_empty(self) -> None:
        assert account_rows([], IsoTimestamps()) == NO_ACCOUNTS_ROW

    def test_escapes_name(self) -> None:
        row = account_row(make_account(name='a"<b>'), IsoTimestamps())
        assert "@a&quot;&lt;b&gt;" in row


# --- Country options ---


class TestCountryOptions:
    def test_all_countries_first_then_by_name(self) -> None:
        html = country_options(["US", "DE", "FR"])

        assert html.startswith(ALL_COUNTRIES_OPTION)
        assert html.index("France") < html.index("Germany") < html.index("United States")
        assert " selected" not in html

    def test_selected(self) -> None:
        html = country_options(["US", "DE"], selected="US")

        assert '<option value="US" selected>United States</option>' in html
        assert '<option value="DE">Germany</option>' in html

    def test_selected_missing_from_list(self) -> None:
        assert " selected" not in country_options(["DE"], selected="FR")


# --- Pagination ---


class TestPagination:
    def test_single_page(self) -> None:
        assert build_pagination(1, 1) == [
            PageLink("[PREV]", 0, disabled=True),
            PageLink("[1]", 1, active=True),
            PageLink("[NEXT]", 2, disabled=True),
        ]

    def test_middle_page(self) -> None:
        assert build_pagination(3, 5) == [
            PageLink("[PREV]", 2),
            PageLink("[2]", 2),
            PageLink("[3]", 3, active=True),
            PageLink("[4]", 4),
            PageLink("[NEXT]", 4),
        ]

    def test_last_page(self) -> None:
        links = build_pagination(5, 5)

        assert [link.label for link in links] == ["[PREV]", "[4]", "[5]", "[NEXT]"]
        assert links[-1].disabled

    def test_no_results(self) -> None:
        links = build_pagination(1, 0)

        assert links[0].disabled and links[-1].disabled

    def test_render(self) -> None:
        html = render_pagination(build_pagination(1, 2))

        assert html == (
            '<a href="#" class="page-link disabled" data-page="0">[PREV]</a>'
            '<a href="#" class="page-link active" data-page="1">[1]</a>'
            '<a href="#" class="page-link" data-page="2">[2]</a>'
            '<a href="#" class="page-link" data-page="2">[NEXT]</a>'
        )

    def test_find_link(self) -> None:
        links = build_pagination(1, 2)

        assert find_link(links, 2) == PageLink("[2]", 2)
        assert find_link(links, 0) is None
        assert find_link(links, 7) is None
