"""
Country name adapter.

Resolves ISO 3166-1 alpha-2 codes to display names. Codes pycountry does not
know are shown as given.
"""

from __future__ import annotations

from functools import lru_cache

import pycountry


@lru_cache(maxsize=512)
def country_name(code: str) -> str:
    if not code:
        return code
    try:
        country = pycountry.countries.get(alpha_2=code.upper())
    except LookupError:
        country = None
    if country is None:
        return code
    return getattr(country, "common_name", None) or country.name


def sort_by_name(codes: list[str]) -> list[str]:
    """Order country codes by their display name."""
    return sorted(codes, key=lambda c: country_name(c).casefold())
