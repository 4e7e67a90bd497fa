"""
Templates component - Data models.
"""

from __future__ import annotations

from typing import Literal

TemplateName = Literal["landing", "dashboard", "about", "related-work"]

TEMPLATE_NAMES: tuple[TemplateName, ...] = ("landing", "dashboard", "about", "related-work")


def template_path(name: TemplateName, static_prefix: str = "/static") -> str:
    """URL path of a page template under the static prefix."""
    return f"{static_prefix.rstrip('/')}/pages/{name}.html"
