"""
Dashboard component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PageLink:
    """One pagination control: a page number or the PREV/NEXT arrows."""

    label: str
    page: int
    active: bool = False
    disabled: bool = False

    @property
    def css_class(self) -> str:
        classes = ["page-link"]
        if self.active:
            classes.append("active")
        if self.disabled:
            classes.append("disabled")
        return " ".join(classes)
