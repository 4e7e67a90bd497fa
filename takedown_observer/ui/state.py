from dataclasses import dataclass, field

from takedown_observer.components.dashboard import PageLink
from takedown_observer.domain.entities import Filters, View


@dataclass
class Container:
    """The single element every view renders into."""

    html: str = ""

    def replace(self, html: str) -> None:
        self.html = html


@dataclass
class AppState:
    path: str = "/"
    view: View | None = None
    filters: Filters = field(default_factory=Filters)
    pagination: list[PageLink] = field(default_factory=list)

    def clear_filters(self) -> None:
        self.filters.clear()
