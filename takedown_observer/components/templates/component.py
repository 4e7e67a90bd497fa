"""
Templates component - page fragment cache and placeholder substitution.

Templates are static HTML fragments with `{{placeholder}}` tokens. Filling a
template is plain string replacement, not a templating engine: each token is
replaced once, at its first occurrence, and unknown tokens stay in place.
"""

from __future__ import annotations

import asyncio
import logging
import re
from collections.abc import Mapping

import httpx

from takedown_observer.domain.errors import TemplateNotFoundError

from .models import TEMPLATE_NAMES, TemplateName, template_path

logger = logging.getLogger(__name__)

_TOKEN = re.compile(r"\{\{([^{}]+)\}\}")


def fill(template: str, values: Mapping[str, object]) -> str:
    """
    Single pass over the template: each known key replaces its first token.

    Inserted values are never scanned again, so text that looks like a
    token cannot claim a later placeholder.
    """
    filled: set[str] = set()

    def substitute(match: re.Match[str]) -> str:
        key = match.group(1)
        if key not in values or key in filled:
            return match.group(0)
        filled.add(key)
        return str(values[key])

    return _TOKEN.sub(substitute, template)


class TemplateCache:
    """Holds the page templates for the lifetime of the app."""

    def __init__(self, client: httpx.AsyncClient, static_prefix: str = "/static") -> None:
        self.client = client
        self.static_prefix = static_prefix
        self._templates: dict[str, str] = {}

    async def _fetch(self, name: TemplateName) -> str:
        response = await self.client.get(template_path(name, self.static_prefix))
        response.raise_for_status()
        return response.text

    async def load(self) -> None:
        """
        Fetch all page templates at once.

        Either every template loads or none does; a failure is logged and
        each view that needs a template then renders the error view.
        """
        try:
            texts = await asyncio.gather(*(self._fetch(name) for name in TEMPLATE_NAMES))
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(f"Error loading templates: {e}")
            return

        self._templates = dict(zip(TEMPLATE_NAMES, texts, strict=True))
        logger.info(f"Loaded {len(self._templates)} templates")

    def get(self, name: TemplateName) -> str:
        try:
            return self._templates[name]
        except KeyError:
            raise TemplateNotFoundError(name) from None

    def __contains__(self, name: object) -> bool:
        return name in self._templates
