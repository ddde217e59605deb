"""Documentation source: HeroUI (https://www.heroui.com/docs).

Flow per call:
- Build the URL from `AppSettings` (component ids are lower-cased).
- Fetch with a short-lived httpx client.
- Hand the HTML to the pure parsers in `adapters.heroui_parsers`.

Not-found pages downgrade to an empty result for examples/API; the directory
listing propagates every fetch fault.
"""

from __future__ import annotations

import logging

import httpx

from adapters.heroui_parsers import parse_component_api, parse_component_list, parse_examples
from adapters.http_client import build_async_client, fetch_page
from core.config import AppSettings
from core.domain.models import CodeExample, ComponentApi, ComponentReference
from core.errors import ScrapingError
from core.interfaces.docs_source import ComponentDocsSource

logger = logging.getLogger(__name__)


class HeroUIDocsScraper(ComponentDocsSource):
    """Scrapes component directory, examples and API tables from the HeroUI docs."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    @property
    def settings(self) -> AppSettings:
        return self._settings

    def _client(self) -> httpx.AsyncClient:
        return build_async_client(self._settings, transport=self._transport)

    async def list_components(self) -> list[ComponentReference]:
        url = self._settings.introduction_url
        try:
            async with self._client() as client:
                page = await fetch_page(client, url)
            if not page.found:
                raise ScrapingError(
                    f"Failed to fetch {url}: page not found",
                    url=url,
                    status_code=page.status_code,
                )
            components = parse_component_list(page.html, self._settings)
        except ScrapingError as exc:
            raise ScrapingError(
                f"Failed to get component list: {exc}",
                url=exc.url,
                status_code=exc.status_code,
            ) from exc
        except Exception as exc:
            raise ScrapingError(f"Failed to get component list: {exc}", url=url) from exc

        if not components:
            logger.warning("No components matched %s on %s; the site structure may have changed.", self._settings.components_prefix, url)
        return components

    async def get_examples(self, component_id: str) -> list[CodeExample]:
        url = self._settings.component_url(component_id)
        try:
            async with self._client() as client:
                page = await fetch_page(client, url)
            if not page.found:
                logger.info("Component page not found for %r (%s)", component_id, url)
                return []
            examples = parse_examples(page.html)
        except ScrapingError:
            raise
        except Exception as exc:
            raise ScrapingError(f"Failed to get examples for {component_id}: {exc}", url=url) from exc

        if not examples:
            logger.warning("No examples found for %r using the current selectors; the page structure might differ.", component_id)
        return examples

    async def get_api(self, component_id: str) -> ComponentApi | None:
        url = self._settings.component_url(component_id)
        try:
            async with self._client() as client:
                page = await fetch_page(client, url)
            if not page.found:
                logger.info("Component page not found for %r (%s)", component_id, url)
                return None
            api = parse_component_api(page.html)
        except ScrapingError:
            raise
        except Exception as exc:
            raise ScrapingError(f"Failed to get API for {component_id}: {exc}", url=url) from exc

        if api is None:
            logger.warning("No API information found for %r using the current selectors.", component_id)
        return api
