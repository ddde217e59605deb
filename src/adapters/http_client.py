"""httpx wrapper.

Why a wrapper:
- Standardizes client defaults (redirects, optional timeout/User-Agent).
- Makes testing easy: a `httpx.MockTransport` can be injected instead of the network.
- Classifies responses once: "page missing" is a tagged status, other
  failures become `ScrapingError`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import httpx

from core.config import AppSettings
from core.errors import NOT_FOUND_STATUS_CODES, ScrapingError


class PageStatus(str, Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class FetchedPage:
    """Result of a GET that did not fail at transport level."""

    url: str
    status_code: int
    status: PageStatus
    html: str = ""

    @property
    def found(self) -> bool:
        return self.status is PageStatus.FOUND


def build_async_client(
    settings: AppSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with the project defaults.

    Why a builder:
    - Centralizes timeouts/headers so every scraper behaves the same.
    - Without explicit settings, the transport defaults are kept untouched.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {}
    if settings.user_agent:
        headers["User-Agent"] = settings.user_agent

    kwargs: dict[str, object] = {}
    if settings.http_timeout_seconds is not None:
        kwargs["timeout"] = httpx.Timeout(settings.http_timeout_seconds)
    if transport is not None:
        kwargs["transport"] = transport

    return httpx.AsyncClient(follow_redirects=True, headers=headers, **kwargs)


async def fetch_page(client: httpx.AsyncClient, url: str) -> FetchedPage:
    """GET `url` and classify the outcome.

    - 2xx: FOUND with the body text.
    - 404/410: NOT_FOUND (no body).
    - Any other status, connection error or invalid URL: `ScrapingError`.
    """

    try:
        response = await client.get(url)
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise ScrapingError(f"Network error fetching {url}: {exc}", url=url) from exc

    if response.status_code in NOT_FOUND_STATUS_CODES:
        return FetchedPage(url=url, status_code=response.status_code, status=PageStatus.NOT_FOUND)

    if not response.is_success:
        reason = response.reason_phrase or f"HTTP {response.status_code}"
        raise ScrapingError(
            f"Failed to fetch {url}: {reason}",
            url=url,
            status_code=response.status_code,
        )

    return FetchedPage(
        url=str(response.url),
        status_code=response.status_code,
        status=PageStatus.FOUND,
        html=response.text,
    )
