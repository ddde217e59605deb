"""Core errors.

Why a single fault kind:
- Every transport problem (bad status, connection failure) reaches callers
  as `ScrapingError`, so the tool layer only needs one `except` branch.
- The status code travels with the error: "page missing" is decided from it,
  never from the message text.
"""

from __future__ import annotations


NOT_FOUND_STATUS_CODES = frozenset({404, 410})


class ScrapingError(Exception):
    """Fetching or parsing a documentation page failed."""

    def __init__(self, message: str, *, url: str | None = None, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.url = url
        self.status_code = status_code

    @property
    def not_found(self) -> bool:
        return self.status_code in NOT_FOUND_STATUS_CODES

    def __str__(self) -> str:
        return self.message
