"""Contract for component documentation sources.

Why Protocol:
- Defines a structural contract (duck typing) without rigid inheritance.
- The tool layer can be tested with an in-memory fake instead of the live
  scraper.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import CodeExample, ComponentApi, ComponentReference


@runtime_checkable
class ComponentDocsSource(Protocol):
    """Minimal contract for a documentation backend.

    Design rules:
    - Every method is async because it typically does I/O (HTTP).
    - "Nothing found" is an empty list / None; faults raise `ScrapingError`.
    """

    async def list_components(self) -> list[ComponentReference]:
        """Return every component linked from the docs navigation, in page order."""

        ...

    async def get_examples(self, component_id: str) -> list[CodeExample]:
        """Return the code examples of a component ([] when the page does not exist)."""

        ...

    async def get_api(self, component_id: str) -> ComponentApi | None:
        """Return the props/events tables of a component (None when not found)."""

        ...
