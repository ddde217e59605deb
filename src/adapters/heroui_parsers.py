"""HTML parsers for the HeroUI documentation site.

Why pure functions:
- The selectors are coupled to markup we do not control; keeping them as
  `html text -> typed result` functions lets tests run against static
  fixtures without network access.
- A selector that matches nothing yields an empty result, never an exception.

Selector assumptions (single set, no fallbacks between site versions):
- Directory: every `<a href>` under the components path prefix.
- Examples: `div[data-slot="component-preview"]` containing `pre code`.
- API: a heading immediately followed by a `<table>`.
"""

from __future__ import annotations

from urllib.parse import urljoin, urlparse

from bs4 import BeautifulSoup, Tag

from core.config import AppSettings
from core.domain.models import (
    DEFAULT_CODE_LANGUAGE,
    ApiEvent,
    ApiProperty,
    CodeExample,
    ComponentApi,
    ComponentReference,
)


HEADING_TAGS = ["h1", "h2", "h3", "h4", "h5", "h6"]
PREVIEW_SELECTOR = 'div[data-slot="component-preview"]'
_LANGUAGE_CLASS_PREFIXES = ("language-", "lang-")


def _soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html or "", "html.parser")


def _clean_text(tag: Tag) -> str:
    return " ".join(tag.get_text().split())


def _optional(value: str) -> str | None:
    return value or None


def parse_component_list(html: str, settings: AppSettings) -> list[ComponentReference]:
    """Extract the component directory from the introduction page.

    Relative links are resolved against the configured origin; links to other
    hosts and the components root link itself are ignored.
    """

    origin = settings.origin
    origin_host = urlparse(origin).netloc.lower()
    prefix = settings.components_prefix
    root = prefix.rstrip("/")

    components: list[ComponentReference] = []
    for link in _soup(html).find_all("a", href=True):
        href = str(link.get("href") or "").strip()
        if not href:
            continue

        absolute = urljoin(f"{origin}/", href)
        parsed = urlparse(absolute)
        if parsed.scheme not in ("http", "https") or parsed.netloc.lower() != origin_host:
            continue
        if not parsed.path.startswith(prefix) or parsed.path.rstrip("/") == root:
            continue

        name = _clean_text(link)
        if not name:
            continue
        components.append(ComponentReference(name=name, url=absolute))

    return components


def _detect_language(code_el: Tag) -> str:
    """Language from a `language-xxx` style class on the code element itself."""

    classes = [str(c) for c in (code_el.get("class") or [])]

    for cls in classes:
        for prefix in _LANGUAGE_CLASS_PREFIXES:
            if cls.startswith(prefix) and len(cls) > len(prefix):
                return cls[len(prefix):]

    for cls in classes:
        if "-" in cls:
            suffix = cls.rsplit("-", 1)[1]
            if suffix:
                return suffix

    return DEFAULT_CODE_LANGUAGE


def _example_title(container: Tag) -> str | None:
    heading = container.find_previous_sibling(HEADING_TAGS)
    if heading is None:
        heading = container.find(HEADING_TAGS)
    if heading is None:
        return None
    return _optional(_clean_text(heading))


def parse_examples(html: str) -> list[CodeExample]:
    """Extract code examples from a component page, in document order.

    A preview block without a `pre code` element (or with blank code) is skipped
    without affecting the others.
    """

    examples: list[CodeExample] = []
    for container in _soup(html).select(PREVIEW_SELECTOR):
        code_el = container.select_one("pre code")
        if code_el is None:
            continue

        code = code_el.get_text().strip()
        if not code:
            continue

        examples.append(
            CodeExample(
                title=_example_title(container),
                code=code,
                language=_detect_language(code_el),
            )
        )

    return examples


def _body_rows(table: Tag) -> list[Tag]:
    body = table.find("tbody")
    if body is not None:
        return body.find_all("tr")
    return [tr for tr in table.find_all("tr") if tr.find("td") is not None]


def _row_cells(row: Tag) -> list[str]:
    return [_clean_text(td) for td in row.find_all("td")]


def _parse_props(table: Tag) -> list[ApiProperty]:
    props: list[ApiProperty] = []
    for row in _body_rows(table):
        cells = _row_cells(row)
        if len(cells) < 2 or not cells[0] or not cells[1]:
            continue
        props.append(
            ApiProperty(
                name=cells[0],
                type=cells[1],
                description=_optional(cells[2]) if len(cells) > 2 else None,
                default_value=_optional(cells[3]) if len(cells) > 3 else None,
            )
        )
    return props


def _parse_events(table: Tag) -> list[ApiEvent]:
    events: list[ApiEvent] = []
    for row in _body_rows(table):
        cells = _row_cells(row)
        if len(cells) < 2 or not cells[0] or not cells[1]:
            continue
        events.append(
            ApiEvent(
                name=cells[0],
                type=cells[1],
                description=_optional(cells[2]) if len(cells) > 2 else None,
            )
        )
    return events


def parse_component_api(html: str) -> ComponentApi | None:
    """Extract props/events tables; None when neither section yields a row."""

    props: list[ApiProperty] = []
    events: list[ApiEvent] = []

    for heading in _soup(html).find_all(HEADING_TAGS):
        table = heading.find_next_sibling()
        if table is None or table.name != "table":
            continue

        title = _clean_text(heading).lower()
        if "props" in title:
            props.extend(_parse_props(table))
        elif "events" in title:
            events.extend(_parse_events(table))

    api = ComponentApi(props=props, events=events)
    if api.is_empty:
        return None
    return api
