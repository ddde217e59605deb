"""Shared fixtures: static HTML pages, mock HTTP transport and fake sources."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

import httpx
import pytest

from core.config import AppSettings
from core.domain.models import CodeExample, ComponentApi, ComponentReference


# ---------------------------------------------------------------------------
# HTML fixtures
# ---------------------------------------------------------------------------

INTRO_HTML = """
<html><body>
<nav>
  <a href="/docs/guide/introduction">Introduction</a>
  <a href="/docs/components/">Components</a>
  <a href="/docs/components/accordion">Accordion</a>
  <a href="/docs/components/button">
      Button
  </a>
  <a href="https://www.heroui.com/docs/components/switch">Switch</a>
  <a href="https://example.com/docs/components/fake">Fake</a>
  <a href="/docs/components/input"></a>
  <a href="/blog/components/post">Blog post</a>
</nav>
</body></html>
"""

NO_COMPONENTS_HTML = """
<html><body><nav><a href="/docs/guide/introduction">Introduction</a></nav></body></html>
"""

BUTTON_HTML = """
<html><body><main>
  <h2>Installation</h2>
  <p>npm install @heroui/button</p>
  <h3>Basic Usage</h3>
  <div data-slot="component-preview">
    <div class="preview-canvas"><button>Click</button></div>
    <pre><code class="language-jsx">
&lt;Button&gt;Click&lt;/Button&gt;
</code></pre>
  </div>
  <h3>Button Props</h3>
  <table>
    <thead><tr><th>Attribute</th><th>Type</th><th>Description</th><th>Default</th></tr></thead>
    <tbody>
      <tr><td>size</td><td>sm | md | lg</td><td>The button size</td><td>md</td></tr>
      <tr><td>isDisabled</td><td>boolean</td></tr>
      <tr><td>orphan</td></tr>
    </tbody>
  </table>
  <h3>Button Events</h3>
  <table>
    <tbody>
      <tr><td>onPress</td><td>(e: PressEvent) =&gt; void</td><td>Handler called on press</td></tr>
    </tbody>
  </table>
</main></body></html>
"""

ISOLATION_HTML = """
<html><body><main>
  <h3>Sizes</h3>
  <div data-slot="component-preview"><div>Preview only, no code</div></div>
  <h3>Colors</h3>
  <div data-slot="component-preview"><pre><code class="hljs language-tsx">const color = "primary";</code></pre></div>
  <div data-slot="component-preview"><pre><code>   </code></pre></div>
  <div data-slot="component-preview"><pre><code>plain()</code></pre></div>
</main></body></html>
"""

SWITCH_HTML = """
<html><body><main>
  <h3>Props</h3>
  <table>
    <thead><tr><th>Attribute</th><th>Type</th><th>Description</th><th>Default</th></tr></thead>
    <tbody>
      <tr><td>isSelected</td><td>boolean</td><td>Whether selected</td><td></td></tr>
    </tbody>
  </table>
</main></body></html>
"""

NO_API_HTML = """
<html><body><main>
  <h3>Slots</h3>
  <table><tbody><tr><td>base</td><td>The base slot</td></tr></tbody></table>
  <h3>Props</h3>
  <p>Props are documented below.</p>
  <table><tbody><tr><td>ignored</td><td>string</td></tr></tbody></table>
</main></body></html>
"""


# ---------------------------------------------------------------------------
# HTTP
# ---------------------------------------------------------------------------


def make_transport(pages: dict[str, str | int], seen: list[str] | None = None) -> httpx.MockTransport:
    """Serve `pages` by path: a string is a 200 body, an int is a bare status code.

    Unknown paths answer 404.
    """

    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request.url.path)
        page = pages.get(request.url.path, 404)
        if isinstance(page, int):
            return httpx.Response(page)
        return httpx.Response(200, text=page, headers={"Content-Type": "text/html; charset=utf-8"})

    return httpx.MockTransport(handler)


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings()


@pytest.fixture
def site_pages() -> dict[str, str | int]:
    return {
        "/docs/guide/introduction": INTRO_HTML,
        "/docs/components/button": BUTTON_HTML,
        "/docs/components/switch": SWITCH_HTML,
        "/docs/components/avatar": NO_API_HTML,
        "/docs/components/broken": 500,
    }


# ---------------------------------------------------------------------------
# Fakes
# ---------------------------------------------------------------------------


@dataclass
class FakeSource:
    components: list[ComponentReference] = field(default_factory=list)
    examples: list[CodeExample] = field(default_factory=list)
    api: ComponentApi | None = None
    error: Exception | None = None
    calls: list[tuple[str, str | None]] = field(default_factory=list)

    async def list_components(self) -> list[ComponentReference]:
        self.calls.append(("list_components", None))
        if self.error is not None:
            raise self.error
        return self.components

    async def get_examples(self, component_id: str) -> list[CodeExample]:
        self.calls.append(("get_examples", component_id))
        if self.error is not None:
            raise self.error
        return self.examples

    async def get_api(self, component_id: str) -> ComponentApi | None:
        self.calls.append(("get_api", component_id))
        if self.error is not None:
            raise self.error
        return self.api


class RecordingLogger:
    def __init__(self) -> None:
        self.records: list[tuple[str, str]] = []

    async def info(self, message: str) -> None:
        self.records.append(("info", message))

    async def error(self, message: str) -> None:
        self.records.append(("error", message))

    def levels(self) -> list[str]:
        return [level for level, _ in self.records]


@pytest.fixture
def make_source() -> Callable[..., FakeSource]:
    return FakeSource


@pytest.fixture
def recorder() -> RecordingLogger:
    return RecordingLogger()
