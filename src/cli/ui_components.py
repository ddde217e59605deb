"""CLI UI components (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- Tables/panels are reused by the lookup commands and by `doctor`.
"""

from __future__ import annotations

from typing import Sequence

from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

from core.domain.models import CodeExample, ComponentApi, ComponentReference


def print_banner(console: Console) -> None:
    """Print the welcome banner (skipped in JSON mode)."""

    title = Text("HeroUI Docs MCP", style="bold cyan")
    subtitle = Text("Components • Examples • API tables", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_components_table(components: Sequence[ComponentReference]) -> Table:
    table = Table(title=f"HeroUI Components ({len(components)})")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Component", style="cyan", no_wrap=True)
    table.add_column("URL", style="magenta")
    for index, component in enumerate(components, start=1):
        table.add_row(str(index), component.name, component.url)
    return table


def build_example_panel(example: CodeExample, *, index: int) -> Panel:
    """One panel per example, code highlighted with its detected language."""

    title = example.title or f"Example {index}"
    code = Syntax(example.code, example.language, theme="monokai", word_wrap=True)
    return Panel(code, title=Text(title, style="bold yellow"), subtitle=example.language, border_style="yellow")


def _build_props_table(api: ComponentApi) -> Table:
    table = Table(title="Props")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Type", style="green")
    table.add_column("Default", style="magenta")
    table.add_column("Description", style="white")
    for prop in api.props:
        table.add_row(prop.name, prop.type, prop.default_value or "", prop.description or "")
    return table


def _build_events_table(api: ComponentApi) -> Table:
    table = Table(title="Events")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Type", style="green")
    table.add_column("Description", style="white")
    for event in api.events:
        table.add_row(event.name, event.type, event.description or "")
    return table


def build_api_panel(component_name: str, api: ComponentApi) -> Panel:
    parts: list[Table] = []
    if api.props:
        parts.append(_build_props_table(api))
    if api.events:
        parts.append(_build_events_table(api))
    return Panel(Group(*parts), title=Text(f"API for {component_name}", style="bold cyan"), border_style="cyan")
