"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.heroui_docs import HeroUIDocsScraper
from adapters.http_client import build_async_client, fetch_page
from core.config import AppSettings

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            page = await fetch_page(client, settings.introduction_url)
        return page.found, f"HTTP {page.status_code}"
    except Exception as exc:
        return False, str(exc)


async def _check_selectors(settings: AppSettings) -> tuple[bool, str]:
    """Selectors still match the live navigation (site drift shows up as 0 components)."""

    try:
        components = await HeroUIDocsScraper(settings).list_components()
    except Exception as exc:
        return False, str(exc)
    if not components:
        return False, "0 components matched; the site structure may have changed"
    return True, f"{len(components)} components"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="HeroUI Docs MCP Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    table.add_row("Docs URL", "OK", settings.docs_url)
    table.add_row("Components prefix", "OK", settings.components_prefix)
    timeout = f"{settings.http_timeout_seconds}s" if settings.http_timeout_seconds else "httpx default"
    table.add_row("HTTP timeout", "OK", timeout)

    # Connectivity (best-effort)
    ok_http, detail_http = asyncio.run(_check_http(settings))
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    ok_sel, detail_sel = asyncio.run(_check_selectors(settings)) if ok_http else (False, "skipped")
    table.add_row("Component selectors", "OK" if ok_sel else "FAIL", detail_sel)

    _console.print(table)

    if ok_http and not ok_sel:
        _console.print(
            "\n[yellow]Note:[/yellow] The introduction page loads but no component links matched. "
            "Check HEROUI_MCP_DOCS_PATH / HEROUI_MCP_COMPONENTS_PATH."
        )
