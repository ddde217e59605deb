"""Command line entry point (Typer).

Commands:
- `serve`: run the MCP server (stdio by default) for an agent host.
- `components` / `examples` / `api`: the same lookups from a terminal, for
  checking selectors against the live site.
- `doctor`: configuration and connectivity diagnostics.

stdout belongs to the MCP stdio transport while serving, so logging always
goes to stderr.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from adapters.heroui_docs import HeroUIDocsScraper
from adapters.json_exporter import dumps_json, export_json
from cli import doctor
from cli.ui_components import (
    build_api_panel,
    build_components_table,
    build_example_panel,
    print_banner,
)
from core.config import AppSettings
from core.errors import ScrapingError
from core.interfaces.docs_source import ComponentDocsSource

app = typer.Typer(
    no_args_is_help=True,
    help="HeroUI documentation tools: MCP server and terminal lookups.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)

_TRANSPORTS = ("stdio", "sse", "streamable-http")


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=_err_console, rich_tracebacks=True, show_path=False)],
        force=True,
    )
    # httpx logs every request at INFO.
    logging.getLogger("httpx").setLevel(logging.WARNING)


def build_source(settings: AppSettings) -> ComponentDocsSource:
    return HeroUIDocsScraper(settings)


def _emit_json(payload, output: Optional[Path]) -> None:
    if output is not None:
        path = export_json(payload=payload, output_path=output)
        _err_console.print(f"[green]Saved JSON to:[/green] {path}")
        return
    typer.echo(dumps_json(payload), nl=False)


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override HEROUI_MCP_LOG_LEVEL."),
) -> None:
    settings = AppSettings()
    configure_logging(log_level or settings.log_level)


@app.command()
def serve(
    transport: str = typer.Option("stdio", "--transport", "-t", help="stdio | sse | streamable-http"),
) -> None:
    """Run the MCP server."""

    if transport not in _TRANSPORTS:
        raise typer.BadParameter(f"transport must be one of: {', '.join(_TRANSPORTS)}")

    from server.app import run_server  # noqa: PLC0415

    run_server(AppSettings(), transport=transport)


@app.command()
def components(
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write JSON to this file."),
) -> None:
    """List every component linked from the docs navigation."""

    source = build_source(AppSettings())
    try:
        result = asyncio.run(source.list_components())
    except ScrapingError as exc:
        _err_console.print(f"[red]Error fetching component list:[/red] {exc}")
        raise typer.Exit(code=1) from exc

    if as_json or output is not None:
        _emit_json(result, output)
        return

    print_banner(_console)
    if not result:
        _console.print("[yellow]Could not find any components. The documentation structure might have changed.[/yellow]")
        return
    _console.print(build_components_table(result))


@app.command()
def examples(
    name: str = typer.Argument(..., help="Component name (e.g. 'button')."),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of panels."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write JSON to this file."),
) -> None:
    """Show the code examples of a component."""

    source = build_source(AppSettings())
    try:
        result = asyncio.run(source.get_examples(name))
    except ScrapingError as exc:
        _err_console.print(f"[red]Error fetching examples for {name}:[/red] {exc}")
        raise typer.Exit(code=1) from exc

    if as_json or output is not None:
        _emit_json(result, output)
        return

    if not result:
        _console.print(f"[yellow]No examples found for component '{name}'.[/yellow]")
        return
    for index, example in enumerate(result, start=1):
        _console.print(build_example_panel(example, index=index))


@app.command()
def api(
    name: str = typer.Argument(..., help="Component name (e.g. 'switch')."),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of tables."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write JSON to this file."),
) -> None:
    """Show the props/events API of a component."""

    source = build_source(AppSettings())
    try:
        result = asyncio.run(source.get_api(name))
    except ScrapingError as exc:
        _err_console.print(f"[red]Error fetching API for {name}:[/red] {exc}")
        raise typer.Exit(code=1) from exc

    if as_json or output is not None:
        _emit_json(result, output)
        return

    if result is None:
        _console.print(f"[yellow]No API documentation found for component '{name}'.[/yellow]")
        return
    _console.print(build_api_panel(name, result))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
