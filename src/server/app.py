"""MCP server wiring (FastMCP).

Why a thin module:
- Tool semantics live in `server.tools`; this file only registers them,
  forwards log lines to the host through the request `Context`, and maps
  envelopes to `CallToolResult`.
- Kept free of `from __future__ import annotations`: FastMCP inspects the
  runtime annotations to find the `Context` parameter.
"""

import logging
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from typing import Annotated, Any, AsyncIterator, Callable, Optional

from mcp.server.fastmcp import Context, FastMCP
from mcp.types import CallToolResult
from pydantic import Field

from adapters.heroui_docs import HeroUIDocsScraper
from core.config import AppSettings
from core.interfaces.docs_source import ComponentDocsSource
from server.responses import ExamplesOutput
from server.tools import (
    COMPONENT_API_TOOL,
    COMPONENT_EXAMPLES_TOOL,
    COMPONENT_LIST_TOOL,
    ComponentDocsTools,
)

logger = logging.getLogger(__name__)

SERVER_INSTRUCTIONS = (
    "Look up HeroUI components: list them, fetch code examples, "
    "or read the props/events API of a single component."
)

ComponentNameArg = Annotated[
    str,
    Field(description="The name of the HeroUI component (e.g., 'accordion', 'button')."),
]


class ContextToolLogger:
    """Sends log lines to the host (MCP logging notifications) and to the process logger."""

    def __init__(self, ctx: Optional[Context]) -> None:
        self._ctx = ctx

    async def info(self, message: str) -> None:
        logger.info(message)
        await self._send("info", message)

    async def error(self, message: str) -> None:
        logger.error(message)
        await self._send("error", message)

    async def _send(self, level: str, message: str) -> None:
        if self._ctx is None:
            return
        try:
            await self._ctx.log(level, message)
        except Exception as exc:
            # No active session (e.g. direct calls): the process log already has it.
            logger.debug("Could not forward %s log to host: %s", level, exc)


def announce_ready(settings: AppSettings) -> Callable[[Any], AbstractAsyncContextManager[dict]]:
    """Lifespan hook: logs readiness once the transport is up and a session starts."""

    @asynccontextmanager
    async def lifespan(server: Any) -> AsyncIterator[dict]:
        logger.info("%s connected and ready (docs=%s)", settings.server_name, settings.docs_url)
        yield {}

    return lifespan


def build_server(
    settings: Optional[AppSettings] = None,
    *,
    source: Optional[ComponentDocsSource] = None,
) -> FastMCP:
    """Create the FastMCP server with the three documentation tools registered."""

    settings = settings or AppSettings()
    tools = ComponentDocsTools(source or HeroUIDocsScraper(settings))
    mcp = FastMCP(
        settings.server_name,
        instructions=SERVER_INSTRUCTIONS,
        lifespan=announce_ready(settings),
    )

    @mcp.tool(
        name=COMPONENT_LIST_TOOL,
        description="Fetches a list of available HeroUI components from the documentation.",
        structured_output=False,
    )
    async def get_component_list(ctx: Context) -> CallToolResult:
        response = await tools.get_component_list(log=ContextToolLogger(ctx))
        return response.to_call_tool_result()

    @mcp.tool(
        name=COMPONENT_EXAMPLES_TOOL,
        description="Fetches code examples for a specific HeroUI component from the documentation.",
    )
    async def get_component_examples(
        componentName: ComponentNameArg, ctx: Context
    ) -> Annotated[CallToolResult, ExamplesOutput]:
        response = await tools.get_component_examples(componentName, log=ContextToolLogger(ctx))
        return response.to_call_tool_result(with_examples=True)

    @mcp.tool(
        name=COMPONENT_API_TOOL,
        description="Fetches API documentation (props, events) for a specific HeroUI component.",
        structured_output=False,
    )
    async def get_component_api(componentName: ComponentNameArg, ctx: Context) -> CallToolResult:
        response = await tools.get_component_api(componentName, log=ContextToolLogger(ctx))
        return response.to_call_tool_result()

    return mcp


def run_server(settings: Optional[AppSettings] = None, *, transport: str = "stdio") -> None:
    """Blocking: serve the tools until the host disconnects."""

    settings = settings or AppSettings()
    mcp = build_server(settings)
    logger.info("%s starting (transport=%s)", settings.server_name, transport)
    mcp.run(transport=transport)
