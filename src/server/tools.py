"""Tool adapter: the three operations exposed to the MCP host.

Control contract (same for every tool):
1. info log with the operation name and its arguments.
2. validate arguments, then call the documentation source.
3. empty/None result -> success envelope with an explanation text.
4. anything raised -> error log + error envelope. Nothing escapes.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Protocol

from core.interfaces.docs_source import ComponentDocsSource
from server.responses import (
    EMPTY_COMPONENT_LIST_TEXT,
    ToolResponse,
    format_component_api,
    format_component_list,
    no_api_text,
    no_examples_text,
)

logger = logging.getLogger(__name__)

COMPONENT_LIST_TOOL = "get_component_list"
COMPONENT_EXAMPLES_TOOL = "get_component_examples"
COMPONENT_API_TOOL = "get_component_api"


class ToolLogger(Protocol):
    """Log channel towards the host (two severities)."""

    async def info(self, message: str) -> None: ...

    async def error(self, message: str) -> None: ...


class ProcessToolLogger:
    """Fallback channel: the process logger only."""

    async def info(self, message: str) -> None:
        logger.info(message)

    async def error(self, message: str) -> None:
        logger.error(message)


def serialize_arguments(arguments: dict[str, Any]) -> str:
    return json.dumps(arguments, ensure_ascii=False, sort_keys=True, default=str)


class InvalidArgumentError(ValueError):
    pass


def require_component_name(value: Any) -> str:
    if not isinstance(value, str):
        raise InvalidArgumentError("componentName must be a string")
    name = value.strip()
    if not name:
        raise InvalidArgumentError("componentName must be a non-empty string")
    return name


class ComponentDocsTools:
    """Runs documentation lookups and shapes every outcome into a `ToolResponse`."""

    def __init__(self, source: ComponentDocsSource) -> None:
        self._source = source

    async def get_component_list(self, *, log: ToolLogger | None = None) -> ToolResponse:
        log = log or ProcessToolLogger()
        await log.info(f"Executing {COMPONENT_LIST_TOOL} tool with arguments: {serialize_arguments({})}")
        try:
            components = await self._source.list_components()
        except Exception as exc:
            await log.error(f"Error in {COMPONENT_LIST_TOOL} tool: {exc}")
            return ToolResponse.error(f"Error fetching component list: {exc}")

        if not components:
            return ToolResponse.text(EMPTY_COMPONENT_LIST_TEXT)
        return ToolResponse.text(format_component_list(components))

    async def get_component_examples(self, component_name: Any, *, log: ToolLogger | None = None) -> ToolResponse:
        log = log or ProcessToolLogger()
        await log.info(
            f"Executing {COMPONENT_EXAMPLES_TOOL} tool with arguments: "
            f"{serialize_arguments({'componentName': component_name})}"
        )
        try:
            name = require_component_name(component_name)
            examples = await self._source.get_examples(name)
        except Exception as exc:
            await log.error(f"Error in {COMPONENT_EXAMPLES_TOOL} tool for {component_name!r}: {exc}")
            return ToolResponse.error(f"Error fetching examples for {component_name}: {exc}")

        if not examples:
            return ToolResponse.text(no_examples_text(name))
        return ToolResponse.examples(examples)

    async def get_component_api(self, component_name: Any, *, log: ToolLogger | None = None) -> ToolResponse:
        log = log or ProcessToolLogger()
        await log.info(
            f"Executing {COMPONENT_API_TOOL} tool with arguments: "
            f"{serialize_arguments({'componentName': component_name})}"
        )
        try:
            name = require_component_name(component_name)
            api = await self._source.get_api(name)
        except Exception as exc:
            await log.error(f"Error in {COMPONENT_API_TOOL} tool for {component_name!r}: {exc}")
            return ToolResponse.error(f"Error fetching API for {component_name}: {exc}")

        if api is None or api.is_empty:
            return ToolResponse.text(no_api_text(name))
        return ToolResponse.text(format_component_api(name, api))
