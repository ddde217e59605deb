"""Tool response envelopes and text formatting.

Why a local envelope instead of returning MCP types directly:
- The tool layer stays testable without an MCP session.
- Formatting rules live in one place; `to_call_tool_result` is the only
  function that knows the wire types.
"""

from __future__ import annotations

from typing import Literal, Sequence, Union

from mcp.types import CallToolResult, TextContent
from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from core.domain.models import CodeExample, ComponentApi, ComponentReference


COMPONENT_LIST_BANNER = "Available HeroUI Components:"
EMPTY_COMPONENT_LIST_TEXT = "Could not find any components. The documentation structure might have changed."


class TextItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["text"] = "text"
    text: str


class CodeItem(BaseModel):
    """One code example as a discrete structured entry."""

    model_config = ConfigDict(frozen=True)

    type: Literal["code"] = "code"
    title: str | None = None
    code: str
    language: str

    @classmethod
    def from_example(cls, example: CodeExample) -> "CodeItem":
        return cls(title=example.title, code=example.code, language=example.language)

    def to_example(self) -> CodeExample:
        return CodeExample(title=self.title, code=self.code, language=self.language)

    def to_markdown(self) -> str:
        block = f"```{self.language}\n{self.code}\n```"
        if self.title:
            return f"### {self.title}\n\n{block}"
        return block


ContentItem = Union[TextItem, CodeItem]


class ExamplesOutput(BaseModel):
    """Structured result of the examples tool, advertised as its output schema."""

    examples: list[CodeExample] = Field(default_factory=list)


class ToolResponse(BaseModel):
    """Envelope returned by every tool: success-with-content, success-with-explanation or error."""

    model_config = ConfigDict(frozen=True)

    content: list[ContentItem] = Field(default_factory=list)
    is_error: bool = False

    @classmethod
    def text(cls, text: str) -> "ToolResponse":
        return cls(content=[TextItem(text=text)])

    @classmethod
    def error(cls, text: str) -> "ToolResponse":
        return cls(content=[TextItem(text=text)], is_error=True)

    @classmethod
    def examples(cls, examples: Sequence[CodeExample]) -> "ToolResponse":
        return cls(content=[CodeItem.from_example(ex) for ex in examples])

    def to_call_tool_result(self, *, with_examples: bool = False) -> CallToolResult:
        """Map to the MCP wire type; code items are also exposed as structured content.

        `with_examples` always attaches an `ExamplesOutput` (possibly empty), so a
        tool that advertises that output schema never returns content that fails it.
        """

        content: list[TextContent] = []
        code_items: list[CodeItem] = []
        for item in self.content:
            if isinstance(item, CodeItem):
                code_items.append(item)
                content.append(TextContent(type="text", text=item.to_markdown()))
            else:
                content.append(TextContent(type="text", text=item.text))

        structured = None
        if with_examples or code_items:
            output = ExamplesOutput(examples=[item.to_example() for item in code_items])
            structured = output.model_dump(mode="json")

        return CallToolResult(content=content, structuredContent=structured, isError=self.is_error)


def format_component_list(components: Sequence[ComponentReference]) -> str:
    lines = "\n".join(f"- {c.name} ({c.url})" for c in components)
    return f"{COMPONENT_LIST_BANNER}\n{lines}"


def format_component_api(component_name: str, api: ComponentApi) -> str:
    """Markdown-ish summary: banner, `**Props:**` and `**Events:**` sections."""

    text = f"API for {component_name}:\n\n"

    if api.props:
        lines = []
        for prop in api.props:
            line = f"- `{prop.name}`: `{prop.type}`"
            if prop.default_value:
                line += f" (default: `{prop.default_value}`)"
            if prop.description:
                line += f" - {prop.description}"
            lines.append(line)
        text += "**Props:**\n" + "\n".join(lines) + "\n\n"

    if api.events:
        lines = []
        for event in api.events:
            line = f"- `{event.name}`: `{event.type}`"
            if event.description:
                line += f" - {event.description}"
            lines.append(line)
        text += "**Events:**\n" + "\n".join(lines)

    return text.strip() or "No API details extracted."


def no_examples_text(component_name: str) -> str:
    return (
        f"No examples found for component '{component_name}'. "
        "Check the component name or the documentation structure."
    )


def no_api_text(component_name: str) -> str:
    return (
        f"No API documentation found for component '{component_name}'. "
        "Check the component name or the documentation structure."
    )
