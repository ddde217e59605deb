"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Strict validation and self-contained documentation (Field) without coupling
  the Core to I/O libraries.
- The same models serialize straight into tool output and CLI `--json`.

Note:
- These models describe *what* the documentation says, not *how* it is scraped.
- Every instance is built fresh per request and never mutated (frozen).
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


DEFAULT_CODE_LANGUAGE = "typescript"


class ComponentReference(BaseModel):
    """One entry of the component directory."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        ...,
        min_length=1,
        description="Display label of the component (link text in the docs navigation).",
    )
    url: str = Field(
        ...,
        min_length=1,
        description="Absolute URL of the component documentation page.",
    )


class CodeExample(BaseModel):
    """A code snippet taken from a component preview block."""

    model_config = ConfigDict(frozen=True)

    title: str | None = Field(
        default=None,
        description="Optional title or description of the example.",
    )
    code: str = Field(
        ...,
        min_length=1,
        description="The code snippet for the example.",
    )
    language: str = Field(
        default=DEFAULT_CODE_LANGUAGE,
        min_length=1,
        description="The language of the code snippet (e.g., typescript, javascript, jsx).",
    )


class ApiProperty(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(..., min_length=1)
    type: str = Field(..., min_length=1)
    description: str | None = None
    default_value: str | None = Field(default=None, alias="defaultValue")


class ApiEvent(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    type: str = Field(..., min_length=1)
    description: str | None = None


class ComponentApi(BaseModel):
    """Props and events tables of a component page.

    Known precision loss:
    - Scrapers report an empty API as "not found" (None). A page that exists
      but documents neither props nor events (e.g. only slots) therefore looks
      the same as a missing page.
    """

    model_config = ConfigDict(frozen=True)

    props: list[ApiProperty] = Field(
        default_factory=list,
        description="Component properties (props).",
    )
    events: list[ApiEvent] = Field(
        default_factory=list,
        description="Component events.",
    )

    @property
    def is_empty(self) -> bool:
        return not self.props and not self.events
