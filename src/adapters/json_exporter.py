"""JSON export of scraped documentation.

Why JSON:
- Interoperability with other tooling and pipelines (`--json` on the CLI).
- Same field names the MCP tools expose (`defaultValue`, not `default_value`).
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Sequence, Union

from pydantic import BaseModel

Exportable = Union[BaseModel, Sequence[BaseModel], None]


def to_jsonable(payload: Exportable) -> object:
    if payload is None:
        return None
    if isinstance(payload, BaseModel):
        return payload.model_dump(mode="json", by_alias=True)
    return [item.model_dump(mode="json", by_alias=True) for item in payload]


def dumps_json(payload: Exportable) -> str:
    """Serialize models to UTF-8 friendly JSON with a stable format."""

    return json.dumps(to_jsonable(payload), ensure_ascii=False, indent=2, sort_keys=True) + "\n"


def export_json(*, payload: Exportable, output_path: Path) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(dumps_json(payload), encoding="utf-8")
    return output_path
