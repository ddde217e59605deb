"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without leaking into the CLI.
- Lets adapters (HTTP/scraper) and the tool server read config consistently.
- URL templates live on the settings object so tests can point at fixture origins.
"""

from __future__ import annotations

from urllib.parse import quote

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Central application configuration.

    Why pydantic-settings:
    - Typing + validation at the edge (env vars) without polluting the Core.
    - A single configuration contract for CLI, server and adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="HEROUI_MCP_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    base_url: str = Field(
        default="https://www.heroui.com",
        min_length=8,
        description="Origin of the documentation site (scheme + host).",
    )
    docs_path: str = Field(
        default="/docs",
        description="Path under the origin where the documentation lives.",
    )
    introduction_path: str = Field(
        default="/guide/introduction",
        description="Docs page whose navigation lists every component.",
    )
    components_path: str = Field(
        default="/components",
        description="Docs path prefix of the per-component pages.",
    )

    http_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Per-request timeout (seconds). Unset keeps the httpx default.",
    )
    user_agent: str | None = Field(
        default=None,
        description="Optional User-Agent override. Unset keeps the httpx default.",
    )

    log_level: str = Field(
        default="INFO",
        description="Process log level (DEBUG, INFO, WARNING, ERROR).",
    )
    server_name: str = Field(
        default="HeroUI MCP Server",
        min_length=1,
        description="Name advertised to the MCP host.",
    )

    @property
    def origin(self) -> str:
        return self.base_url.rstrip("/")

    @property
    def docs_url(self) -> str:
        return f"{self.origin}{self.docs_path}"

    @property
    def introduction_url(self) -> str:
        return f"{self.docs_url}{self.introduction_path}"

    @property
    def components_prefix(self) -> str:
        """Path prefix every component link starts with (e.g. `/docs/components/`)."""

        return f"{self.docs_path.rstrip('/')}{self.components_path.rstrip('/')}/"

    def component_url(self, component_id: str) -> str:
        """Canonical page URL for a component; the id is lower-cased and path-quoted."""

        slug = quote(component_id.lower(), safe="")
        return f"{self.origin}{self.components_prefix}{slug}"
