"""Tests for AppSettings URL templates and env overrides."""

from __future__ import annotations

from core.config import AppSettings


def test_default_urls_point_at_heroui() -> None:
    settings = AppSettings()

    assert settings.docs_url == "https://www.heroui.com/docs"
    assert settings.introduction_url == "https://www.heroui.com/docs/guide/introduction"
    assert settings.components_prefix == "/docs/components/"
    assert settings.http_timeout_seconds is None
    assert settings.user_agent is None


def test_component_url_lower_cases_and_quotes() -> None:
    settings = AppSettings()

    assert settings.component_url("Button") == "https://www.heroui.com/docs/components/button"
    assert settings.component_url("../Etc") == "https://www.heroui.com/docs/components/..%2Fetc"
    assert settings.component_url("date picker") == "https://www.heroui.com/docs/components/date%20picker"


def test_env_overrides(monkeypatch) -> None:
    monkeypatch.setenv("HEROUI_MCP_BASE_URL", "http://fixtures.local/")
    monkeypatch.setenv("HEROUI_MCP_HTTP_TIMEOUT_SECONDS", "3")

    settings = AppSettings()

    assert settings.origin == "http://fixtures.local"
    assert settings.introduction_url == "http://fixtures.local/docs/guide/introduction"
    assert settings.http_timeout_seconds == 3.0
