"""Tests for the Typer CLI (lookup commands, JSON export)."""

from __future__ import annotations

import importlib.util
import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

import cli.main as cli_main
from core.domain.models import ApiProperty, CodeExample, ComponentApi, ComponentReference
from core.errors import ScrapingError

runner = CliRunner()


@pytest.fixture
def use_source(monkeypatch):
    def _install(source):
        monkeypatch.setattr(cli_main, "build_source", lambda settings: source)
        return source

    return _install


def test_components_json(use_source, make_source) -> None:
    use_source(make_source(components=[ComponentReference(name="Button", url="https://www.heroui.com/docs/components/button")]))

    result = runner.invoke(cli_main.app, ["components", "--json"])

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == [{"name": "Button", "url": "https://www.heroui.com/docs/components/button"}]


def test_components_table(use_source, make_source) -> None:
    use_source(make_source(components=[ComponentReference(name="Accordion", url="https://www.heroui.com/docs/components/accordion")]))

    result = runner.invoke(cli_main.app, ["components"])

    assert result.exit_code == 0, result.output
    assert "Accordion" in result.stdout


def test_examples_json_written_to_file(use_source, make_source, tmp_path: Path) -> None:
    use_source(make_source(examples=[CodeExample(title="Basic Usage", code="<Button />", language="jsx")]))
    out = tmp_path / "out" / "examples.json"

    result = runner.invoke(cli_main.app, ["examples", "button", "--output", str(out)])

    assert result.exit_code == 0, result.output
    assert json.loads(out.read_text(encoding="utf-8")) == [
        {"title": "Basic Usage", "code": "<Button />", "language": "jsx"}
    ]


def test_api_json_uses_wire_field_names(use_source, make_source) -> None:
    api = ComponentApi(props=[ApiProperty(name="size", type="string", default_value="md")])
    use_source(make_source(api=api))

    result = runner.invoke(cli_main.app, ["api", "button", "--json"])

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == {
        "props": [{"name": "size", "type": "string", "description": None, "defaultValue": "md"}],
        "events": [],
    }


def test_api_not_found_message(use_source, make_source) -> None:
    use_source(make_source(api=None))

    result = runner.invoke(cli_main.app, ["api", "avatar"])

    assert result.exit_code == 0, result.output
    assert "No API documentation found" in result.stdout


def test_scraping_error_exits_non_zero(use_source, make_source) -> None:
    use_source(make_source(error=ScrapingError("Failed to fetch x: Service Unavailable", status_code=503)))

    result = runner.invoke(cli_main.app, ["examples", "button"])

    assert result.exit_code == 1


def test_serve_rejects_unknown_transport() -> None:
    result = runner.invoke(cli_main.app, ["serve", "--transport", "carrier-pigeon"])

    assert result.exit_code != 0


def test_doctor_reports_selector_drift(monkeypatch) -> None:
    import cli.doctor as doctor

    async def http_ok(settings):
        return True, "HTTP 200"

    async def no_components(settings):
        return False, "0 components matched; the site structure may have changed"

    monkeypatch.setattr(doctor, "_check_http", http_ok)
    monkeypatch.setattr(doctor, "_check_selectors", no_components)

    result = runner.invoke(cli_main.app, ["doctor", "run"])

    assert result.exit_code == 0, result.output
    assert "FAIL" in result.stdout
    assert "no component links matched" in result.stdout


def test_checkout_entry_point_dispatches_to_cli() -> None:
    path = Path(__file__).resolve().parent.parent / "main.py"
    module_spec = importlib.util.spec_from_file_location("checkout_main", path)
    module = importlib.util.module_from_spec(module_spec)
    module_spec.loader.exec_module(module)

    assert module.run is cli_main.run
