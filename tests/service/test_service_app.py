"""Tests for the FastAPI service mode."""

from __future__ import annotations

import pytest

pytest.importorskip("fastapi")
pytest.importorskip("httpx")

from fastapi.testclient import TestClient  # noqa: E402

from cemdoc.converter import Converter  # noqa: E402
from cemdoc.service import create_app  # noqa: E402
from tests._fixtures.manifest_builder import declaration, field, manifest, module  # noqa: E402


class _RecordingConverter(Converter):
    def __init__(self) -> None:
        super().__init__()
        self.calls: list[object] = []

    def render(self, manifest, options=None):  # type: ignore[override]
        self.calls.append(options)
        return super().render(manifest, options)


@pytest.fixture
def converter() -> _RecordingConverter:
    return _RecordingConverter()


@pytest.fixture
def client(converter: _RecordingConverter) -> TestClient:
    return TestClient(create_app(lambda: converter))


def test_health_endpoint(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_render_endpoint_applies_options(client: TestClient, converter: _RecordingConverter) -> None:
    payload = {
        "manifest": manifest(
            module("a.js", declarations=[declaration("class", "A", members=[field("x"), field("y", "private")])])
        ),
        "heading_offset": 1,
        "private": "hidden",
    }

    response = client.post("/render", json=payload)

    assert response.status_code == 200
    markdown = response.json()["markdown"]
    assert markdown.startswith("## `a.js`:\n")
    assert "| y |" not in markdown
    assert converter.calls[0].private == "hidden"


def test_render_endpoint_rejects_manifest_without_modules(client: TestClient) -> None:
    response = client.post("/render", json={"manifest": {"schemaVersion": "1.0.0"}})

    assert response.status_code == 400
    assert "modules" in response.json()["detail"]


def test_render_endpoint_rejects_unknown_privacy_mode(client: TestClient) -> None:
    response = client.post("/render", json={"manifest": {"modules": []}, "private": "all"})

    assert response.status_code == 400
