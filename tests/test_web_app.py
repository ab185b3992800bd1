"""Tests for the FastAPI web app."""

import importlib.util
from pathlib import Path

import pytest

pytest.importorskip("fastapi")
pytest.importorskip("httpx")

from fastapi.testclient import TestClient  # noqa: E402

APP_PATH = Path(__file__).resolve().parents[1] / "app" / "src" / "main.py"


@pytest.fixture(scope="module")
def client() -> TestClient:
    spec = importlib.util.spec_from_file_location("fumen_renderer_web", APP_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return TestClient(module.app)


def test_render_endpoint_returns_gif(client):
    """GET /api/render renders query fumen data."""
    response = client.get("/api/render", params={"data": "v115@vhBVQJAAA", "options": "speed=2"})

    assert response.status_code == 200
    assert response.headers["content-type"] == "image/gif"
    assert response.content.startswith(b"GIF89a")


def test_render_endpoint_webp(client):
    """The format parameter selects WebP."""
    response = client.get("/api/render", params={"data": "v115@vhAAgH", "format": "webp"})

    assert response.status_code == 200
    assert response.headers["content-type"] == "image/webp"


def test_render_endpoint_rejects_bad_data(client):
    """Undecodable or missing fumen data is a client error."""
    assert client.get("/api/render", params={"data": "v115@vh"}).status_code == 400
    assert client.get("/api/render", params={"data": "nothing"}).status_code == 400


def test_render_endpoint_rejects_unknown_format(client):
    """Unknown formats are a client error."""
    response = client.get("/api/render", params={"data": "v115@vhAAgH", "format": "bmp"})

    assert response.status_code == 400


def test_message_endpoint(client):
    """Messages render when they carry fumen data and are skipped otherwise."""
    skipped = client.post("/api/message", json={"content": "hello"})
    rendered = client.post("/api/message", json={"content": "see v115@vhAAgH speed=2"})

    assert skipped.status_code == 204
    assert rendered.status_code == 200
    assert rendered.content.startswith(b"GIF89a")
