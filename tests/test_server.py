"""HTTP surface tests"""
import pytest
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock, MagicMock

from screen2code.config import Config
from screen2code.errors import UpstreamError
from screen2code.normalizer import TextSegment
from screen2code.pipeline import CodeGenerationPipeline
from screen2code.server import create_app

PNG = "data:image/png;base64,iVBORw0KGgo="


@pytest.fixture
def config() -> Config:
    return Config(
        vision_provider="anthropic",
        anthropic_api_key="sk-ant-test",
        anthropic_model="claude-test",
        openai_api_key=None,
        openai_model="gpt-4o",
        log_level="INFO",
        host="127.0.0.1",
        port=8000,
    )


@pytest.fixture
def vision() -> MagicMock:
    mock = MagicMock()
    mock.model = "claude-test"
    mock.generate = AsyncMock(return_value=[TextSegment("```html\n<main></main>\n```")])
    return mock


@pytest.fixture
def client(config, vision) -> TestClient:
    return TestClient(create_app(config, CodeGenerationPipeline(config, vision)))


def test_generate_returns_code(client):
    response = client.post("/api/generate", json={"image": PNG, "framework": "html"})

    assert response.status_code == 200
    assert response.json() == {"code": "<main></main>"}


def test_generate_missing_field_is_400(client):
    response = client.post("/api/generate", json={"framework": "html"})

    assert response.status_code == 400
    assert response.json() == {"error": "Missing required fields"}


def test_generate_invalid_json_is_400(client, vision):
    response = client.post(
        "/api/generate",
        content=b"{not json",
        headers={"content-type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid JSON body"}
    vision.generate.assert_not_called()


def test_generate_forwards_upstream_status(client, vision):
    vision.generate.side_effect = UpstreamError(429, "rate limited")

    response = client.post("/api/generate", json={"image": PNG, "framework": "react"})

    assert response.status_code == 429
    assert response.json() == {"error": "rate limited"}


def test_health_reports_provider_and_model(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "provider": "anthropic", "model": "claude-test"}
