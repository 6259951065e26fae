"""Unit tests for the OpenRouterClient."""

import json

import httpx
import pytest

from asset_tracker.domain.entities import ChatMessage
from asset_tracker.domain.exceptions import ChatProviderError
from asset_tracker.infrastructure.openrouter.openrouter_client import OpenRouterClient


# ── Helpers ──


def _mock_openrouter_response(content: str = "broken", model: str = "google/gemini-2.0-flash-001") -> dict:
    return {
        "id": "chatcmpl-test123",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
        "model": model,
        "usage": {"prompt_tokens": 52, "completion_tokens": 1, "total_tokens": 53, "cost": 0.00001},
    }


def _client_with(handler) -> OpenRouterClient:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return OpenRouterClient(
        api_key="sk-test", base_url="https://openrouter.test/api/v1/", http_client=http_client
    )


# ── Tests ──


@pytest.mark.asyncio
async def test_complete_sends_payload_and_parses_response():
    captured: dict = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["url"] = str(request.url)
        captured["headers"] = request.headers
        captured["body"] = json.loads(request.content)
        return httpx.Response(200, json=_mock_openrouter_response())

    client = _client_with(handler)
    result = await client.complete(
        [ChatMessage(role="system", content="sys"), ChatMessage(role="user", content="hi")],
        "google/gemini-2.0-flash-001",
        temperature=0.0,
        max_tokens=20,
    )

    assert captured["url"] == "https://openrouter.test/api/v1/chat/completions"
    assert captured["headers"]["Authorization"] == "Bearer sk-test"
    assert captured["headers"]["X-Title"] == "Asset Tracker"
    assert captured["body"] == {
        "model": "google/gemini-2.0-flash-001",
        "messages": [
            {"role": "system", "content": "sys"},
            {"role": "user", "content": "hi"},
        ],
        "temperature": 0.0,
        "max_tokens": 20,
    }
    assert result.content == "broken"
    assert result.usage.total_tokens == 53
    assert result.usage.cost == 0.00001
    assert result.provider == "openrouter"


@pytest.mark.asyncio
async def test_http_error_raises_provider_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, json={"error": {"code": 401, "message": "No auth credentials found"}})

    with pytest.raises(ChatProviderError) as exc_info:
        await _client_with(handler).complete([ChatMessage(role="user", content="hi")], "m")

    assert exc_info.value.status_code == 401
    assert exc_info.value.message == "No auth credentials found"


@pytest.mark.asyncio
async def test_non_json_error_body_uses_text():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(502, text="Bad Gateway")

    with pytest.raises(ChatProviderError) as exc_info:
        await _client_with(handler).complete([ChatMessage(role="user", content="hi")], "m")

    assert exc_info.value.message == "Bad Gateway"


@pytest.mark.asyncio
async def test_error_in_200_body_raises():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"error": {"code": 429, "message": "Rate limited"}})

    with pytest.raises(ChatProviderError) as exc_info:
        await _client_with(handler).complete([ChatMessage(role="user", content="hi")], "m")

    assert exc_info.value.status_code == 429


@pytest.mark.asyncio
async def test_empty_choices_raises():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"model": "m", "choices": []})

    with pytest.raises(ChatProviderError, match="No choices"):
        await _client_with(handler).complete([ChatMessage(role="user", content="hi")], "m")
