"""OpenRouter API client — implements the ChatProvider interface.

Talks to the OpenRouter chat completions endpoint
(https://openrouter.ai/api/v1/chat/completions) with httpx.
"""

import logging

import httpx

from asset_tracker.application.interfaces import ChatProvider
from asset_tracker.domain.entities import ChatCompletionResult, ChatMessage, TokenUsage
from asset_tracker.domain.exceptions import ChatProviderError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30.0


class OpenRouterClient(ChatProvider):
    """Infrastructure adapter for the OpenRouter API.

    An injected ``http_client`` is reused across calls and left open;
    otherwise a short-lived client is created per request.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://openrouter.ai/api/v1",
        app_name: str = "Asset Tracker",
        http_client: httpx.AsyncClient | None = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._app_name = app_name
        self._http_client = http_client
        self._timeout = timeout

    @property
    def provider_name(self) -> str:
        return "openrouter"

    def _get_headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
            "X-Title": self._app_name,
        }

    def _build_payload(
        self,
        messages: list[ChatMessage],
        model: str,
        *,
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> dict:
        payload: dict = {
            "model": model,
            "messages": [{"role": m.role, "content": m.content} for m in messages],
        }
        if temperature is not None:
            payload["temperature"] = temperature
        if max_tokens is not None:
            payload["max_tokens"] = max_tokens
        return payload

    async def complete(
        self,
        messages: list[ChatMessage],
        model: str,
        *,
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> ChatCompletionResult:
        """Send a non-streaming chat completion to OpenRouter."""
        payload = self._build_payload(
            messages, model, temperature=temperature, max_tokens=max_tokens
        )
        url = f"{self._base_url}/chat/completions"

        client = self._http_client or httpx.AsyncClient(timeout=self._timeout)
        should_close = self._http_client is None

        try:
            logger.debug("POST %s model=%s", url, model)
            response = await client.post(url, headers=self._get_headers(), json=payload)
            if response.status_code != 200:
                self._raise_provider_error(response)
            return self._parse_completion_response(response.json())
        finally:
            if should_close:
                await client.aclose()

    def _parse_completion_response(self, data: dict) -> ChatCompletionResult:
        """Parse the OpenRouter JSON response into a domain entity."""
        if "error" in data:
            error = data["error"]
            raise ChatProviderError(
                provider=self.provider_name,
                status_code=error.get("code", 500),
                message=error.get("message", "Unknown error"),
            )

        choices = data.get("choices", [])
        if not choices:
            raise ChatProviderError(
                provider=self.provider_name,
                status_code=500,
                message="No choices in response",
            )

        choice = choices[0]
        message = choice.get("message", {})
        usage_data = data.get("usage", {})

        return ChatCompletionResult(
            model=data.get("model", ""),
            content=message.get("content", "") or "",
            finish_reason=choice.get("finish_reason", "stop") or "stop",
            usage=TokenUsage(
                prompt_tokens=usage_data.get("prompt_tokens", 0),
                completion_tokens=usage_data.get("completion_tokens", 0),
                total_tokens=usage_data.get("total_tokens", 0),
                cost=usage_data.get("cost"),
            ),
            provider=self.provider_name,
        )

    def _raise_provider_error(self, response: httpx.Response) -> None:
        """Raise ChatProviderError from a non-200 httpx Response."""
        try:
            error = response.json().get("error", {})
            message = error.get("message", response.text)
        except ValueError:
            message = response.text

        raise ChatProviderError(
            provider=self.provider_name,
            status_code=response.status_code,
            message=message,
        )
