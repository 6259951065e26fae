"""AI-assisted next-status suggestion for an asset.

A thin call-through to a chat provider. The model's answer is returned
as raw text next to an explicit mapping onto AssetStatus; the caller
decides whether to apply it.
"""

import logging

import httpx

from asset_tracker.application.interfaces import AssetRepository, ChatProvider
from asset_tracker.domain.entities import AssetStatus, ChatMessage, StatusSuggestion
from asset_tracker.domain.exceptions import (
    ChatProviderError,
    NotFoundError,
    ServiceUnavailableError,
)

logger = logging.getLogger(__name__)

LLM_MAX_TOKENS = 20
"""The answer is a single status word."""

_SYSTEM_PROMPT = "You are an AI assistant helping users determine the next status of an asset."


def build_prompt(
    asset_id: str,
    current_status: str,
    status_history: list[str],
    user_notes: str | None = None,
) -> str:
    """Render the user prompt sent to the model."""
    lines = [
        f"The asset has the following ID: {asset_id}",
        f"The current status is: {current_status}",
        "The status history is:",
        *(f"- {entry}" for entry in status_history),
    ]
    if user_notes and user_notes.strip():
        lines += ["", "The user has provided the following information:", user_notes.strip()]
    allowed = ", ".join(s.value for s in AssetStatus)
    lines += [
        "",
        "Based on this information, suggest the next status for the asset. "
        f"The status should be one of the following: {allowed}.",
        "Return ONLY the suggested status.",
    ]
    return "\n".join(lines)


class StatusSuggestionService:
    """Asks the configured chat provider for a status suggestion."""

    def __init__(
        self,
        asset_repository: AssetRepository,
        chat_provider: ChatProvider | None = None,
        model: str = "",
    ):
        self._assets = asset_repository
        self._chat_provider = chat_provider
        self._model = model

    async def suggest(
        self,
        asset_id: str,
        current_status: str,
        status_history: list[str],
        user_notes: str | None = None,
    ) -> StatusSuggestion:
        """Return the model's suggestion, or an unavailable result on any provider failure."""
        try:
            return await self._request_suggestion(
                asset_id, current_status, status_history, user_notes
            )
        except ServiceUnavailableError as exc:
            logger.warning("Status suggestion for %s unavailable: %s", asset_id, exc)
            return StatusSuggestion(asset_id=asset_id, available=False, message=exc.message)

    async def suggest_for_asset(self, asset_id: str, user_notes: str | None = None) -> StatusSuggestion:
        """Load the asset and ask for a suggestion based on its recorded history."""
        asset = await self._assets.get_by_id(asset_id) if asset_id else None
        if asset is None:
            raise NotFoundError("Asset", asset_id)
        history = [f"{entry.date.isoformat()}: {entry.status.value}" for entry in asset.history]
        return await self.suggest(asset.id, asset.status.value, history, user_notes)

    async def _request_suggestion(
        self,
        asset_id: str,
        current_status: str,
        status_history: list[str],
        user_notes: str | None,
    ) -> StatusSuggestion:
        if self._chat_provider is None or not self._model:
            raise ServiceUnavailableError("AI suggestion unavailable: no provider configured")

        messages = [
            ChatMessage(role="system", content=_SYSTEM_PROMPT),
            ChatMessage(
                role="user",
                content=build_prompt(asset_id, current_status, status_history, user_notes),
            ),
        ]
        try:
            result = await self._chat_provider.complete(
                messages, self._model, temperature=0.0, max_tokens=LLM_MAX_TOKENS
            )
        except ChatProviderError as exc:
            raise ServiceUnavailableError(f"AI suggestion unavailable: {exc.message}") from exc
        except httpx.HTTPError as exc:
            raise ServiceUnavailableError("AI suggestion unavailable: provider unreachable") from exc

        raw_text = result.content.strip()
        parsed = AssetStatus.parse(raw_text)
        logger.info(
            "Status suggestion for %s: %r (parsed=%s, tokens=%d)",
            asset_id,
            raw_text,
            parsed.value if parsed else None,
            result.usage.total_tokens,
        )
        return StatusSuggestion(
            asset_id=asset_id,
            available=True,
            raw_text=raw_text,
            parsed_status=parsed,
            model=result.model,
        )
