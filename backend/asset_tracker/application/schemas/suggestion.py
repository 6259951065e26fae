"""Pydantic DTOs for AI status suggestions."""

from pydantic import BaseModel, Field

from asset_tracker.domain.entities import AssetStatus, StatusSuggestion


class StatusSuggestionRequest(BaseModel):
    """Optional free-text notes describing the asset's condition."""

    user_notes: str | None = Field(None, max_length=2000, examples=["Leg is wobbly"])


class StatusSuggestionResponse(BaseModel):
    """Suggestion outcome. ``suggested_status`` is the raw model output."""

    asset_id: str
    available: bool
    suggested_status: str = ""
    parsed_status: AssetStatus | None = None
    model: str = ""
    message: str | None = None

    @classmethod
    def from_suggestion(cls, suggestion: StatusSuggestion) -> "StatusSuggestionResponse":
        return cls(
            asset_id=suggestion.asset_id,
            available=suggestion.available,
            suggested_status=suggestion.raw_text,
            parsed_status=suggestion.parsed_status,
            model=suggestion.model,
            message=suggestion.message,
        )
