"""Domain entity for AI status suggestions."""

from dataclasses import dataclass

from .asset import AssetStatus


@dataclass
class StatusSuggestion:
    """Outcome of asking the text-generation provider for a next status.

    ``raw_text`` is whatever the model returned. It is never applied as a
    status directly; ``parsed_status`` is the explicit mapping onto
    ``AssetStatus`` and is None when the text names no known status.
    """

    asset_id: str
    available: bool
    raw_text: str = ""
    parsed_status: AssetStatus | None = None
    model: str = ""
    message: str | None = None
