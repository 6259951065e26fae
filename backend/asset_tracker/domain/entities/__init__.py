from .action_result import ActionResult
from .asset import (
    Asset,
    AssetStatus,
    HistoryEntry,
    code_prefix_for,
    format_asset_code,
    utc_today,
)
from .chat_message import ChatMessage, TokenUsage, ChatCompletionResult
from .report import InventoryReport, RoomReport
from .room import Room
from .suggestion import StatusSuggestion

__all__ = [
    "ActionResult",
    "Asset",
    "AssetStatus",
    "HistoryEntry",
    "code_prefix_for",
    "format_asset_code",
    "utc_today",
    "ChatMessage",
    "TokenUsage",
    "ChatCompletionResult",
    "InventoryReport",
    "RoomReport",
    "Room",
    "StatusSuggestion",
]
