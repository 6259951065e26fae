from .room import RoomCreate, RoomUpdate, RoomResponse
from .asset import (
    AssetAllocate,
    AssetMove,
    AssetResponse,
    AssetStatusUpdate,
    HistoryEntryResponse,
    ScanRequest,
)
from .suggestion import StatusSuggestionRequest, StatusSuggestionResponse
from .report import InventoryReportResponse, RoomReportResponse

__all__ = [
    "RoomCreate",
    "RoomUpdate",
    "RoomResponse",
    "AssetAllocate",
    "AssetMove",
    "AssetResponse",
    "AssetStatusUpdate",
    "HistoryEntryResponse",
    "ScanRequest",
    "StatusSuggestionRequest",
    "StatusSuggestionResponse",
    "InventoryReportResponse",
    "RoomReportResponse",
]
